"""
Reporting module
Formats operation results for the command line
"""

import sys
from typing import List, TextIO

from .query_processor import TextStats


class Reporter:
    """Print results and failures"""

    def __init__(self, out: TextIO = None, err: TextIO = None):
        self.out = out or sys.stdout
        self.err = err or sys.stderr

    @staticmethod
    def format_positions(positions: List[int]) -> str:
        return ' '.join(str(pos) for pos in positions)

    @staticmethod
    def format_stats(stats: TextStats) -> List[str]:
        lines = [
            f"Unique words: {stats.unique_words}",
            f"Total words: {stats.total_words}",
        ]
        for word, count in stats.top_words:
            lines.append(f"  {word}: {count}")
        return lines

    def print_ok(self):
        print("OK", file=self.out)

    def print_line(self, text: str):
        print(text, file=self.out)

    def print_positions(self, positions: List[int]):
        print(self.format_positions(positions), file=self.out)

    def print_stats(self, stats: TextStats):
        for line in self.format_stats(stats):
            print(line, file=self.out)

    def print_error(self, error: Exception):
        print(f"Error: {error}", file=self.err)

