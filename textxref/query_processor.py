"""
Query processing module
Read-side helpers: ranking, statistics, and index serialization
"""

from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Tuple

from .core import ExportOrder


@dataclass
class TextStats:
    """Summary of one text's index"""
    unique_words: int
    total_words: int
    top_words: List[Tuple[str, int]] = field(default_factory=list)


def ordered_terms(references: Dict[str, List[int]], order: ExportOrder) -> List[str]:
    """Terms of an index in the requested line order"""
    if order == ExportOrder.LEXICAL:
        return sorted(references)
    return list(references)


def format_references(references: Dict[str, List[int]],
                      order: ExportOrder = ExportOrder.LEXICAL) -> List[str]:
    """
    Serialize an index to export lines: `word:pos0,pos1,...`
    One line per term, positions ascending, no trailing delimiter.
    """
    lines = []
    for term in ordered_terms(references, order):
        positions = ','.join(str(pos) for pos in references[term])
        lines.append(f"{term}:{positions}")
    return lines


def rank_words(references: Dict[str, List[int]], top_k: int) -> List[Tuple[str, int]]:
    """
    Rank terms by occurrence count, most frequent first.
    Equal counts are broken by ascending term.
    """
    counts = Counter({term: len(positions) for term, positions in references.items()})
    ranked = sorted(counts.items(), key=lambda item: (-item[1], item[0]))
    return ranked[:top_k]


def compute_stats(references: Dict[str, List[int]], total_words: int, top_k: int) -> TextStats:
    return TextStats(
        unique_words=len(references),
        total_words=total_words,
        top_words=rank_words(references, top_k),
    )


def max_position(references: Dict[str, List[int]]) -> int:
    """Largest recorded position, or -1 for an empty index"""
    return max((max(positions) for positions in references.values() if positions), default=-1)


def shift_positions(positions: Iterable[int], offset: int) -> List[int]:
    return [pos + offset for pos in positions]
