"""
Command-line front end
Parses process arguments and runs the interactive command loop
"""

import argparse
import logging
import sys
from typing import Callable, Dict, List, Optional, TextIO

from .core import ErrorKind, ExportOrder, IndexConfig, XrefError
from .index import IndexStore
from .index_builder import IndexBuilder
from .reporter import Reporter

logger = logging.getLogger(__name__)

EXIT_COMMANDS = ('exit', 'quit')


def split_args(args: str, count: int) -> List[str]:
    """
    Split a command's argument string into exactly `count` parts.
    The last part keeps whatever follows, spaces included.
    """
    parts = args.split(None, count - 1)
    if len(parts) != count:
        raise XrefError(ErrorKind.INVALID_ARGUMENTS)
    return parts


def parse_int(value: str) -> int:
    try:
        return int(value)
    except ValueError:
        raise XrefError(ErrorKind.INVALID_ARGUMENTS)


class CommandShell:
    """Dispatches one command line at a time against a store"""

    def __init__(self, store: IndexStore, reporter: Optional[Reporter] = None):
        self.store = store
        self.reporter = reporter or Reporter()
        self.commands: Dict[str, Callable[[str], None]] = {
            'build': self._build,
            'reconstruct': self._reconstruct,
            'concat': self._concat,
            'search': self._search,
            'replace': self._replace,
            'insert': self._insert,
            'remove': self._remove,
            'import': self._import,
            'export': self._export,
            'stats': self._stats,
            'merge': self._merge,
            'double_replace': self._double_replace,
        }

    def execute(self, line: str) -> bool:
        """
        Run one command line.
        Returns False when the loop should stop.
        """
        line = line.strip()
        if not line:
            return True

        parts = line.split(None, 1)
        cmd = parts[0]
        args = parts[1] if len(parts) > 1 else ''

        if cmd in EXIT_COMMANDS:
            return False

        handler = self.commands.get(cmd)
        if handler is None:
            self.reporter.print_line(f"Unknown command: {cmd}")
            return True

        try:
            handler(args)
        except XrefError as e:
            logger.debug("%s failed: %s", cmd, e.kind.name)
            self.reporter.print_error(e)
        return True

    def run(self, stream: TextIO, prompt: str = '> '):
        """Read commands until EOF or an exit command"""
        while True:
            if prompt:
                self.reporter.out.write(prompt)
                self.reporter.out.flush()
            line = stream.readline()
            if not line:
                break
            if not self.execute(line):
                break

    # ---- handlers -------------------------------------------------------

    def _build(self, args: str):
        name, content = split_args(args, 2)
        self.store.build(name, content)
        self.reporter.print_ok()

    def _reconstruct(self, args: str):
        parts = args.split(None, 1)
        if not parts:
            raise XrefError(ErrorKind.INVALID_ARGUMENTS)
        if len(parts) == 1:
            self.reporter.print_line(self.store.reconstruct(parts[0]))
        else:
            self.store.reconstruct(parts[0], parts[1])

    def _concat(self, args: str):
        new_name, name1, name2 = split_args(args, 3)
        self.store.concat(new_name, name1, name2)
        self.reporter.print_ok()

    def _merge(self, args: str):
        new_name, name1, name2 = split_args(args, 3)
        self.store.merge(new_name, name1, name2)
        self.reporter.print_ok()

    def _search(self, args: str):
        name, word = split_args(args, 2)
        self.reporter.print_positions(self.store.search(name, word))

    def _replace(self, args: str):
        name, old_word, new_word = split_args(args, 3)
        self.store.replace(name, old_word, new_word)
        self.reporter.print_ok()

    def _insert(self, args: str):
        name, position, word = split_args(args, 3)
        self.store.insert(name, parse_int(position), word)
        self.reporter.print_ok()

    def _remove(self, args: str):
        name, start, end = split_args(args, 3)
        self.store.remove(name, parse_int(start), parse_int(end))
        self.reporter.print_ok()

    def _import(self, args: str):
        (path,) = split_args(args, 1)
        self.store.import_text(path)
        self.reporter.print_ok()

    def _export(self, args: str):
        name, target = split_args(args, 2)
        self.store.export(name, target)
        self.reporter.print_ok()

    def _stats(self, args: str):
        (name,) = split_args(args, 1)
        self.reporter.print_stats(self.store.stats(name))

    def _double_replace(self, args: str):
        name1, name2, word1, word2 = split_args(args, 4)
        self.store.double_replace(name1, name2, word1, word2)
        self.reporter.print_ok()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='textxref',
        description='Cross-reference index over named texts',
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument('files', nargs='*', help='Text files to import before the shell starts')
    parser.add_argument('--check', metavar='FILE', help='Validate that FILE imports cleanly and exit')
    parser.add_argument('--export', metavar='FILE', help='Accepted for compatibility; does nothing')
    parser.add_argument(
        '--export-order',
        choices=[order.value for order in ExportOrder],
        default=ExportOrder.LEXICAL.value,
        help='Line order of exported indices (default: lexical)'
    )
    parser.add_argument('--top', type=int, default=5, help='Words ranked by stats (default: 5)')
    parser.add_argument('--no-overwrite', action='store_true',
                        help='Refuse to export over an existing file')
    parser.add_argument('--encoding', default='utf-8', help='Encoding of imported files (default: utf-8)')
    parser.add_argument('--verbose', '-v', action='store_true', help='Enable debug logging')
    return parser


def main(argv: Optional[List[str]] = None,
         stdin: Optional[TextIO] = None,
         stdout: Optional[TextIO] = None,
         stderr: Optional[TextIO] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s'
    )

    if args.top < 0:
        parser.error('--top must be non-negative')

    config = IndexConfig(
        export_order=ExportOrder(args.export_order),
        top_k=args.top,
        export_overwrite=not args.no_overwrite,
        encoding=args.encoding,
    )
    store = IndexStore(config)
    builder = IndexBuilder(store)
    reporter = Reporter(stdout, stderr)

    if args.check:
        try:
            builder.check_file(args.check)
        except XrefError as e:
            reporter.print_error(e)
            return 1
        reporter.print_line("File is valid")
        return 0

    if args.export:
        logger.info("--export %s ignored", args.export)
        return 0

    report = builder.import_paths(args.files)
    if not report.ok:
        for error in report.failed.values():
            reporter.print_error(error)
        return 1

    CommandShell(store, reporter).run(stdin or sys.stdin)
    return 0


if __name__ == '__main__':
    sys.exit(main())
