"""
Index builder module
Handles importing text files into a store
"""

import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List, Union

from .core import ErrorKind, XrefError

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def read_text_file(path: PathLike, encoding: str = 'utf-8') -> str:
    """
    Read a whole file as text.
    Falls back to latin-1 when the file is not valid in `encoding`.
    """
    try:
        with open(path, 'rb') as fh:
            raw = fh.read()
    except OSError as e:
        logger.debug("Cannot read %s: %s", path, e)
        raise XrefError(ErrorKind.FILE_NOT_FOUND) from e

    try:
        content = raw.decode(encoding)
    except UnicodeDecodeError:
        content = raw.decode('latin-1')

    if not content:
        raise XrefError(ErrorKind.INVALID_FORMAT)
    return content


def derive_text_name(path: PathLike) -> str:
    """Text name for a file: its base name without the last extension"""
    name = re.split(r'[/\\]', str(path))[-1]
    if '.' in name:
        name = name.rsplit('.', 1)[0]
    return name


@dataclass
class ImportReport:
    """Outcome of a batch import"""
    imported: List[str] = field(default_factory=list)
    failed: Dict[str, XrefError] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.failed


class IndexBuilder:
    """
    Loads files into an IndexStore
    """

    def __init__(self, store: 'IndexStore'):
        self.store = store

    def import_file(self, path: PathLike) -> str:
        """Import one file; errors propagate to the caller"""
        name = self.store.import_text(path)
        logger.info("Imported %s as %s", path, name)
        return name

    def import_paths(self, paths: Iterable[PathLike]) -> ImportReport:
        """
        Import several files.
        A failing file is recorded in the report and the rest still load.
        """
        report = ImportReport()
        for path in paths:
            try:
                report.imported.append(self.import_file(path))
            except XrefError as e:
                logger.warning("Failed importing %s: %s", path, e)
                report.failed[str(path)] = e
        return report

    def import_directory(self, data_dir: PathLike, pattern: str = '*.txt') -> ImportReport:
        """Import every file under data_dir matching pattern, in sorted order"""
        files = [p for p in sorted(Path(data_dir).rglob(pattern)) if p.is_file()]
        logger.info("Found %d files under %s", len(files), data_dir)
        return self.import_paths(files)

    def check_file(self, path: PathLike) -> bool:
        """True when the file would import cleanly; the store keeps it"""
        self.import_file(path)
        return True
