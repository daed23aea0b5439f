"""
Cross-reference index store
Owns every named text together with its word -> positions index
"""

import copy
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Union

from .core import ErrorKind, IndexConfig, XrefError
from .index_builder import derive_text_name, read_text_file
from .preprocessor import TextPreprocessor
from .query_processor import (
    TextStats, compute_stats, format_references, max_position, shift_positions
)

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


@dataclass
class TextRecord:
    """A stored text and the index derived from it"""
    content: str
    references: Dict[str, List[int]] = field(default_factory=dict)


class IndexStore:
    """
    Named texts with positional word indices.

    Every mutator validates all of its preconditions first and then
    publishes a freshly built TextRecord, so a failed call never leaves
    a half-updated record behind.
    """

    def __init__(self, config: Optional[IndexConfig] = None):
        self.config = config or IndexConfig()
        self.preprocessor = TextPreprocessor()
        self.texts: Dict[str, TextRecord] = {}

    # ---- record helpers -------------------------------------------------

    def _make_record(self, content: str) -> TextRecord:
        return TextRecord(content=content,
                          references=self.preprocessor.build_references(content))

    def _publish(self, name: str, record: TextRecord):
        self.texts[name] = record
        logger.debug("Published %s: %d terms", name, len(record.references))

    def _require(self, name: str) -> TextRecord:
        record = self.texts.get(name)
        if record is None:
            raise XrefError(ErrorKind.NOT_FOUND, name)
        return record

    def _check_new_name(self, name: str):
        if not self.preprocessor.is_valid_name(name):
            raise XrefError(ErrorKind.INVALID_NAME, name)
        if name in self.texts:
            raise XrefError(ErrorKind.ALREADY_EXISTS, name)

    def _replaced_content(self, record: TextRecord, old_word: str, new_word: str) -> Optional[str]:
        """
        Content with every token indexed under old_word overwritten by the
        literal new_word, or None when old_word has no index entry.
        """
        positions = record.references.get(self.preprocessor.normalize(old_word))
        if not positions:
            return None
        tokens = self.preprocessor.tokenize(record.content)
        for pos in positions:
            if pos < len(tokens):
                tokens[pos] = new_word
        return self.preprocessor.join(tokens)

    # ---- accessors ------------------------------------------------------

    def __contains__(self, name: str) -> bool:
        return name in self.texts

    def __len__(self) -> int:
        return len(self.texts)

    def names(self) -> List[str]:
        return sorted(self.texts)

    def get(self, name: str) -> TextRecord:
        return self._require(name)

    def token_count(self, name: str) -> int:
        return self.preprocessor.token_count(self._require(name).content)

    # ---- single-text mutators -------------------------------------------

    def build(self, name: str, content: str):
        """Create a text and index it"""
        if not self.preprocessor.is_valid_name(name):
            raise XrefError(ErrorKind.INVALID_NAME, name)
        if not content:
            raise XrefError(ErrorKind.EMPTY_CONTENT, name)
        if name in self.texts:
            raise XrefError(ErrorKind.ALREADY_EXISTS, name)
        self._publish(name, self._make_record(content))

    def insert(self, name: str, position: int, word: str):
        """Insert word as a new token at position (== token count appends)"""
        if not self.preprocessor.is_valid_word(word):
            raise XrefError(ErrorKind.INVALID_WORD, name)
        record = self._require(name)
        tokens = self.preprocessor.tokenize(record.content)
        if position < 0 or position > len(tokens):
            raise XrefError(ErrorKind.INVALID_POSITION, name)
        tokens.insert(position, word)
        self._publish(name, self._make_record(self.preprocessor.join(tokens)))

    def remove(self, name: str, start: int, end: int):
        """Remove the inclusive token range [start, end]"""
        record = self._require(name)
        tokens = self.preprocessor.tokenize(record.content)
        if start < 0 or start > end or end >= len(tokens):
            raise XrefError(ErrorKind.INVALID_RANGE, name)
        del tokens[start:end + 1]
        self._publish(name, self._make_record(self.preprocessor.join(tokens)))

    def replace(self, name: str, old_word: str, new_word: str):
        """Overwrite every occurrence of old_word with the literal new_word"""
        record = self._require(name)
        if not old_word:
            raise XrefError(ErrorKind.EMPTY_WORD, name)
        content = self._replaced_content(record, old_word, new_word)
        if content is None:
            raise XrefError(ErrorKind.WORD_NOT_FOUND, name)
        self._publish(name, self._make_record(content))

    # ---- multi-text operators -------------------------------------------

    def concat(self, new_name: str, name1: str, name2: str):
        """New text from two others, re-indexed from the joined content"""
        self._check_new_name(new_name)
        first = self._require(name1)
        second = self._require(name2)
        self._publish(new_name, self._make_record(f"{first.content} {second.content}"))

    def merge(self, new_name: str, name1: str, name2: str):
        """
        New text from two others, indexed by shifting the second index.

        The offset is the token count of the first text, which is exactly
        where the second text's first token lands after joining, so the
        result equals what concat would build.
        """
        self._check_new_name(new_name)
        first = self._require(name1)
        second = self._require(name2)

        offset = self.preprocessor.token_count(first.content)
        references = copy.deepcopy(first.references)
        for term, positions in second.references.items():
            references.setdefault(term, []).extend(shift_positions(positions, offset))

        merged = TextRecord(content=f"{first.content} {second.content}",
                            references=references)
        self._publish(new_name, merged)

    def double_replace(self, name1: str, name2: str, word1: str, word2: str):
        """
        Swap two words across two texts: word1 becomes word2 in the first
        text and word2 becomes word1 in the second. Both or neither change.
        """
        if name1 == name2:
            raise XrefError(ErrorKind.SAME_TEXT, name1)
        record1 = self._require(name1)
        record2 = self._require(name2)
        if not word1 or not word2:
            raise XrefError(ErrorKind.EMPTY_WORD)

        content1 = self._replaced_content(record1, word1, word2)
        if content1 is None:
            raise XrefError(ErrorKind.WORD_NOT_FOUND_IN_TEXT1, name1)
        content2 = self._replaced_content(record2, word2, word1)
        if content2 is None:
            raise XrefError(ErrorKind.WORD_NOT_FOUND_IN_TEXT2, name2)

        new_record1 = self._make_record(content1)
        new_record2 = self._make_record(content2)
        self._publish(name1, new_record1)
        self._publish(name2, new_record2)

    # ---- queries --------------------------------------------------------

    def search(self, name: str, word: str) -> List[int]:
        """Positions of word in a text; empty when it does not occur"""
        record = self._require(name)
        if not word:
            raise XrefError(ErrorKind.EMPTY_WORD, name)
        term = self.preprocessor.normalize(word)
        return list(record.references.get(term, []))

    def reconstruct(self, name: str, output: Optional[PathLike] = None) -> Optional[str]:
        """
        Verify a text's index against its content.
        Without output, returns the content; with output, writes the
        index lines to a file that must not exist yet.
        """
        record = self._require(name)
        total = self.preprocessor.token_count(record.content)
        if max_position(record.references) >= total:
            raise XrefError(ErrorKind.CORRUPTED_INDEX, name)

        if output is None:
            return record.content

        self._write_index(record, output, overwrite=False)
        return None

    def export(self, name: str, target: PathLike):
        """Write a text's index lines to target"""
        record = self._require(name)
        self._write_index(record, target, overwrite=self.config.export_overwrite)

    def stats(self, name: str) -> TextStats:
        record = self._require(name)
        total = self.preprocessor.token_count(record.content)
        return compute_stats(record.references, total, self.config.top_k)

    def import_text(self, path: PathLike) -> str:
        """Read a file and build a text named after it; returns the name"""
        content = read_text_file(path, self.config.encoding)
        name = derive_text_name(path)
        self.build(name, content)
        return name

    def _write_index(self, record: TextRecord, target: PathLike, overwrite: bool):
        lines = format_references(record.references, self.config.export_order)
        mode = 'w' if overwrite else 'x'
        try:
            with open(target, mode, encoding=self.config.encoding) as f:
                for line in lines:
                    f.write(line + '\n')
        except FileExistsError:
            raise XrefError(ErrorKind.IO_EXISTS)
        except OSError as e:
            logger.debug("Cannot write %s: %s", target, e)
            raise XrefError(ErrorKind.IO_ERROR) from e
