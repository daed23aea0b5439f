"""
Core types and enums for TextXref
Handles error kinds, export ordering, and configuration
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    """Failure conditions raised by index operations"""
    INVALID_NAME = '<INVALID NAME>'
    EMPTY_CONTENT = '<EMPTY TEXT>'
    ALREADY_EXISTS = '<ALREADY EXISTS>'
    NOT_FOUND = '<NOT FOUND>'
    EMPTY_WORD = '<EMPTY WORD>'
    INVALID_WORD = '<INVALID WORD>'
    WORD_NOT_FOUND = '<WORD NOT FOUND>'
    WORD_NOT_FOUND_IN_TEXT1 = '<WORD NOT FOUND IN TEXT1>'
    WORD_NOT_FOUND_IN_TEXT2 = '<WORD NOT FOUND IN TEXT2>'
    INVALID_POSITION = '<INVALID POSITION>'
    INVALID_RANGE = '<INVALID RANGE>'
    CORRUPTED_INDEX = '<CORRUPTED INDEX>'
    FILE_NOT_FOUND = '<FILE NOT FOUND>'
    INVALID_FORMAT = '<INVALID FORMAT>'
    IO_ERROR = '<IO ERROR>'
    IO_EXISTS = '<IO EXISTS>'
    SAME_TEXT = '<SAME TEXT>'
    INVALID_ARGUMENTS = '<INVALID ARGUMENTS>'


class ExportOrder(Enum):
    """Line order used when serializing an index"""
    LEXICAL = 'lexical'
    FIRST_OCCURRENCE = 'first'


class XrefError(Exception):
    """
    Raised when an operation cannot be applied.
    `kind` names the violated condition; `name` is the text it concerns,
    when there is more than one candidate.
    """

    def __init__(self, kind: ErrorKind, name: Optional[str] = None):
        super().__init__(kind.value)
        self.kind = kind
        self.name = name

    def __str__(self) -> str:
        return self.kind.value


@dataclass
class IndexConfig:
    """Tunable behaviour of the store and its front end"""
    export_order: ExportOrder = ExportOrder.LEXICAL
    top_k: int = 5
    export_overwrite: bool = True
    encoding: str = 'utf-8'

    def __post_init__(self):
        if self.top_k < 0:
            raise ValueError(f"top_k must be non-negative, got {self.top_k}")
