"""
TextXref: a cross-reference index over named texts
Maps every normalized word of a text to the token positions where it occurs
"""

from .core import ErrorKind, ExportOrder, IndexConfig, XrefError
from .preprocessor import TextPreprocessor
from .index import IndexStore, TextRecord
from .query_processor import TextStats, format_references, rank_words
from .index_builder import IndexBuilder, ImportReport, derive_text_name, read_text_file
from .reporter import Reporter

__version__ = "1.0.0"
__all__ = [
    "ErrorKind",
    "ExportOrder",
    "IndexConfig",
    "XrefError",
    "TextPreprocessor",
    "IndexStore",
    "TextRecord",
    "TextStats",
    "format_references",
    "rank_words",
    "IndexBuilder",
    "ImportReport",
    "derive_text_name",
    "read_text_file",
    "Reporter",
]
