"""
Text preprocessing module
Handles tokenization, normalization, and index construction
"""

from collections import defaultdict
from typing import Dict, List, Tuple
from nltk.tokenize import WhitespaceTokenizer


class TextPreprocessor:
    """Splits content into positional tokens and folds them into index keys"""

    NAME_EXTRA_CHARS = frozenset('_-')

    def __init__(self):
        self.tokenizer = WhitespaceTokenizer()

    def tokenize(self, content: str) -> List[str]:
        """
        Split content on runs of whitespace.
        A token's position is its index in the returned list.
        """
        if not content:
            return []
        return self.tokenizer.tokenize(content)

    @staticmethod
    def normalize(token: str) -> str:
        """Drop every non-letter character and lowercase the rest"""
        return ''.join(ch for ch in token if ch.isalpha()).lower()

    @staticmethod
    def join(tokens: List[str]) -> str:
        """Canonical content: tokens separated by single spaces"""
        return ' '.join(tokens)

    def preprocess_with_positions(self, content: str) -> List[Tuple[str, int]]:
        """
        Tokenize and normalize content.
        Returns (term, position) pairs; tokens that normalize to nothing
        keep their position slot but produce no pair.
        """
        result = []
        for position, token in enumerate(self.tokenize(content)):
            term = self.normalize(token)
            if term:
                result.append((term, position))
        return result

    def build_references(self, content: str) -> Dict[str, List[int]]:
        """Build the word -> ascending positions map for content"""
        references = defaultdict(list)
        for term, position in self.preprocess_with_positions(content):
            references[term].append(position)
        return dict(references)

    def token_count(self, content: str) -> int:
        return len(self.tokenize(content))

    @classmethod
    def is_valid_name(cls, name: str) -> bool:
        if not name:
            return False
        return all(ch.isalnum() or ch in cls.NAME_EXTRA_CHARS for ch in name)

    @staticmethod
    def is_valid_word(word: str) -> bool:
        return bool(word) and word.isalpha()
