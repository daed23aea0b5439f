"""
Pytest configuration.

Provides stores seeded with a few small texts.
"""
import pytest

from textxref import IndexConfig, IndexStore


@pytest.fixture
def store():
    """Empty store with default configuration."""
    return IndexStore()


@pytest.fixture
def seeded_store():
    """Store holding the texts most tests operate on."""
    s = IndexStore(IndexConfig())
    s.build("a", "The cat sat on the Cat mat")
    s.build("nums", "one two three four five")
    s.build("b", "x y")
    return s
