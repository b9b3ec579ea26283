"""Hypothesis strategies for Huffman coding tests."""

from ._frequency_tables import frequency_tables
from ._symbol_strings import symbol_strings
from ._symbol_tensors import symbol_tensors

__all__ = [
    "frequency_tables",
    "symbol_strings",
    "symbol_tensors",
]
