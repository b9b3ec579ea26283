"""Testing utilities for Huffman coding."""

from . import strategies

__all__ = [
    "strategies",
]
