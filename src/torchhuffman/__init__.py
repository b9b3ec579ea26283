"""torchhuffman: Huffman coding with PyTorch tensor interoperability."""

from ._build_code import build_code
from ._code_statistics import (
    CodeStatistics,
    code_lengths,
    code_statistics,
    kraft_sum,
)
from ._decode import decode, decode_symbols
from ._encode import HuffmanCoding, encode
from ._exceptions import DecodeError, HuffmanError
from ._frequency_table import frequency_table
from ._node import Branch, Leaf, Node
from ._priority_queue import PriorityQueue
from ._tree_from_code import tree_from_code
from ._tree_from_frequency_table import tree_from_frequency_table

__all__ = [
    "Branch",
    "CodeStatistics",
    "DecodeError",
    "HuffmanCoding",
    "HuffmanError",
    "Leaf",
    "Node",
    "PriorityQueue",
    "build_code",
    "code_lengths",
    "code_statistics",
    "decode",
    "decode_symbols",
    "encode",
    "frequency_table",
    "kraft_sum",
    "tree_from_code",
    "tree_from_frequency_table",
]

__version__ = "0.1.0"
