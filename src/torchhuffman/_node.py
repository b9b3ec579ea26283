"""Huffman tree nodes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Hashable, Optional, Union


@dataclass
class Leaf:
    """Leaf of a Huffman tree.

    Attributes
    ----------
    symbol : Hashable
        Symbol labelling the leaf.
    weight : int
        Occurrence count of the symbol. Zero in reconstructed trees.
    """

    symbol: Hashable
    weight: int = 0


@dataclass
class Branch:
    """Internal node of a Huffman tree.

    Attributes
    ----------
    weight : int
        Sum of the children's weights. Zero in reconstructed trees.
    left : Leaf or Branch, optional
        Child reached by a ``False`` digit.
    right : Leaf or Branch, optional
        Child reached by a ``True`` digit.

    Notes
    -----
    Children are only ``None`` while :func:`tree_from_code` is still
    placing codes. Trees built by :func:`tree_from_frequency_table` always
    have both children.
    """

    weight: int = 0
    left: Optional[Node] = None
    right: Optional[Node] = None

    def child(self, digit: bool) -> Optional[Node]:
        return self.right if digit else self.left

    def set_child(self, digit: bool, node: Node) -> None:
        if digit:
            self.right = node
        else:
            self.left = node


Node = Union[Leaf, Branch]
