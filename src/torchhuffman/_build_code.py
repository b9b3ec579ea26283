"""Code table extraction from a Huffman tree."""

from typing import Hashable

from ._node import Leaf, Node


def build_code(tree: Node | None) -> dict[Hashable, list[bool]]:
    """Map every leaf symbol to its root-to-leaf path.

    Parameters
    ----------
    tree : Leaf, Branch or None
        Root of a Huffman tree.

    Returns
    -------
    dict[Hashable, list[bool]]
        Mapping from symbol to its code, ``False`` for a step to the left
        child and ``True`` for a step to the right child. A tree that is a
        single :class:`Leaf` gives its symbol the empty code. An absent tree
        gives an empty mapping.

    Examples
    --------
    >>> from torchhuffman import tree_from_frequency_table
    >>> build_code(tree_from_frequency_table({"a": 2, "b": 3, "c": 2}))
    {'b': [False], 'a': [True, False], 'c': [True, True]}
    """
    code = {}

    if tree is None:
        return code

    # Right pushed before left so leaves are visited left to right
    stack = [(tree, [])]

    while stack:
        node, path = stack.pop()

        if isinstance(node, Leaf):
            code[node.symbol] = path

            continue

        for digit, child in ((True, node.right), (False, node.left)):
            if child is not None:
                stack.append((child, path + [digit]))

    return code
