"""Greedy Huffman tree construction."""

from typing import Hashable

from ._node import Branch, Leaf, Node
from ._priority_queue import PriorityQueue


def tree_from_frequency_table(
    table: dict[Hashable, int] | None,
) -> Node | None:
    r"""Build a Huffman tree from a frequency table.

    Every entry of ``table`` becomes a :class:`Leaf` in a
    :class:`PriorityQueue`. The two lightest nodes are then repeatedly
    dequeued and merged into a :class:`Branch` whose weight is the sum of
    theirs, the first dequeued node becoming the left child and the second
    the right child. The merge step runs once per table entry; when only
    one node is left it is put back unchanged.

    Parameters
    ----------
    table : dict or None
        Mapping from symbol to occurrence count. Enqueue order, and so the
        tie-break among equal weights, follows the iteration order of the
        mapping.

    Returns
    -------
    Leaf, Branch or None
        Root of the tree. A table with a single entry yields a bare
        :class:`Leaf`. ``None`` when ``table`` is ``None`` or empty.

    Examples
    --------
    >>> tree = tree_from_frequency_table({"a": 2, "b": 3, "c": 2})
    >>> tree.weight
    7
    >>> tree.left
    Leaf(symbol='b', weight=3)
    >>> tree.right.left, tree.right.right
    (Leaf(symbol='a', weight=2), Leaf(symbol='c', weight=2))

    Notes
    -----
    - Ties are broken first-in, first-out, so equal tables always produce
      identical trees.
    - For every branch, ``branch.weight == branch.left.weight +
      branch.right.weight``.

    References
    ----------
    .. [1] Huffman, D. A. (1952). A Method for the Construction of
           Minimum-Redundancy Codes. Proceedings of the IRE, 40(9), 1098-1101.
    """
    if not table:
        return None

    queue = PriorityQueue()

    for symbol, weight in table.items():
        queue.enqueue(Leaf(symbol, weight))

    for _ in range(len(table)):
        left = queue.dequeue()
        right = queue.dequeue()

        if right is None:
            queue.enqueue(left)
        else:
            queue.enqueue(Branch(left.weight + right.weight, left, right))

    return queue.dequeue()
