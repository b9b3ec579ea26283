"""Minimum priority queue of Huffman tree nodes."""

import heapq
import itertools

from ._node import Node


class PriorityQueue:
    """Minimum priority queue ordered by node weight.

    Nodes of equal weight leave the queue in the order they entered it.
    Each entry is stored as ``(weight, sequence_number, node)`` so that the
    heap never compares nodes and ties are resolved by enqueue order.

    Examples
    --------
    >>> from torchhuffman import Leaf, PriorityQueue
    >>> queue = PriorityQueue()
    >>> queue.enqueue(Leaf("a", 2))
    >>> queue.enqueue(Leaf("b", 1))
    >>> queue.enqueue(Leaf("c", 2))
    >>> [queue.dequeue().symbol for _ in range(3)]
    ['b', 'a', 'c']
    >>> queue.dequeue() is None
    True
    """

    def __init__(self):
        self._heap = []
        self._counter = itertools.count()

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def enqueue(self, node: Node) -> None:
        heapq.heappush(self._heap, (node.weight, next(self._counter), node))

    def dequeue(self) -> Node | None:
        """Remove and return the lightest node, or ``None`` when empty."""
        if not self._heap:
            return None

        _, _, node = heapq.heappop(self._heap)

        return node
