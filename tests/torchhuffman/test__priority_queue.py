"""Tests for the node priority queue."""

from torchhuffman import Branch, Leaf, PriorityQueue


class TestPriorityQueueBasic:
    """Basic functionality tests."""

    def test_empty_dequeue_returns_none(self):
        """Dequeue on an empty queue returns None."""
        queue = PriorityQueue()
        assert queue.dequeue() is None

    def test_len_and_bool(self):
        """Length tracks enqueues and dequeues."""
        queue = PriorityQueue()
        assert not queue
        queue.enqueue(Leaf("a", 1))
        queue.enqueue(Leaf("b", 2))
        assert len(queue) == 2
        queue.dequeue()
        assert len(queue) == 1
        assert queue


class TestPriorityQueueOrdering:
    """Ordering tests."""

    def test_ascending_weight(self):
        """Nodes leave in ascending weight order."""
        queue = PriorityQueue()
        for symbol, weight in [("a", 5), ("b", 1), ("c", 3)]:
            queue.enqueue(Leaf(symbol, weight))
        weights = [queue.dequeue().weight for _ in range(3)]
        assert weights == [1, 3, 5]

    def test_ties_are_first_in_first_out(self):
        """Nodes of equal weight leave in enqueue order."""
        queue = PriorityQueue()
        for symbol in "dcbae":
            queue.enqueue(Leaf(symbol, 2))
        symbols = [queue.dequeue().symbol for _ in range(5)]
        assert symbols == list("dcbae")

    def test_branch_and_leaf_tie(self):
        """A leaf enqueued before an equal-weight branch leaves first."""
        queue = PriorityQueue()
        leaf = Leaf("x", 4)
        branch = Branch(4, Leaf("a", 2), Leaf("b", 2))
        queue.enqueue(leaf)
        queue.enqueue(branch)
        assert queue.dequeue() is leaf
        assert queue.dequeue() is branch
