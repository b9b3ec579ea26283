"""Tests for symbol frequency analysis."""

import collections

import hypothesis
import pytest
import torch

from torchhuffman import frequency_table
from torchhuffman.testing.strategies import symbol_strings


class TestFrequencyTableBasic:
    """Basic functionality tests."""

    def test_counts(self):
        """Counts every distinct symbol."""
        assert frequency_table("aabbbcc") == {"a": 2, "b": 3, "c": 2}

    def test_first_occurrence_order(self):
        """Keys follow the order of first occurrence."""
        assert list(frequency_table("cabcab")) == ["c", "a", "b"]

    def test_single_symbol(self):
        """Single distinct symbol."""
        assert frequency_table("aaaa") == {"a": 4}

    def test_iterable_of_hashables(self):
        """Accepts any iterable of hashable symbols."""
        assert frequency_table([("x", 1), ("x", 1), 7]) == {("x", 1): 2, 7: 1}


class TestFrequencyTableEmpty:
    """Empty input tests."""

    def test_empty_string(self):
        """Empty string gives no table."""
        assert frequency_table("") is None

    def test_none(self):
        """Absent input gives no table."""
        assert frequency_table(None) is None

    def test_empty_tensor(self):
        """Empty tensor gives no table."""
        assert frequency_table(torch.empty(0, dtype=torch.long)) is None


class TestFrequencyTableTensor:
    """Tensor input tests."""

    def test_integer_tensor(self):
        """Counts tensor elements as Python ints."""
        table = frequency_table(torch.tensor([3, 1, 3, 3]))
        assert table == {3: 3, 1: 1}
        assert all(type(symbol) is int for symbol in table)

    def test_float_tensor_raises(self):
        """Raises error for floating-point tensors."""
        with pytest.raises(TypeError, match="must be an integer tensor"):
            frequency_table(torch.tensor([0.5, 1.5]))

    def test_not_1d_raises(self):
        """Raises error for non-1D tensors."""
        with pytest.raises(ValueError, match="must be 1-dimensional"):
            frequency_table(torch.tensor([[0, 1], [2, 3]]))


class TestFrequencyTableProperties:
    """Property-based tests."""

    @hypothesis.given(symbol_strings())
    def test_matches_counter(self, text):
        """Every count equals the number of occurrences."""
        table = frequency_table(text)
        for symbol, count in table.items():
            assert count == text.count(symbol)
        assert sum(table.values()) == len(text)
        assert table == collections.Counter(text)
