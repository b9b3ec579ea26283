"""Tests for Huffman encoding."""

import pytest
import torch

from torchhuffman import HuffmanCoding, encode


class TestEncodeBasic:
    """Basic functionality tests."""

    def test_output_type(self):
        """Returns a HuffmanCoding."""
        coding = encode("aab")
        assert isinstance(coding, HuffmanCoding)
        assert isinstance(coding.data, list)
        assert isinstance(coding.code, dict)

    def test_worked_example(self):
        """Data is the concatenation of codes in input order."""
        code, data = encode("aabbbcc")
        assert code == {"b": [False], "a": [True, False], "c": [True, True]}
        assert data == [
            True, False,
            True, False,
            False,
            False,
            False,
            True, True,
            True, True,
        ]  # fmt: skip

    def test_input_order(self):
        """Reordering the input reorders the data."""
        code, data = encode("cba")
        expected = code["c"] + code["b"] + code["a"]
        assert data == expected

    def test_tensor_input(self):
        """Encodes integer tensors."""
        symbols = torch.tensor([0, 0, 0, 1, 2])
        code, data = encode(symbols)
        assert set(code) == {0, 1, 2}
        assert len(code[0]) <= len(code[2])
        assert len(data) == sum(len(code[s]) for s in symbols.tolist())

    def test_generator_input(self):
        """Consumes one-shot iterables once."""
        code, data = encode(symbol for symbol in "abab")
        assert len(data) == 4


class TestEncodeEdgeCases:
    """Edge case tests."""

    def test_empty(self):
        """Empty input gives no coding."""
        assert encode("") is None

    def test_none(self):
        """Absent input gives no coding."""
        assert encode(None) is None

    def test_single_symbol_warns(self):
        """Single-symbol input warns and encodes to no data."""
        with pytest.warns(RuntimeWarning, match="single distinct symbol"):
            code, data = encode("aaaa")
        assert code == {"a": []}
        assert data == []

    def test_single_symbol_data_independent_of_length(self):
        """Single-symbol data is empty for any input length."""
        with pytest.warns(RuntimeWarning):
            short = encode("a")
        with pytest.warns(RuntimeWarning):
            long = encode("a" * 100)
        assert short.data == long.data == []

    def test_encode_not_1d_raises(self):
        """Raises error for non-1D tensors."""
        with pytest.raises(ValueError, match="must be 1-dimensional"):
            encode(torch.tensor([[0, 1], [2, 3]]))


class TestEncodeCompression:
    """Compression effectiveness tests."""

    def test_skewed_shorter_than_uniform(self):
        """Skewed input encodes to fewer bits than uniform input."""
        skewed = "a" * 80 + "b" * 15 + "c" * 5
        uniform = "abc" * 33 + "a"
        assert len(encode(skewed).data) < len(encode(uniform).data)
