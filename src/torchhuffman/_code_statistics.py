"""Information-theoretic statistics of Huffman codes."""

import math
from typing import Hashable, Iterable, NamedTuple, Sequence

import torch
from torch import Tensor

from ._build_code import build_code
from ._frequency_table import frequency_table
from ._tree_from_frequency_table import tree_from_frequency_table


class CodeStatistics(NamedTuple):
    """Statistics of a Huffman code over the input it was built from.

    Parameters
    ----------
    entropy : Tensor
        Empirical entropy of the input in bits per symbol.
    expected_length : Tensor
        Mean code length in bits per symbol.
    kraft_sum : Tensor
        Kraft sum of the code lengths.
    encoded_bits : Tensor
        Length of the encoded data in bits.
    fixed_length_bits : Tensor
        Length of the input under a fixed-length code of
        ``ceil(log2(n_symbols))`` bits per symbol.
    compression_ratio : Tensor
        ``encoded_bits / fixed_length_bits``. ``nan`` for an input with a
        single distinct symbol, where both are zero.
    """

    entropy: Tensor
    expected_length: Tensor
    kraft_sum: Tensor
    encoded_bits: Tensor
    fixed_length_bits: Tensor
    compression_ratio: Tensor


def code_lengths(code: dict[Hashable, Sequence[bool]]) -> Tensor:
    """Code lengths of a code table.

    Parameters
    ----------
    code : dict[Hashable, Sequence[bool]]
        Mapping from symbol to its code.

    Returns
    -------
    Tensor
        Code lengths in the iteration order of ``code``. Shape:
        ``(n_symbols,)``. Lengths are integers stored as float type.

    Examples
    --------
    >>> code_lengths({"b": [False], "a": [True, False], "c": [True, True]})
    tensor([1., 2., 2.])
    """
    return torch.tensor(
        [len(path) for path in code.values()],
        dtype=torch.get_default_dtype(),
    )


def kraft_sum(code: dict[Hashable, Sequence[bool]]) -> Tensor:
    r"""Kraft sum of a binary code table.

    .. math::

        K = \sum_{s} 2^{-l_s}

    A prefix-free code always satisfies :math:`K \leq 1`. Huffman codes
    over two or more symbols are complete, :math:`K = 1`.

    Parameters
    ----------
    code : dict[Hashable, Sequence[bool]]
        Mapping from symbol to its code.

    Returns
    -------
    Tensor
        Scalar Kraft sum. Zero for an empty code table.

    Examples
    --------
    >>> kraft_sum({"b": [False], "a": [True, False], "c": [True, True]})
    tensor(1.)

    References
    ----------
    .. [1] Kraft, L. G. (1949). A device for quantizing, grouping, and coding
           amplitude-modulated pulses. M.S. thesis, MIT.
    """
    return torch.pow(2.0, -code_lengths(code)).sum()


def code_statistics(
    symbols: str | Iterable[Hashable] | Tensor | None,
) -> CodeStatistics | None:
    r"""Compare the Huffman code of an input with its entropy bound.

    For an input with empirical symbol probabilities :math:`p_s` and
    Huffman code lengths :math:`l_s`,

    .. math::

        H = -\sum_s p_s \log_2 p_s \leq L = \sum_s p_s l_s < H + 1

    Parameters
    ----------
    symbols : str, iterable, Tensor or None
        Input symbols, see :func:`frequency_table`.

    Returns
    -------
    CodeStatistics or None
        ``None`` when ``symbols`` is ``None`` or empty.

    Examples
    --------
    >>> statistics = code_statistics("aabbbcc")
    >>> statistics.encoded_bits
    tensor(11., dtype=torch.float64)
    >>> statistics.fixed_length_bits
    tensor(14., dtype=torch.float64)
    >>> bool(statistics.entropy <= statistics.expected_length)
    True

    See Also
    --------
    kraft_sum : Kraft sum of a code table.
    """
    table = frequency_table(symbols)

    if table is None:
        return None

    code = build_code(tree_from_frequency_table(table))

    counts = torch.tensor(
        [table[symbol] for symbol in code],
        dtype=torch.float64,
    )
    lengths = code_lengths(code).to(torch.float64)

    total = counts.sum()
    p = counts / total

    entropy = -(p * torch.log2(p)).sum()

    encoded_bits = (counts * lengths).sum()

    # Zero bits per symbol for a single-symbol alphabet
    width = math.ceil(math.log2(len(code)))

    fixed_length_bits = total * width

    return CodeStatistics(
        entropy=entropy,
        expected_length=encoded_bits / total,
        kraft_sum=torch.pow(2.0, -lengths).sum(),
        encoded_bits=encoded_bits,
        fixed_length_bits=fixed_length_bits,
        compression_ratio=encoded_bits / fixed_length_bits,
    )
