"""Huffman encoding."""

import warnings
from typing import Hashable, Iterable, NamedTuple

from torch import Tensor

from ._build_code import build_code
from ._frequency_table import _as_symbols, frequency_table
from ._tree_from_frequency_table import tree_from_frequency_table


class HuffmanCoding(NamedTuple):
    """Result of :func:`encode`.

    Parameters
    ----------
    code : dict[Hashable, list[bool]]
        Mapping from symbol to its code.
    data : list[bool]
        Concatenated codes of the input symbols, in input order.
    """

    code: dict[Hashable, list[bool]]
    data: list[bool]


def encode(
    symbols: str | Iterable[Hashable] | Tensor | None,
) -> HuffmanCoding | None:
    """Encode symbols with a Huffman code built from their own frequencies.

    Parameters
    ----------
    symbols : str, iterable, Tensor or None
        Input symbols, see :func:`frequency_table`.

    Returns
    -------
    HuffmanCoding or None
        The code and the encoded data. ``None`` when ``symbols`` is ``None``
        or empty.

    Warns
    -----
    RuntimeWarning
        If the input contains a single distinct symbol. Its code is empty,
        so the encoded data is empty whatever the input length and
        :func:`decode` cannot recover the input.

    Examples
    --------
    >>> coding = encode("aabbbcc")
    >>> coding.code
    {'b': [False], 'a': [True, False], 'c': [True, True]}
    >>> [int(digit) for digit in coding.data]
    [1, 0, 1, 0, 0, 0, 0, 1, 1, 1, 1]

    See Also
    --------
    decode : Decode data with a code table.
    """
    if symbols is None:
        return None

    symbols = _as_symbols(symbols)

    code = build_code(tree_from_frequency_table(frequency_table(symbols)))

    if not code:
        return None

    if len(code) == 1:
        warnings.warn(
            f"Input has a single distinct symbol ({next(iter(code))!r}); "
            f"its code is empty and the {len(symbols)} encoded symbols "
            f"cannot be recovered by decoding.",
            RuntimeWarning,
            stacklevel=2,
        )

    data = []

    for symbol in symbols:
        data.extend(code[symbol])

    return HuffmanCoding(code, data)
