"""Huffman decoding."""

from typing import Hashable, Sequence

from torch import Tensor

from ._exceptions import DecodeError
from ._node import Leaf
from ._tree_from_code import tree_from_code


def decode(
    code: dict[Hashable, Sequence[bool]],
    data: Sequence[bool] | Tensor,
    *,
    strict: bool = False,
) -> str:
    """Decode data with a code table.

    Parameters
    ----------
    code : dict[Hashable, Sequence[bool]]
        Mapping from symbol to its code, as returned by :func:`encode`.
    data : Sequence[bool] or Tensor
        Encoded digits, ``False`` for left and ``True`` for right. A tensor
        must be 1-dimensional with a bool or integer dtype.
    strict : bool, default=False
        If ``True``, raise :class:`DecodeError` when ``data`` ends part way
        through a code instead of dropping the trailing digits.

    Returns
    -------
    str
        The decoded symbols, each converted with ``str``, concatenated.

    Raises
    ------
    DecodeError
        If a digit leads to a child the tree does not have, or, with
        ``strict=True``, if ``data`` ends part way through a code.
    TypeError
        If ``data`` is a floating-point or complex tensor.
    ValueError
        If ``data`` is a tensor that is not 1-dimensional.

    Examples
    --------
    >>> code = {"b": [False], "a": [True, False], "c": [True, True]}
    >>> decode(code, [True, False, False, True, True])
    'abc'
    >>> decode(code, [True, False, True])
    'a'

    Notes
    -----
    A code table with a single symbol has an empty code, so any number of
    that symbol encodes to no data and decodes to the empty string.

    See Also
    --------
    decode_symbols : Decode to a list of symbols.
    encode : Encode symbols with a Huffman code.
    """
    symbols = decode_symbols(code, data, strict=strict)

    return "".join(str(symbol) for symbol in symbols)


def decode_symbols(
    code: dict[Hashable, Sequence[bool]],
    data: Sequence[bool] | Tensor,
    *,
    strict: bool = False,
) -> list:
    """Decode data with a code table, returning the symbols as a list.

    Parameters and errors are the same as for :func:`decode`.

    Examples
    --------
    >>> decode_symbols({7: [False], 9: [True]}, [True, True, False])
    [9, 9, 7]
    """
    if isinstance(data, Tensor):
        if data.dtype.is_floating_point or data.dtype.is_complex:
            raise TypeError(
                f"data must be a bool or integer tensor, got {data.dtype}"
            )

        if data.dim() != 1:
            raise ValueError(
                f"data must be 1-dimensional, got {data.dim()}D"
            )

        data = data.tolist()

    root = tree_from_code(code)

    symbols = []

    current = root
    depth = 0

    for position, digit in enumerate(data):
        child = current.child(bool(digit))

        if child is None:
            raise DecodeError(
                f"digit {position} leads outside the code tree "
                f"at depth {depth + 1}"
            )

        if isinstance(child, Leaf):
            symbols.append(child.symbol)

            current = root
            depth = 0
        else:
            current = child
            depth += 1

    if strict and depth:
        raise DecodeError(
            f"data ends with {depth} digit(s) of an incomplete code"
        )

    return symbols
