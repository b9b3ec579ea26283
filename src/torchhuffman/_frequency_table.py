"""Symbol frequency analysis."""

from collections import Counter
from typing import Hashable, Iterable

from torch import Tensor


def frequency_table(
    symbols: str | Iterable[Hashable] | Tensor | None,
) -> dict[Hashable, int] | None:
    """Count the occurrences of every distinct symbol.

    Parameters
    ----------
    symbols : str, iterable, Tensor or None
        Input symbols. A string is read one character at a time. A tensor
        must be 1-dimensional with an integer or boolean dtype; its elements
        are counted as Python ``int`` values.

    Returns
    -------
    dict or None
        Mapping from symbol to its occurrence count, in order of first
        occurrence. ``None`` when ``symbols`` is ``None`` or empty.

    Raises
    ------
    TypeError
        If ``symbols`` is a floating-point or complex tensor.
    ValueError
        If ``symbols`` is a tensor that is not 1-dimensional.

    Examples
    --------
    >>> frequency_table("aabbbcc")
    {'a': 2, 'b': 3, 'c': 2}
    >>> frequency_table("") is None
    True

    >>> import torch
    >>> frequency_table(torch.tensor([3, 1, 3]))
    {3: 2, 1: 1}
    """
    if symbols is None:
        return None

    counts = Counter(_as_symbols(symbols))

    if not counts:
        return None

    return dict(counts)


def _as_symbols(symbols: str | Iterable[Hashable] | Tensor) -> list:
    """Flatten supported inputs to a list of hashable symbols."""
    if isinstance(symbols, Tensor):
        if symbols.dtype.is_floating_point or symbols.dtype.is_complex:
            raise TypeError(
                f"symbols must be an integer tensor, got {symbols.dtype}"
            )

        if symbols.dim() != 1:
            raise ValueError(
                f"symbols must be 1-dimensional, got {symbols.dim()}D"
            )

        return symbols.tolist()

    return list(symbols)
