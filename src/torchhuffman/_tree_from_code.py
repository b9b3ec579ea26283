"""Decoding tree reconstruction from a code table."""

from typing import Hashable, Sequence

from ._node import Branch, Leaf


def tree_from_code(code: dict[Hashable, Sequence[bool]]) -> Branch:
    """Rebuild a decoding tree from a code table.

    Starting from an empty root branch, each code is followed digit by
    digit, creating empty branches along the way, and a leaf labelled with
    the symbol is placed at the final digit. Weights are irrelevant to
    decoding and are all zero.

    Parameters
    ----------
    code : dict[Hashable, Sequence[bool]]
        Mapping from symbol to its code. Must be prefix-free; this is not
        checked.

    Returns
    -------
    Branch
        Root of the reconstructed tree. The root is always a branch, so a
        code table whose only code is empty yields a root without children.

    Examples
    --------
    >>> code = {"b": [False], "a": [True, False], "c": [True, True]}
    >>> tree = tree_from_code(code)
    >>> tree.left
    Leaf(symbol='b', weight=0)
    >>> tree.right.right
    Leaf(symbol='c', weight=0)

    Notes
    -----
    The result does not depend on the iteration order of ``code``.

    See Also
    --------
    build_code : The inverse transform.
    """
    root = Branch(0)

    for symbol, path in code.items():
        digits = [bool(digit) for digit in path]

        if not digits:
            continue

        current = root

        for digit in digits[:-1]:
            child = current.child(digit)

            if child is None:
                child = Branch(0)

                current.set_child(digit, child)

            current = child

        current.set_child(digits[-1], Leaf(symbol, 0))

    return root
