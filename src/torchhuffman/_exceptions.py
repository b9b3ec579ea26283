"""Base exceptions for Huffman coding."""


class HuffmanError(Exception):
    """Base exception for all Huffman coding errors."""

    pass


class DecodeError(HuffmanError):
    """Raised when data does not decode to a whole number of codes.

    A digit leading to a child the decoding tree does not have always raises
    it. Data ending part way through a code raises it only in strict mode.
    """

    pass
