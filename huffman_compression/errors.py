"""
Error kinds raised by the Huffman codec
"""


class HuffmanError(Exception):
    """Base class for all codec errors."""


class HuffmanFormatError(HuffmanError, ValueError):
    """The input is not a file produced by this codec version."""


class TruncatedStreamError(HuffmanFormatError):
    """The payload ran out before the end-of-stream symbol was decoded."""


class InvariantViolation(HuffmanError, RuntimeError):
    """Internal state that can only come from a logic defect."""
