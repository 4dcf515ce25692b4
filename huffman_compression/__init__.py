"""
Huffman coding -
byte oriented file compression
"""
from huffman_compression.errors import (
    HuffmanError,
    HuffmanFormatError,
    InvariantViolation,
    TruncatedStreamError,
)
from huffman_compression.frequency_table import END_OF_STREAM, FrequencyTable
from huffman_compression.huffman_coding import HuffmanTree
from huffman_compression.huffman_compressor import HuffmanCompressor, decode, encode

__all__ = [
    "END_OF_STREAM",
    "FrequencyTable",
    "HuffmanCompressor",
    "HuffmanError",
    "HuffmanFormatError",
    "HuffmanTree",
    "InvariantViolation",
    "TruncatedStreamError",
    "decode",
    "encode",
]
