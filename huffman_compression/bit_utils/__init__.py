from huffman_compression.bit_utils.bit_reader import BitReader
from huffman_compression.bit_utils.bit_writer import BitWriter

__all__ = ["BitReader", "BitWriter"]
