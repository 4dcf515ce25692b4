"""
Huffman file compressor: frequency table header
followed by the Huffman coded bitstream
"""
from typing import BinaryIO

from huffman_compression.bit_utils import BitReader, BitWriter
from huffman_compression.compressor_ABC import Compressor
from huffman_compression.errors import InvariantViolation, TruncatedStreamError
from huffman_compression.frequency_table import END_OF_STREAM, FrequencyTable
from huffman_compression.huffman_coding import HuffmanTree, Leaf


class HuffmanCompressor(Compressor):
    """
    Byte oriented Huffman compressor. The input stream is read twice:
    once to count frequencies, once to encode, so it must be seekable.
    """
    OUT_BUFFER_SIZE = 65536

    def __init__(self, verbose: bool = False, chunk_size: int = 8192):
        self.verbose = verbose
        self.chunk_size = chunk_size
        self.log = []

    def _log(self, message: str) -> None:
        self.log.append(message)
        if self.verbose:
            print(message)

    def encode_data(self, input_stream: BinaryIO, tree: HuffmanTree, output_stream: BinaryIO) -> int:
        """
        Writes the code of every input byte, then the end-of-stream code,
        and pads the last byte with zeros.

        :return: number of payload bits written, padding excluded
        """
        reader = BitReader(input_stream, chunk_size=self.chunk_size)
        codes = tree.res_codes
        with BitWriter(output_stream) as writer:
            for byte in reader:
                code = codes.get(byte)
                if code is None:
                    raise InvariantViolation(f"Byte {byte} has no Huffman code")
                writer.write_code(code)
            writer.write_code(tree.code(END_OF_STREAM))
        return writer.bit_count

    def decode_data(self, input_stream: BinaryIO, tree: HuffmanTree, output_stream: BinaryIO) -> tuple[int, int]:
        """
        Walks the tree one bit at a time from the root, emitting a byte
        at every leaf, until the end-of-stream leaf is reached.
        Padding after the end-of-stream code is never read as data.

        :return: (payload bits consumed, bytes written)
        :raises TruncatedStreamError: if the bits run out first
        """
        reader = BitReader(input_stream, chunk_size=self.chunk_size)
        root = tree.root
        node = root
        buffer = bytearray()
        written = 0

        while True:
            if isinstance(node, Leaf):
                if node.symbol == END_OF_STREAM:
                    break
                if node is root:
                    raise InvariantViolation("Single-leaf tree without end-of-stream symbol")
                buffer.append(node.symbol)
                if len(buffer) >= self.OUT_BUFFER_SIZE:
                    output_stream.write(buffer)
                    written += len(buffer)
                    buffer.clear()
                node = root
                continue

            bit = reader.read_bit()
            if bit is None:
                raise TruncatedStreamError(
                    f"Payload ended after {reader.bit_count} bits without end-of-stream symbol"
                )
            node = node.right if bit else node.left

        output_stream.write(buffer)
        written += len(buffer)
        return reader.bit_count, written

    def compress(self, input_stream: BinaryIO, output_stream: BinaryIO) -> str:
        self.log.clear()
        start = input_stream.tell()
        freq_table = FrequencyTable.from_stream(input_stream, chunk_size=self.chunk_size)
        input_size = freq_table.total()
        self._log(f"Number of bytes in input: {input_size}")

        tree = HuffmanTree.build_from_freq(freq_table)
        header_size = freq_table.write_header(output_stream)

        input_stream.seek(start)
        bit_count = self.encode_data(input_stream, tree, output_stream)
        payload_size = (bit_count + 7) // 8
        self._log(f"Number of bits in output: {bit_count} ({payload_size} bytes + {header_size} header bytes)")
        self._log(f"Theoretical limit: {freq_table.entropy_bits() / 8:.1f} bytes")

        final_size = header_size + payload_size
        diff = input_size - final_size
        if diff > 0:
            ratio = diff / input_size * 100
            self._log(f"Size reduced by {diff} bytes ({ratio:.1f}% total saving)")
        else:
            self._log(f"Size increased by {-diff} bytes")

        return "\n".join(self.log)

    def decompress(self, input_stream: BinaryIO, output_stream: BinaryIO) -> str:
        self.log.clear()
        freq_table = FrequencyTable.read_header(input_stream)
        tree = HuffmanTree.build_from_freq(freq_table)

        bit_count, written = self.decode_data(input_stream, tree, output_stream)
        self._log(f"Number of bits in input: {bit_count}")
        self._log(f"Number of bytes in output: {written}")

        return "\n".join(self.log)


def encode(input_path: str, output_path: str, verbose: bool = False) -> str:
    """
    Compress input_path into output_path.

    :raises OSError: if either path is inaccessible
    """
    return HuffmanCompressor.compress_file(input_path, output_path, verbose=verbose)


def decode(input_path: str, output_path: str, verbose: bool = False) -> str:
    """
    Restore the original bytes of an encoded input_path into output_path.

    :raises HuffmanFormatError: if input_path is not an encoded file
    :raises OSError: if either path is inaccessible
    """
    return HuffmanCompressor.decompress_file(input_path, output_path, verbose=verbose)
