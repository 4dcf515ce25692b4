from abc import ABC, abstractmethod
import io
from typing import BinaryIO, Tuple


class Compressor(ABC):
    """
    Interface describing compression and decompression of streams,
    with helpers for files and in-memory bytes.
    """

    @abstractmethod
    def compress(self, input_stream: BinaryIO, output_stream: BinaryIO) -> str:
        """
        Reads bytes from the input stream, compresses them and writes
        the compressed form to the output stream.

        Args:
            input_stream: Input stream, readable and seekable
            output_stream: Output stream for the compressed data

        Returns:
            String with log information
        """

    @abstractmethod
    def decompress(self, input_stream: BinaryIO, output_stream: BinaryIO) -> str:
        """
        Reads a compressed stream and writes the restored bytes
        to the output stream.

        Args:
            input_stream: Input stream with compressed data
            output_stream: Output stream for the restored data

        Returns:
            String with log information
        """

    @classmethod
    def compress_file(cls, input_file: str, output_file: str, **kwargs) -> str:
        """
        Helper to compress a file.

        Args:
            input_file: Path to the input file
            output_file: Path to the output file
            **kwargs: Passed to the compressor constructor

        Returns:
            Compression log information
        """
        compressor = cls(**kwargs)
        with open(input_file, 'rb') as in_file, open(output_file, 'wb') as out_file:
            return compressor.compress(in_file, out_file)

    @classmethod
    def decompress_file(cls, input_file: str, output_file: str, **kwargs) -> str:
        """
        Helper to decompress a file.

        Args:
            input_file: Path to the compressed file
            output_file: Path to the output file
            **kwargs: Passed to the compressor constructor

        Returns:
            Decompression log information
        """
        compressor = cls(**kwargs)
        with open(input_file, 'rb') as in_file, open(output_file, 'wb') as out_file:
            return compressor.decompress(in_file, out_file)

    @classmethod
    def compress_bytes(cls, data: bytes, **kwargs) -> Tuple[bytes, str]:
        """
        Helper to compress in-memory bytes.

        Returns:
            Tuple (compressed data, log information)
        """
        compressor = cls(**kwargs)
        in_buffer = io.BytesIO(data)
        out_buffer = io.BytesIO()
        log_info = compressor.compress(in_buffer, out_buffer)
        return out_buffer.getvalue(), log_info

    @classmethod
    def decompress_bytes(cls, data: bytes, **kwargs) -> Tuple[bytes, str]:
        """
        Helper to decompress in-memory bytes.

        Returns:
            Tuple (decompressed data, log information)
        """
        compressor = cls(**kwargs)
        in_buffer = io.BytesIO(data)
        out_buffer = io.BytesIO()
        log_info = compressor.decompress(in_buffer, out_buffer)
        return out_buffer.getvalue(), log_info
