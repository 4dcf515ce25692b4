"""
Frequency table of the 256 byte values plus
the end-of-stream symbol, and its header form
"""
import struct
from typing import BinaryIO, Iterator

import numpy as np

from huffman_compression.bit_utils import BitReader
from huffman_compression.errors import HuffmanFormatError

N_SYMBOLS = 257
END_OF_STREAM = 256


class FrequencyTable:
    """
    Fixed-size table of symbol counts. Entries 0..255 count
    input bytes, entry 256 is the end-of-stream symbol and is always 1.
    """
    MAGIC = b"HUF\x00"
    VERSION = 1
    _PREFIX = struct.Struct(">4sB")
    _COUNTS_DTYPE = np.dtype(">u8")
    HEADER_SIZE = _PREFIX.size + N_SYMBOLS * _COUNTS_DTYPE.itemsize

    def __init__(self, counts=None):
        """
        :param counts: optional sequence of 257 counts; defaults to all zero
        """
        if counts is None:
            self.counts = np.zeros(N_SYMBOLS, dtype=np.uint64)
        else:
            self.counts = np.asarray(counts, dtype=np.uint64)
            if self.counts.shape != (N_SYMBOLS,):
                raise ValueError(f"Frequency table must have {N_SYMBOLS} entries")

    def __getitem__(self, symbol: int) -> int:
        return int(self.counts[symbol])

    def __len__(self) -> int:
        return N_SYMBOLS

    def __eq__(self, other) -> bool:
        if not isinstance(other, FrequencyTable):
            return NotImplemented
        return bool(np.array_equal(self.counts, other.counts))

    def __repr__(self) -> str:
        observed = {s: c for s, c in self.symbols()}
        return f"FrequencyTable({observed})"

    @classmethod
    def from_stream(cls, in_stream: BinaryIO, chunk_size: int = 1) -> "FrequencyTable":
        """
        Count every byte of the stream, reading it in 8-bit groups.

        :param in_stream: readable binary stream positioned at its start
        :param chunk_size: bytes fetched per refill of the bit reader
        :return: FrequencyTable with the sentinel count forced to 1
        """
        table = cls()
        for byte in BitReader(in_stream, chunk_size=chunk_size):
            table.counts[byte] += 1
        table.counts[END_OF_STREAM] = 1
        return table

    def symbols(self) -> Iterator[tuple[int, int]]:
        """
        Yields (symbol, count) for every symbol with a non-zero count,
        in ascending symbol order.
        """
        for symbol in np.flatnonzero(self.counts):
            yield int(symbol), int(self.counts[symbol])

    def total(self) -> int:
        """Number of input bytes the table was built from."""
        return int(self.counts[:END_OF_STREAM].sum())

    def entropy_bits(self) -> float:
        """
        Shannon bound for the byte payload, in bits.
        """
        hist = self.counts[:END_OF_STREAM].astype(np.float64)
        total = hist.sum()
        if total <= 0:
            return 0.0
        p = hist[hist > 0] / total
        return float(-np.sum(p * np.log2(p)) * total)

    def to_header(self) -> bytes:
        """
        Serialize as: magic, version byte, 257 big-endian uint64 counts.
        """
        prefix = self._PREFIX.pack(self.MAGIC, self.VERSION)
        return prefix + self.counts.astype(self._COUNTS_DTYPE).tobytes()

    def write_header(self, out_stream: BinaryIO) -> int:
        header = self.to_header()
        out_stream.write(header)
        return len(header)

    @classmethod
    def from_header(cls, raw: bytes) -> "FrequencyTable":
        """
        Parse a header produced by to_header.

        :param raw: exactly HEADER_SIZE bytes
        :return: FrequencyTable
        :raises HuffmanFormatError: if raw is not a valid version 1 header
        """
        if len(raw) < cls.HEADER_SIZE:
            raise HuffmanFormatError(
                f"Truncated header: expected {cls.HEADER_SIZE} bytes, got {len(raw)}"
            )
        magic, version = cls._PREFIX.unpack_from(raw)
        if magic != cls.MAGIC:
            raise HuffmanFormatError("Invalid magic number")
        if version != cls.VERSION:
            raise HuffmanFormatError(f"Unsupported format version {version}")
        counts = np.frombuffer(
            raw, dtype=cls._COUNTS_DTYPE, count=N_SYMBOLS, offset=cls._PREFIX.size
        )
        if counts[END_OF_STREAM] != 1:
            raise HuffmanFormatError("End-of-stream count must be 1")
        return cls(counts)

    @classmethod
    def read_header(cls, in_stream: BinaryIO) -> "FrequencyTable":
        return cls.from_header(in_stream.read(cls.HEADER_SIZE))
