from typing import BinaryIO, Optional

from bitarray import bitarray


class BitReader:
    """
    A class for reading single bits from a binary stream, MSB-first.
    The stream is only read again once every buffered bit has been returned.
    """

    def __init__(self, in_stream: BinaryIO, chunk_size: int = 1) -> None:
        """
        Initialize BitReader over an open binary stream.

        Args:
            in_stream: Readable binary stream, owned by the caller
            chunk_size: Number of bytes fetched per refill

        Raises:
            ValueError: If chunk_size is not positive
        """
        if chunk_size < 1:
            raise ValueError("chunk_size must be positive")
        self.in_stream = in_stream
        self.chunk_size = chunk_size
        self.bits = bitarray(endian="big")
        self.pos = 0
        self.bit_count = 0

    def _refill(self) -> bool:
        chunk = self.in_stream.read(self.chunk_size)
        if not chunk:
            return False
        self.bits.clear()
        self.bits.frombytes(chunk)
        self.pos = 0
        return True

    def read_bit(self) -> Optional[int]:
        """
        Read one bit from the stream.

        Returns:
            The bit value (0 or 1), or None once the stream is exhausted
        """
        if self.pos >= len(self.bits) and not self._refill():
            return None
        val = self.bits[self.pos]
        self.pos += 1
        self.bit_count += 1
        return val

    def read_byte(self) -> Optional[int]:
        """
        Read 8 bits MSB-first and return them as a byte value.
        Running out of input inside the group counts as end of input.

        Returns:
            The value 0..255, or None at end of input
        """
        val = 0
        for _ in range(8):
            bit = self.read_bit()
            if bit is None:
                return None
            val = (val << 1) | bit
        return val

    def __iter__(self):
        """Iterate over whole bytes until end of input."""
        while (byte := self.read_byte()) is not None:
            yield byte
