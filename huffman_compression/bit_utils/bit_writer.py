from typing import BinaryIO

from bitarray import bitarray


class BitWriter:
    """
    A class for writing single bits to a binary stream.
    Bits are grouped into bytes MSB-first; every complete byte
    is emitted to the stream as soon as its 8th bit arrives.
    """

    def __init__(self, out_stream: BinaryIO) -> None:
        """
        Initialize a new BitWriter over an open binary stream.

        Args:
            out_stream: Writable binary stream, owned by the caller
        """
        self.out_stream = out_stream
        self.bits = bitarray(endian="big")
        self.bit_count = 0
        self.closed = False

    def __enter__(self) -> "BitWriter":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        # nothing is padded onto a stream that failed half way
        if exc_type is None and not self.closed:
            self.close()

    def write_bit(self, bit: bool) -> None:
        """
        Append one bit, emitting a byte when 8 bits are pending.

        Args:
            bit: True for 1, False for 0
        """
        self.bits.append(bool(bit))
        self.bit_count += 1
        if len(self.bits) == 8:
            self.out_stream.write(self.bits.tobytes())
            self.bits.clear()

    def write_code(self, code: str) -> None:
        """
        Write a code given as a string of '0' and '1' characters.

        Args:
            code: Huffman code, may be empty
        """
        for char in code:
            self.write_bit(char == "1")

    def close(self) -> None:
        """
        Pad the pending partial byte with 0 bits on the low end and emit it.
        Must be called exactly once; the underlying stream stays open.

        Raises:
            ValueError: If the writer was already closed
        """
        if self.closed:
            raise ValueError("BitWriter already closed")
        if len(self.bits) > 0:
            self.bits.fill()
            self.out_stream.write(self.bits.tobytes())
            self.bits.clear()
        self.out_stream.flush()
        self.closed = True
