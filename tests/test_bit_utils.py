import io

import pytest

from huffman_compression.bit_utils import BitReader, BitWriter


def _write(bits):
	out = io.BytesIO()
	writer = BitWriter(out)
	for bit in bits:
		writer.write_bit(bit)
	writer.close()
	return out.getvalue()


def test_writer_msb_first_full_byte():
	assert _write([1, 1, 0, 0, 0, 0, 0, 1]) == b"\xc1"


def test_writer_emits_byte_before_close():
	out = io.BytesIO()
	writer = BitWriter(out)
	for bit in (True, False, True, False, False, True, False, True):
		writer.write_bit(bit)
	assert out.getvalue() == b"\xa5"
	writer.write_bit(True)
	assert out.getvalue() == b"\xa5"


def test_writer_pads_partial_byte_with_zeros():
	assert _write([1, 0, 1]) == b"\xa0"
	assert _write([1] * 9) == b"\xff\x80"


def test_writer_close_without_bits_writes_nothing():
	assert _write([]) == b""


def test_writer_close_twice_fails():
	writer = BitWriter(io.BytesIO())
	writer.close()
	with pytest.raises(ValueError):
		writer.close()


def test_writer_leaves_stream_open():
	out = io.BytesIO()
	with BitWriter(out) as writer:
		writer.write_code("0101")
	assert not out.closed
	assert out.getvalue() == b"\x50"
	assert writer.bit_count == 4


def test_writer_context_skips_padding_on_error():
	out = io.BytesIO()
	with pytest.raises(RuntimeError):
		with BitWriter(out) as writer:
			writer.write_code("101")
			raise RuntimeError("boom")
	assert out.getvalue() == b""


def test_reader_bits_then_end_signal():
	reader = BitReader(io.BytesIO(b"\xa5"))
	bits = [reader.read_bit() for _ in range(8)]
	assert bits == [1, 0, 1, 0, 0, 1, 0, 1]
	assert reader.read_bit() is None
	assert reader.read_bit() is None


def test_reader_reads_source_lazily():
	stream = io.BytesIO(b"\x01\x02\x03")
	reader = BitReader(stream)
	reader.read_bit()
	assert stream.tell() == 1
	for _ in range(7):
		reader.read_bit()
	assert stream.tell() == 1
	reader.read_bit()
	assert stream.tell() == 2


def test_reader_bytes_and_iteration():
	data = bytes(range(256))
	assert list(BitReader(io.BytesIO(data), chunk_size=7)) == list(data)
	assert list(BitReader(io.BytesIO(b""))) == []


def test_reader_rejects_bad_chunk_size():
	with pytest.raises(ValueError):
		BitReader(io.BytesIO(b""), chunk_size=0)


def test_writer_reader_agree():
	bits = [1, 0, 0, 1, 1, 1, 0, 1, 0, 1, 1]
	reader = BitReader(io.BytesIO(_write(bits)))
	assert [reader.read_bit() for _ in bits] == bits
