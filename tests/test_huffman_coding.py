import io
import random

import pytest

from huffman_compression import END_OF_STREAM, FrequencyTable, HuffmanTree, InvariantViolation
from huffman_compression.huffman_coding import InternalNode, Leaf


def _tree(data):
	return HuffmanTree.build_from_freq(FrequencyTable.from_stream(io.BytesIO(data)))


def _counts(**by_char):
	counts = [0] * 257
	for char, count in by_char.items():
		counts[ord(char)] = count
	counts[END_OF_STREAM] = 1
	return FrequencyTable(counts)


def test_known_code_assignment():
	tree = HuffmanTree.build_from_freq(_counts(a=5, b=2, c=1))
	assert tree.res_codes == {
		ord("a"): "1",
		ord("b"): "00",
		ord("c"): "010",
		END_OF_STREAM: "011",
	}
	assert tree.root.val_freq == 9


def test_empty_input_is_single_leaf():
	tree = _tree(b"")
	assert isinstance(tree.root, Leaf)
	assert tree.root.symbol == END_OF_STREAM
	assert tree.res_codes == {END_OF_STREAM: ""}


def test_one_symbol_gets_two_leaves():
	tree = _tree(b"A")
	assert isinstance(tree.root, InternalNode)
	assert tree.res_codes == {ord("A"): "0", END_OF_STREAM: "1"}

	tree = _tree(b"A" * 10000)
	assert tree.res_codes == {END_OF_STREAM: "0", ord("A"): "1"}


def test_all_zero_table_fails_fast():
	with pytest.raises(InvariantViolation):
		HuffmanTree.build_from_freq(FrequencyTable())


def test_internal_counts_are_sums():
	def check(node):
		if isinstance(node, Leaf):
			return node.val_freq
		assert node.val_freq == check(node.left) + check(node.right)
		return node.val_freq

	tree = _tree(b"the quick brown fox jumps over the lazy dog")
	assert check(tree.root) == 44


def test_codes_are_prefix_free():
	rng = random.Random(1234)
	for n in (2, 50, 3000):
		data = bytes(rng.choice(b"aaaaabbbcdefgh\x00\xff") for _ in range(n))
		codes = sorted(_tree(data).res_codes.values())
		for shorter, longer in zip(codes, codes[1:]):
			assert not longer.startswith(shorter)


def test_code_lengths_satisfy_kraft_equality():
	data = bytes(range(256)) * 3 + b"zzzzzzzzzz"
	lengths = _tree(data).code_lengths()
	assert len(lengths) == 257
	assert sum(2.0 ** -length for length in lengths.values()) == pytest.approx(1.0)


def test_rebuild_from_same_table_is_identical():
	table = FrequencyTable.from_stream(io.BytesIO(b"abracadabra" * 7))
	first = HuffmanTree.build_from_freq(table)
	second = HuffmanTree.build_from_freq(FrequencyTable.from_header(table.to_header()))
	assert first.res_codes == second.res_codes


def test_missing_code_is_invariant_violation():
	tree = _tree(b"aaa")
	with pytest.raises(InvariantViolation):
		tree.code(ord("b"))
