"""
Huffman coding algorithm -
tree construction and code derivation
"""
import heapq
from typing import Optional, Union

from huffman_compression.errors import InvariantViolation
from huffman_compression.frequency_table import N_SYMBOLS, FrequencyTable


class Node:
    """
    Base class for nodes in Huffman's Tree
    """
    __slots__ = ("val_freq", "order")

    def __init__(self, val_freq: int, order: int):
        """
        :param val_freq: int, the frequency of this subtree
        :param order: int, creation rank used to break frequency ties
        """
        self.val_freq = val_freq
        self.order = order

    def __lt__(self, val):
        return (self.val_freq, self.order) < (val.val_freq, val.order)


class Leaf(Node):
    """
    Leaf of Huffman's Tree, holds one symbol
    """
    __slots__ = ("symbol",)

    def __init__(self, symbol: int, val_freq: int):
        super().__init__(val_freq, symbol)
        self.symbol = symbol

    def __repr__(self):
        return f"Leaf({self.symbol}, {self.val_freq})"


class InternalNode(Node):
    """
    Internal node of Huffman's Tree, owns exactly two children
    """
    __slots__ = ("left", "right")

    def __init__(self, left: Node, right: Node, order: int):
        super().__init__(left.val_freq + right.val_freq, order)
        self.left = left
        self.right = right

    def __repr__(self):
        return f"InternalNode({self.val_freq}, {self.left!r}, {self.right!r})"


TreeNode = Union[Leaf, InternalNode]


class HuffmanTree:
    """
    Class object for Huffman Tree - main structure used
    in Huffman coding algorithm. Built once from a frequency
    table; holds the root and the derived code table.
    """

    def __init__(self, root: TreeNode):
        """
        Function initializes the tree around an already built root
        and generates the prefix codes for it.
        """
        self.root = root
        self.res_codes: dict[int, str] = {}
        self.codes_generation()

    @classmethod
    def build_from_freq(cls, freq_table: FrequencyTable) -> "HuffmanTree":
        """
        Builds Huffman Tree from a frequency table using a min-heap.
        Ties on frequency go to the node created first: leaves rank
        by symbol, merged nodes after every leaf in merge order.

        :param freq_table: FrequencyTable with at least one non-zero entry
        :return: HuffmanTree with filled res_codes
        """
        nodes = [Leaf(symbol, count) for symbol, count in freq_table.symbols()]
        if not nodes:
            raise InvariantViolation("Cannot build a Huffman tree from an empty table")

        heapq.heapify(nodes)
        order = N_SYMBOLS
        while len(nodes) > 1:
            # left smallest node
            l = heapq.heappop(nodes)
            # right smallest node
            r = heapq.heappop(nodes)
            heapq.heappush(nodes, InternalNode(l, r, order))
            order += 1

        return cls(nodes[0])

    def codes_generation(self, node: Optional[TreeNode] = None, curr_code: str = ""):
        """
        Recursive function that generates
        code for each symbol, preorder traversal of Huffman's tree.
        A lone leaf at the root gets the empty code.

        :param node: node to start traversal from
        :param curr_code: str, current code of a symbol
        """
        # if node is not passed, we start traversal from the root
        if node is None:
            node = self.root

        if isinstance(node, Leaf):
            self.res_codes[node.symbol] = curr_code
            return

        self.codes_generation(node.left, curr_code + "0")
        self.codes_generation(node.right, curr_code + "1")

    def code(self, symbol: int) -> str:
        """
        :return: code of symbol
        :raises InvariantViolation: if symbol is not a leaf of this tree
        """
        try:
            return self.res_codes[symbol]
        except KeyError:
            raise InvariantViolation(f"Symbol {symbol} not found in Huffman tree") from None

    def code_lengths(self) -> dict[int, int]:
        return {sym: len(code) for sym, code in self.res_codes.items()}
