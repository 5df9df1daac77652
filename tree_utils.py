#!/usr/bin/env python3
from collections import deque
from typing import Deque, List, Optional

from freq_utils import ALPHABET_SIZE, SymbolFreq

# Front probability of an empty queue; larger than any real probability.
EMPTY_QUEUE_PROB = 2.0


class TreeNode:
    def __init__(self, data: SymbolFreq, left: Optional["TreeNode"] = None,
                 right: Optional["TreeNode"] = None) -> None:
        self.data = data
        self.left = left
        self.right = right

    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def __repr__(self) -> str:
        if self.is_leaf():
            return f"TreeNode({self.data.symbol!r}, {self.data.probability})"
        return f"TreeNode(None, {self.data.probability}, {self.left!r}, {self.right!r})"


def _front_prob(queue: Deque[TreeNode]) -> float:
    return queue[0].data.probability if queue else EMPTY_QUEUE_PROB


def _pop_smaller(source: Deque[TreeNode], target: Deque[TreeNode]) -> TreeNode:
    # ties go to source
    if _front_prob(source) <= _front_prob(target):
        return source.popleft()
    return target.popleft()


def build_huffman_tree(freqs: List[SymbolFreq]) -> Optional[TreeNode]:
    if not freqs:
        return None
    if len(freqs) == 1:
        raise ValueError("Huffman tree needs at least two records, got one.")

    # leaves stay sorted in source and merged nodes are created in order,
    # so the two queue fronts are always the smallest remaining nodes
    source: Deque[TreeNode] = deque(TreeNode(f) for f in freqs)
    target: Deque[TreeNode] = deque()
    while source or len(target) != 1:
        left = _pop_smaller(source, target)
        right = _pop_smaller(source, target)
        merged = SymbolFreq(None, left.data.probability + right.data.probability)
        target.append(TreeNode(merged, left, right))
    return target.popleft()


def build_codes(root: Optional[TreeNode]) -> List[Optional[str]]:
    codes: List[Optional[str]] = [None] * ALPHABET_SIZE
    if root is None:
        return codes

    def walk(node: TreeNode, path: str) -> None:
        if node.is_leaf():
            codes[ord(node.data.symbol)] = path
            return
        walk(node.left, path + "0")
        walk(node.right, path + "1")

    walk(root, "")
    return codes


def decode_bits(bits: str, root: Optional[TreeNode]) -> str:
    if not bits:
        return ""
    if root is None:
        raise ValueError("Invalid bitstream: payload present but the tree is empty.")

    out = []
    node = root
    for bit in bits:
        node = node.left if bit == "0" else node.right
        if node is None:
            raise ValueError("Invalid bitstream: path leaves the Huffman tree.")
        if node.is_leaf():
            out.append(node.data.symbol)
            node = root
    if node is not root:
        raise ValueError("Invalid bitstream: input ended in the middle of a code.")
    return "".join(out)
