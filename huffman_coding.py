#!/usr/bin/env python3
import copy
from typing import List, Optional

from bit_utils import read_bit_string, write_bit_string
from freq_utils import SymbolFreq, build_sorted_freqs, read_text
from tree_utils import TreeNode, build_codes, build_huffman_tree, decode_bits


class HuffmanCoding:
    def __init__(self, file_name: str) -> None:
        self._file_name = file_name
        self._text: Optional[str] = None
        self._sorted_char_freq_list: Optional[List[SymbolFreq]] = None
        self._huffman_root: Optional[TreeNode] = None
        self._encodings: Optional[List[Optional[str]]] = None
        self._tree_built = False

    @property
    def file_name(self) -> str:
        return self._file_name

    @property
    def sorted_char_freq_list(self) -> Optional[List[SymbolFreq]]:
        return None if self._sorted_char_freq_list is None else list(self._sorted_char_freq_list)

    @property
    def huffman_root(self) -> Optional[TreeNode]:
        return copy.deepcopy(self._huffman_root)

    @property
    def encodings(self) -> Optional[List[Optional[str]]]:
        return None if self._encodings is None else list(self._encodings)

    def source_text(self) -> str:
        if self._text is None:
            self._text = read_text(self._file_name)
        return self._text

    def make_sorted_list(self) -> None:
        self._sorted_char_freq_list = build_sorted_freqs(self.source_text())

    def make_tree(self) -> None:
        if self._sorted_char_freq_list is None:
            raise RuntimeError("make_sorted_list() must run before make_tree().")
        self._huffman_root = build_huffman_tree(self._sorted_char_freq_list)
        self._tree_built = True

    def make_encodings(self) -> None:
        if not self._tree_built:
            raise RuntimeError("make_tree() must run before make_encodings().")
        self._encodings = build_codes(self._huffman_root)

    def build(self) -> "HuffmanCoding":
        self.make_sorted_list()
        self.make_tree()
        self.make_encodings()
        return self

    def encode_text(self, text: str) -> str:
        if self._encodings is None:
            raise RuntimeError("make_encodings() must run before encoding.")
        parts = []
        for ch in text:
            code = self._encodings[ord(ch)] if ord(ch) < len(self._encodings) else None
            if code is None:
                raise KeyError(f"No Huffman code for character {ch!r}.")
            parts.append(code)
        return "".join(parts)

    def decode_bits(self, bits: str) -> str:
        if not self._tree_built:
            raise RuntimeError("make_tree() must run before decoding.")
        return decode_bits(bits, self._huffman_root)

    def encode(self, encoded_file: str) -> int:
        return write_bit_string(encoded_file, self.encode_text(self.source_text()))

    def decode(self, encoded_file: str, decoded_file: str) -> str:
        text = self.decode_bits(read_bit_string(encoded_file))
        with open(decoded_file, "w", encoding="utf-8", newline="") as f:
            f.write(text)
        return text
