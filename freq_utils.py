#!/usr/bin/env python3
from dataclasses import dataclass
from functools import total_ordering
from typing import List, Optional

import numpy as np

ALPHABET_SIZE = 128


@total_ordering
@dataclass(frozen=True)
class SymbolFreq:
    # symbol is None for internal tree nodes
    symbol: Optional[str]
    probability: float

    def sort_key(self):
        return (self.probability, -1 if self.symbol is None else ord(self.symbol))

    def __lt__(self, other: "SymbolFreq") -> bool:
        if not isinstance(other, SymbolFreq):
            return NotImplemented
        return self.sort_key() < other.sort_key()


def read_text(path: str) -> str:
    # newline="" keeps "\r\n" intact so decoding reproduces the file exactly
    with open(path, "r", encoding="utf-8", newline="") as f:
        return f.read()


def symbol_codes(text: str) -> np.ndarray:
    codes = np.fromiter((ord(ch) for ch in text), dtype=np.int64, count=len(text))
    if codes.size and int(codes.max()) >= ALPHABET_SIZE:
        bad = text[int(np.argmax(codes >= ALPHABET_SIZE))]
        raise ValueError(f"Character {bad!r} is outside the {ALPHABET_SIZE}-symbol alphabet.")
    return codes


def placeholder_for(symbol: str) -> str:
    return chr((ord(symbol) + 1) % ALPHABET_SIZE)


def build_sorted_freqs(text: str) -> List[SymbolFreq]:
    codes = symbol_codes(text)
    if codes.size == 0:
        return []

    counts = np.bincount(codes, minlength=ALPHABET_SIZE)
    uniq, first_idx = np.unique(codes, return_index=True)
    discovered = uniq[np.argsort(first_idx, kind="stable")]

    total = int(codes.size)
    freqs = [SymbolFreq(chr(int(sym)), int(counts[sym]) / total) for sym in discovered]
    freqs.sort()

    if len(freqs) == 1:
        only = freqs[0]
        freqs = [SymbolFreq(placeholder_for(only.symbol), 0.0), only]
    return freqs


def entropy_bits(freqs: List[SymbolFreq]) -> float:
    probs = np.array([f.probability for f in freqs if f.probability > 0], dtype=np.float64)
    if probs.size == 0:
        return 0.0
    return float(-(probs * np.log2(probs)).sum())
