#!/usr/bin/env python3
import numpy as np

_ZERO = ord("0")


def padding_marker(length: int) -> str:
    padding = 8 - (length % 8)
    return "0" * (padding - 1) + "1"


def pack_bit_string(bits: str) -> bytes:
    invalid = set(bits) - {"0", "1"}
    if invalid:
        raise ValueError(f"Invalid characters in bitstring: {''.join(sorted(invalid))!r}")
    padded = padding_marker(len(bits)) + bits
    arr = np.frombuffer(padded.encode("ascii"), dtype=np.uint8) - _ZERO
    return np.packbits(arr).tobytes()


def unpack_bit_string(data: bytes) -> str:
    if not data:
        raise ValueError("Invalid bitstream: no padding marker.")
    arr = np.unpackbits(np.frombuffer(data, dtype=np.uint8))
    ones = np.flatnonzero(arr[:8])
    start = int(ones[0]) + 1 if ones.size else 8
    return (arr[start:] + _ZERO).astype(np.uint8).tobytes().decode("ascii")


def write_bit_string(path: str, bits: str) -> int:
    payload = pack_bit_string(bits)
    with open(path, "wb") as f:
        f.write(payload)
    return len(payload)


def read_bit_string(path: str) -> str:
    with open(path, "rb") as f:
        data = f.read()
    return unpack_bit_string(data)
