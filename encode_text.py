#!/usr/bin/env python3
import argparse
import json
import os
import sys
from typing import Dict

from bit_utils import write_bit_string
from huffman_coding import HuffmanCoding


def write_json(path: str, payload: Dict) -> None:
    with open(path, "w", encoding="utf-8") as f:
        json.dump(payload, f, indent=2, ensure_ascii=False)


def build_meta(coder: HuffmanCoding, encoded_path: str, num_bits: int, num_bytes: int) -> Dict:
    codes = coder.encodings or []
    # the single-symbol placeholder has probability 0.0 and never appears in the text
    present = [f.symbol for f in coder.sorted_char_freq_list if f.probability > 0]
    return {
        "layout": "huffman_text",
        "source_file": coder.file_name,
        "encoded_file": os.path.basename(encoded_path),
        "num_chars": len(coder.source_text()),
        "num_symbols": len(present),
        "payload_bits": num_bits,
        "encoded_bytes": num_bytes,
        "codes": {str(ord(sym)): codes[ord(sym)] for sym in sorted(present)},
    }


def main() -> int:
    parser = argparse.ArgumentParser(description="Huffman-encode an ASCII text file.")
    parser.add_argument("--input", required=True, help="Source text file.")
    parser.add_argument("--out", default="", help="Encoded output file (default: <input>.huff).")
    parser.add_argument("--meta", default="", help="Optional JSON summary path.")
    parser.add_argument("--verify", action="store_true", help="Decode in memory and compare with the source.")
    args = parser.parse_args()

    if not os.path.exists(args.input):
        print(f"Input not found: {args.input}", file=sys.stderr)
        return 1
    out_path = args.out or args.input + ".huff"

    try:
        coder = HuffmanCoding(args.input).build()
        bits = coder.encode_text(coder.source_text())
        num_bytes = write_bit_string(out_path, bits)
        if args.verify and coder.decode_bits(bits) != coder.source_text():
            print(f"Mismatch: {args.input}", file=sys.stderr)
            return 2
        if args.meta:
            write_json(args.meta, build_meta(coder, out_path, len(bits), num_bytes))
    except Exception as exc:
        print(f"Error {args.input}: {exc}", file=sys.stderr)
        return 2

    print(f"Encoded: {args.input} -> {out_path} ({num_bytes} bytes, {len(bits)} payload bits)")
    if args.meta:
        print(f"Wrote {args.meta}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
