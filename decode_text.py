#!/usr/bin/env python3
import argparse
import os
import sys

from huffman_coding import HuffmanCoding


def main() -> int:
    parser = argparse.ArgumentParser(description="Decode a Huffman-encoded text file using its source text's tree.")
    parser.add_argument("--source", required=True, help="Original text file the tree is rebuilt from.")
    parser.add_argument("--encoded", required=True, help="Encoded file produced by encode_text.")
    parser.add_argument("--out", required=True, help="Decoded output file.")
    parser.add_argument("--verify", action="store_true", help="Compare decoded text with the source.")
    args = parser.parse_args()

    for path in (args.source, args.encoded):
        if not os.path.exists(path):
            print(f"Input not found: {path}", file=sys.stderr)
            return 1

    try:
        coder = HuffmanCoding(args.source).build()
        text = coder.decode(args.encoded, args.out)
    except Exception as exc:
        print(f"Error {args.encoded}: {exc}", file=sys.stderr)
        return 2

    if args.verify:
        if text != coder.source_text():
            print(f"Mismatch: {args.encoded}", file=sys.stderr)
            return 2
        print(f"Verified: {args.out}")
    print(f"Decoded: {args.encoded} -> {args.out} ({len(text)} chars)")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
