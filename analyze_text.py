#!/usr/bin/env python3
import argparse
import csv
import fnmatch
import os
import sys
from typing import Dict, Iterator, List

from bit_utils import pack_bit_string
from freq_utils import entropy_bits
from huffman_coding import HuffmanCoding


def iter_text_files(root: str, pattern: str) -> Iterator[str]:
    for dirpath, _, filenames in os.walk(root):
        for name in sorted(filenames):
            if fnmatch.fnmatch(name, pattern):
                yield os.path.join(dirpath, name)


def ratio(raw: float, comp: float) -> float:
    return raw / comp if comp > 0 else 0.0


def analyze_file(path: str) -> Dict:
    coder = HuffmanCoding(path).build()
    text = coder.source_text()
    freqs = coder.sorted_char_freq_list
    codes = coder.encodings
    bits = coder.encode_text(text)
    comp = len(pack_bit_string(bits))
    avg_len = sum(f.probability * len(codes[ord(f.symbol)]) for f in freqs)
    return {
        "file": path,
        "chars": len(text),
        "symbols": sum(1 for f in freqs if f.probability > 0),
        "entropy_bits": round(entropy_bits(freqs), 6),
        "avg_code_bits": round(avg_len, 6),
        "raw_bytes": len(text),
        "comp_bytes": comp,
        "ratio": round(ratio(len(text), comp), 6),
    }


def write_summary(path: str, rows: List[Dict], errors: int) -> None:
    raw = sum(r["raw_bytes"] for r in rows)
    comp = sum(r["comp_bytes"] for r in rows)
    with open(path, "w", encoding="utf-8") as f:
        f.write("# Huffman Text Summary\n\n")
        f.write(f"- Files analyzed: {len(rows)}\n")
        f.write(f"- Errors: {errors}\n\n")
        f.write(f"- Total raw bytes: {raw}\n")
        f.write(f"- Total encoded bytes: {comp}\n")
        f.write(f"- Weighted ratio: {ratio(raw, comp):.3f}\n")


def main() -> int:
    parser = argparse.ArgumentParser(description="Report entropy, code length and compression ratio of Huffman-coded text.")
    parser.add_argument("--input-dir", required=True)
    parser.add_argument("--pattern", default="*.txt")
    parser.add_argument("--out-dir", default="out")
    args = parser.parse_args()

    paths = list(iter_text_files(args.input_dir, args.pattern))
    if not paths:
        print(f"No files matching {args.pattern} under {args.input_dir}", file=sys.stderr)
        return 1

    os.makedirs(args.out_dir, exist_ok=True)
    rows = []
    errors = 0
    for path in paths:
        try:
            rows.append(analyze_file(path))
        except Exception as exc:
            print(f"Error {path}: {exc}", file=sys.stderr)
            errors += 1

    csv_path = os.path.join(args.out_dir, "huffman_text_metrics.csv")
    with open(csv_path, "w", encoding="utf-8", newline="") as f:
        headers = list(rows[0].keys()) if rows else []
        writer = csv.DictWriter(f, fieldnames=headers)
        writer.writeheader()
        writer.writerows(rows)

    summary_path = os.path.join(args.out_dir, "huffman_text_summary.md")
    write_summary(summary_path, rows, errors)

    print(f"Wrote {csv_path}")
    print(f"Wrote {summary_path}")
    if errors:
        print(f"Errors: {errors}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
