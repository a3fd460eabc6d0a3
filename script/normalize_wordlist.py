"""
Normalize a word list file for the searcher.

Features:
- Splits on newlines AND commas, trims, lowercases, drops blanks
  (same rules the searcher applies on load).
- Removes duplicates, preserving original order by default (stable dedupe).
- Optional sorting AFTER dedupe (alphabetical); otherwise keep input order.
- Optional --alpha-only to drop entries with anything besides a–z.
- Overwrite in place by default, or write to a separate --out path.

Usage:
    python -m script.normalize_wordlist --in data/words.csv --sort
"""

import argparse
from pathlib import Path

from packages.datasets.io import parse_word_list, read_lines, write_lines


def unique_preserve_order(lines: list[str]) -> list[str]:
    seen, out = set(), []
    for s in lines:
        if s not in seen:
            seen.add(s)
            out.append(s)
    return out


def normalize(raw: str, *, sort: bool = False, alpha_only: bool = False) -> list[str]:
    words = parse_word_list(raw)
    if alpha_only:
        words = [w for w in words if w.isascii() and w.isalpha()]
    out = unique_preserve_order(words)
    if sort:
        out = sorted(out)
    return out


def main(argv=None):
    ap = argparse.ArgumentParser(description="Normalize and dedupe a word list file.")
    ap.add_argument("--in", dest="inp", required=True, help="input word list (.csv or .txt)")
    ap.add_argument("--out", dest="out", help="output file (default: overwrite input)")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically after dedupe (otherwise keep original order)")
    ap.add_argument("--alpha-only", action="store_true", help="drop entries that aren't plain a-z words")
    args = ap.parse_args(argv)

    inp = Path(args.inp)
    outp = Path(args.out) if args.out else inp
    raw = "\n".join(read_lines(inp))  # raises FileNotFoundError
    total = len(parse_word_list(raw))
    out = normalize(raw, sort=args.sort, alpha_only=args.alpha_only)

    write_lines(out, outp)
    print(f"Input: {inp} ({total} words) -> Output: {outp} ({len(out)} unique)")

if __name__ == "__main__":
    main()
