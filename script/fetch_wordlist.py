"""
Download a word list page and write a clean .csv for the searcher.

What it does:
- Downloads the page (plain text or HTML).
- Parses visible text and extracts alphabetic tokens.
- Optionally keeps only tokens of one length.
- Lowercases, de-duplicates while preserving page order, and writes one word per line.

Usage:
    python -m script.fetch_wordlist --url https://example.org/words.html --out data/words.csv
    # only 5-letter words, alphabetically sorted:
    python -m script.fetch_wordlist --url ... --length 5 --sort --out data/words_5.csv
"""

import re
import argparse

import requests
from bs4 import BeautifulSoup

from packages.datasets.io import write_lines

WORD_RE = re.compile(r"\b[A-Za-z]+\b")


def unique_preserve_order(words):
    seen = set()
    out = []
    for w in words:
        if w not in seen:
            seen.add(w)
            out.append(w)
    return out


def extract_words(html: str, length: int | None = None) -> list[str]:
    soup = BeautifulSoup(html, "html.parser")
    text = soup.get_text("\n", strip=True)
    words = [m.group(0).lower() for m in WORD_RE.finditer(text)]
    if length:
        words = [w for w in words if len(w) == length]
    return unique_preserve_order(words)


def fetch_words(url: str, length: int | None = None) -> list[str]:
    r = requests.get(url, timeout=30)
    r.raise_for_status()
    return extract_words(r.text, length)


def main(argv=None):
    ap = argparse.ArgumentParser(description="Download a word list into a searcher .csv")
    ap.add_argument("--url", required=True)
    ap.add_argument("--out", default="data/words.csv")
    ap.add_argument("--length", type=int, help="keep only words of this length")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically instead of keeping "
                                                        "page order")
    args = ap.parse_args(argv)

    words = fetch_words(args.url, args.length)
    if args.sort:
        words = sorted(words)

    write_lines(words, args.out)
    print(f"Wrote {len(words)} unique words -> {args.out}")

if __name__ == "__main__":
    main()
