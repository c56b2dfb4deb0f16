"""
Download a newline-delimited English word list and write a clean copy.

What it does:
- Downloads a plain-text word list (one word per line).
- Lowercases, keeps a–z tokens only, optionally filters by length.
- De-duplicates while preserving the source order, and writes to file.

Usage:
    # dictionary for the real-word check
    python -m script.fetch_wordlist --out packages/datasets/data/words.txt
    # root words: 8-letter words only, sorted
    python -m script.fetch_wordlist --min-length 8 --max-length 8 --sort \
        --out packages/datasets/data/start.txt
"""

import argparse
from typing import Iterable, List

import requests

from packages.datasets.io import write_lines

URL = "https://raw.githubusercontent.com/dwyl/english-words/master/words_alpha.txt"


def unique_preserve_order(words: Iterable[str]) -> List[str]:
    seen = set()
    out = []
    for w in words:
        if w not in seen:
            seen.add(w)
            out.append(w)
    return out


def clean_words(lines: Iterable[str], min_length: int = 1, max_length: int = 0) -> List[str]:
    """Normalize raw lines to unique lowercase alphabetic words within the length bounds."""
    words = []
    for ln in lines:
        w = ln.strip().lower()
        if not w or not (w.isascii() and w.isalpha()):
            continue
        if len(w) < min_length or (max_length and len(w) > max_length):
            continue
        words.append(w)
    return unique_preserve_order(words)


def fetch_words(url: str = URL) -> List[str]:
    r = requests.get(url, timeout=30)
    r.raise_for_status()
    return r.text.splitlines()


def main():
    ap = argparse.ArgumentParser(description="Fetch and clean an English word list")
    ap.add_argument("--url", default=URL)
    ap.add_argument("--out", default="packages/datasets/data/words.txt")
    ap.add_argument("--min-length", type=int, default=1)
    ap.add_argument("--max-length", type=int, default=0, help="0 = no upper bound")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically instead of keeping "
                                                        "source order")
    args = ap.parse_args()

    words = clean_words(fetch_words(args.url), args.min_length, args.max_length)
    if args.sort:
        words = sorted(words)

    write_lines(words, args.out)
    print(f"Wrote {len(words)} unique words -> {args.out}")


if __name__ == "__main__":
    main()
