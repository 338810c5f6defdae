"""
Download an English word list and write a clean dictionary file.

What it does:
- Downloads a plain-text word list (one word per line).
- Keeps lowercase a–z tokens of at least --min-length characters.
- De-duplicates while preserving order, optionally sorts, writes to file.

Usage:
    python -m script.fetch_wordlist --out words_en.txt
    python -m apps.cli.play --dictionary words_en.txt
    python -m script.fetch_wordlist --min-length 8 --max-length 8 \
        --out wordscramble/datasets/data/start.txt
"""

import argparse

import requests

from wordscramble.datasets import write_lines

URL = "https://raw.githubusercontent.com/dwyl/english-words/master/words_alpha.txt"


def unique_preserve_order(words):
    seen = set()
    out = []
    for w in words:
        if w not in seen:
            seen.add(w)
            out.append(w)
    return out


def clean(lines, min_length=2, max_length=None):
    out = []
    for ln in lines:
        w = ln.strip().lower()
        if not (w.isascii() and w.isalpha()) or len(w) < min_length:
            continue
        if max_length is not None and len(w) > max_length:
            continue
        out.append(w)
    return unique_preserve_order(out)


def fetch_words(url: str = URL) -> list[str]:
    r = requests.get(url, timeout=30)
    r.raise_for_status()
    return r.text.splitlines()


def main():
    ap = argparse.ArgumentParser(description="Download and clean an English word list")
    ap.add_argument("--url", default=URL)
    ap.add_argument("--out", default="words_en.txt")
    ap.add_argument("--min-length", type=int, default=2,
                    help="drop shorter words (single letters are never valid)")
    ap.add_argument("--max-length", type=int, help="drop longer words")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically")
    args = ap.parse_args()

    if args.min_length < 2:
        raise ValueError("--min-length must be at least 2")

    words = clean(fetch_words(args.url), min_length=args.min_length, max_length=args.max_length)
    if args.sort:
        words = sorted(words)

    out = write_lines(words, args.out)
    print(f"Wrote {len(words)} words -> {out}")

if __name__ == "__main__":
    main()
