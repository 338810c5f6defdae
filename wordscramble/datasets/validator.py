"""
Word-list validator for wordscramble.

What this module does:
- Validate one word list (root words in start.txt, or a dictionary file).
- Enforce formatting rules (lowercase, a–z only, one token per line,
  minimum length).
- Detect duplicates and invalid lines; compute SHA-256 of the raw file.
- Return a machine-readable dict (for manifests) and provide a pretty
  one-line summary.

Typical use:
    from wordscramble.datasets import validate_wordlist, pretty_summary
    rep = validate_wordlist("wordscramble/datasets/data/start.txt", min_length=3)
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict, field
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib


@dataclass
class WordListReport:
    """Diagnostics and metadata for one word list."""
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    min_length: int      # shortest acceptable token
    count: int           # number of VALID words
    unique_count: int    # unique valid words (after dedupe)
    invalid_lines: int   # number of invalid lines encountered
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    passed: bool = False
    issues: List[str] = field(default_factory=list)


def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _is_clean(token: str) -> bool:
    # str.isalpha() accepts non-ASCII letters; the game only deals in a-z
    return token.isascii() and token.isalpha() and token == token.lower()


def _load_and_check(path: Path, min_length: int) -> Tuple[List[str], int]:
    """
    Load words from a text file and validate them.

    Rules:
      - one token per line
      - must be lowercase a–z
      - must be at least `min_length` long
      - blank lines are skipped (trailing newlines are common)

    Returns:
      (valid_words, invalid_count)
    """
    valid: List[str] = []
    invalid = 0

    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            w = raw.strip()
            if not w:
                continue
            if _is_clean(w) and len(w) >= min_length:
                valid.append(w)
            else:
                invalid += 1

    return valid, invalid


def validate_wordlist(path: str, min_length: int = 1) -> Dict:
    """
    Validate a single word list.

    Parameters
    ----------
    path : str
        Path to the word list (one word per line).
    min_length : int
        Shortest acceptable word (3 for root words, 2 for dictionaries).

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see WordListReport) with counts,
        SHA-256, duplicate/invalid diagnostics, `passed` and `issues`.
    """
    p = Path(path)
    if not p.exists():
        rep = WordListReport(str(path), False, min_length, 0, 0, 0, "",
                             passed=False, issues=[f"file not found: {path}"])
        return asdict(rep)

    words, invalid = _load_and_check(p, min_length)
    unique = len(set(words))

    issues: List[str] = []
    if not words:
        issues.append("file contains 0 valid words")
    if invalid:
        issues.append(f"{invalid} invalid line(s)")
    if unique != len(words):
        issues.append("file contains duplicate lines")

    rep = WordListReport(
        path=str(p),
        exists=True,
        min_length=min_length,
        count=len(words),
        unique_count=unique,
        invalid_lines=invalid,
        sha256=_sha256_file(p),
        # duplicates are reported but do not fail the list
        passed=bool(words) and invalid == 0,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        start.txt | words=120 (uniq=120, sha=abc123...) | invalid=0 | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    name = Path(report["path"]).name
    return (
        f"{name} | words={report['count']} (uniq={report['unique_count']}, sha={sha}) "
        f"| invalid={report['invalid_lines']} | {status}"
    )
