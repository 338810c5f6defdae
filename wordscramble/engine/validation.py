"""
Candidate validation for a single submission.

This module answers the question: "May this candidate be accepted right now?"
A candidate is acceptable iff:
  - it is not the root word itself
  - it has not been accepted earlier in the session
  - it can be spelled from the root word's letters (each letter used at most
    as often as it occurs in the root word)
  - the dictionary oracle recognises it

Every predicate is pure: inputs come in as arguments, nothing is mutated.
Callers are expected to normalize the candidate first (see `normalize`).
"""

from __future__ import annotations

from typing import Iterable

from wordscramble.datasets.dictionary import DictionaryOracle

# Rules of the game; shared by the session and the CLIs.
MIN_WORD_LENGTH = 3
DEFAULT_LANGUAGE = "en"


def normalize(raw: str) -> str:
    """Lowercase and trim surrounding whitespace (including newlines)."""
    return raw.lower().strip()


def is_root_word(candidate: str, root_word: str) -> bool:
    return candidate == root_word


def is_original(candidate: str, used_words: Iterable[str]) -> bool:
    return candidate not in used_words


def is_possible(candidate: str, root_word: str) -> bool:
    """
    Return True if `candidate` can be spelled from the letters of `root_word`.

    Works on a mutable copy of the root's letters: each candidate letter
    removes one matching occurrence, and a letter with nothing left to remove
    fails the check immediately.

    Examples:
      is_possible("lines", "listen")   -> True
      is_possible("sisters", "listen") -> False   (only one 's' available)
      is_possible("", "listen")        -> True    (length is gated elsewhere)
    """
    letters = list(root_word)
    for ch in candidate:
        try:
            letters.remove(ch)
        except ValueError:
            return False
    return True


def is_real(candidate: str, oracle: DictionaryOracle, language: str = DEFAULT_LANGUAGE) -> bool:
    """Ask the dictionary oracle whether the whole candidate is a valid word."""
    return bool(oracle.check_spelling(candidate, language))
