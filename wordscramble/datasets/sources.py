"""
Root word sources.

A source hands the session the full corpus of candidate root words; the
session picks one at random on every restart. Entries are expected to be
plain lowercase a-z tokens without whitespace.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Protocol, Sequence

from .io import DEFAULT_ROOTS_PATH, read_tokens

logger = logging.getLogger(__name__)


class RootWordSource(Protocol):
    def all_root_words(self) -> Sequence[str]: ...


class StaticRootWordSource:
    """In-memory corpus (tests, embedding)."""

    def __init__(self, words: Iterable[str]):
        self._words: List[str] = [w.strip() for w in words if w.strip()]

    def all_root_words(self) -> Sequence[str]:
        return list(self._words)


class FileRootWordSource:
    """
    Corpus read from a text file of whitespace/newline separated tokens.

    The file is read on every call so an edited list is picked up by the
    next restart. A missing file raises FileNotFoundError.
    """

    def __init__(self, path: Path | str = DEFAULT_ROOTS_PATH):
        self.path = Path(path)

    def all_root_words(self) -> Sequence[str]:
        words = read_tokens(self.path)
        logger.debug("loaded %d root words from %s", len(words), self.path)
        return words
