"""
Dictionary oracles.

An oracle answers one question: is this text a valid word in the given
language? The game only needs `check_spelling`, so any word list or
spell-check service can stand behind it.

- WordfreqDictionary:  default; backed by the `wordfreq` corpus statistics.
- WordListDictionary:  a fixed word list (tests, custom dictionaries).
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import FrozenSet, Iterable, Protocol

from wordfreq import zipf_frequency

from .io import read_tokens

logger = logging.getLogger(__name__)


class DictionaryOracle(Protocol):
    def check_spelling(self, text: str, language: str) -> bool: ...


def _is_word_shaped(text: str) -> bool:
    # single letters and multi-word strings are never words
    return len(text) >= 2 and not any(ch.isspace() for ch in text)


class WordfreqDictionary:
    """
    Oracle that accepts any text `wordfreq` has seen as a word.

    `min_zipf` is the Zipf frequency a word must exceed; the default of 0
    accepts every word in the corpus, raise it to weed out rare tokens.
    """

    def __init__(self, min_zipf: float = 0.0):
        self.min_zipf = float(min_zipf)

    def check_spelling(self, text: str, language: str) -> bool:
        if not _is_word_shaped(text):
            return False
        freq = zipf_frequency(text.lower(), language)
        logger.debug("zipf(%r, %s) = %.2f", text, language, freq)
        return freq > self.min_zipf


class WordListDictionary:
    """
    Set-backed oracle over a single language's word list.

    Never accepts the empty string, single letters, or anything containing
    whitespace, even if the list itself carries such entries.
    """

    def __init__(self, words: Iterable[str], language: str = "en"):
        self.language = language
        self._words: FrozenSet[str] = frozenset(
            w.strip().lower() for w in words if len(w.strip()) > 1
        )

    @classmethod
    def from_file(cls, path: Path | str, language: str = "en") -> "WordListDictionary":
        words = read_tokens(path)
        logger.debug("loaded %d dictionary entries from %s", len(words), path)
        return cls(words, language=language)

    def __len__(self) -> int:
        return len(self._words)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.check_spelling(word, self.language)

    def check_spelling(self, text: str, language: str) -> bool:
        if language != self.language:
            logger.warning("no %r word list loaded (have %r)", language, self.language)
            return False
        if not _is_word_shaped(text):
            return False
        return text.lower() in self._words


def load_dictionary(path: Path | str | None = None, language: str = "en") -> DictionaryOracle:
    """Word list from `path` when given, otherwise the wordfreq-backed oracle."""
    if path is None:
        return WordfreqDictionary()
    return WordListDictionary.from_file(path, language=language)
