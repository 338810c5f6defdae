"""
Game session: the single owner of mutable game state.

- restart(): draw a fresh root word, clear the history, zero the score.
- submit():  classify one raw input and, if accepted, record and score it.

Rejections are returned as data (see engine.outcomes) and never change
state. Only configuration faults raise (see session.errors).

A session is not thread-safe; give each game its own instance.
"""

from __future__ import annotations

import logging
import random
from enum import Enum
from typing import List, Tuple

from wordscramble.datasets.dictionary import DictionaryOracle
from wordscramble.datasets.sources import RootWordSource
from wordscramble.engine import (
    DEFAULT_LANGUAGE,
    MIN_WORD_LENGTH,
    Accepted,
    Rejected,
    RejectionKind,
    SubmissionOutcome,
    is_original,
    is_possible,
    is_real,
    is_root_word,
    normalize,
    score,
)
from .errors import RootWordSourceExhausted, SessionNotStarted

logger = logging.getLogger(__name__)


class SessionState(str, Enum):
    UNINITIALIZED = "uninitialized"
    ACTIVE = "active"


class GameSession:
    def __init__(self, source: RootWordSource, oracle: DictionaryOracle, *,
                 language: str = DEFAULT_LANGUAGE, seed: int | None = None):
        self.source = source
        self.oracle = oracle
        self.language = language
        self.rng = random.Random(seed)

        self._state = SessionState.UNINITIALIZED
        self._root_word = ""
        self._used_words: List[str] = []  # most recent first
        self._score = 0

    # ---- read-only views for the presentation layer ----

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def root_word(self) -> str:
        return self._root_word

    @property
    def used_words(self) -> Tuple[str, ...]:
        return tuple(self._used_words)

    @property
    def score(self) -> int:
        return self._score

    # ---- lifecycle ----

    def restart(self) -> None:
        """
        Start a new game: pick a root word uniformly at random from the
        source, forget every previously accepted word and reset the score.

        Raises RootWordSourceExhausted if the source has nothing to offer;
        the current game (if any) is left as it was.
        """
        words = list(self.source.all_root_words())
        if not words:
            raise RootWordSourceExhausted("root word source returned no words")

        self._root_word = self.rng.choice(words)
        self._used_words = []
        self._score = 0
        self._state = SessionState.ACTIVE
        logger.info("new game: root word %r (%d candidates)", self._root_word, len(words))

    def submit(self, raw: str) -> SubmissionOutcome:
        """
        Evaluate one raw input against the current game.

        Checks run in a fixed order and the first failure decides the
        reason: too short, root word, already used, not spellable, not a
        real word. The dictionary is consulted last, and only when every
        other check has passed.
        """
        if self._state is not SessionState.ACTIVE:
            raise SessionNotStarted("call restart() before submitting words")

        word = normalize(raw)

        if len(word) < MIN_WORD_LENGTH:
            return self._reject(word, RejectionKind.TOO_SHORT)
        if is_root_word(word, self._root_word):
            return self._reject(word, RejectionKind.IS_ROOT_WORD)
        if not is_original(word, self._used_words):
            return self._reject(word, RejectionKind.NOT_ORIGINAL)
        if not is_possible(word, self._root_word):
            return self._reject(word, RejectionKind.NOT_POSSIBLE)
        if not is_real(word, self.oracle, self.language):
            return self._reject(word, RejectionKind.NOT_REAL)

        points = score(word)
        self._score += points
        self._used_words.insert(0, word)
        logger.info("accepted %r (+%d, score=%d)", word, points, self._score)
        return Accepted(word=word, points=points)

    def _reject(self, word: str, kind: RejectionKind) -> Rejected:
        logger.debug("rejected %r: %s", word, kind.value)
        return Rejected(word=word, kind=kind)
