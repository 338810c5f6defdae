"""
Submission outcomes and the user-facing text attached to them.

A call to GameSession.submit() returns either `Accepted` or `Rejected`.
Both are plain frozen values; the presentation layer decides how to show
them, using `rejection_message` for the alert title and body.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Union


class RejectionKind(str, Enum):
    TOO_SHORT = "too_short"
    IS_ROOT_WORD = "is_root_word"
    NOT_ORIGINAL = "not_original"
    NOT_POSSIBLE = "not_possible"
    NOT_REAL = "not_real"


@dataclass(frozen=True)
class Accepted:
    word: str
    points: int

    @property
    def accepted(self) -> bool:
        return True


@dataclass(frozen=True)
class Rejected:
    word: str                # normalized candidate that was rejected
    kind: RejectionKind

    @property
    def accepted(self) -> bool:
        return False


SubmissionOutcome = Union[Accepted, Rejected]


def rejection_message(kind: RejectionKind, root_word: str) -> Optional[Tuple[str, str]]:
    """
    Return (title, message) for a rejection, or None when nothing is shown.

    Too-short input is dropped without any message.
    """
    if kind is RejectionKind.TOO_SHORT:
        return None
    if kind is RejectionKind.IS_ROOT_WORD:
        return "Word not possible", "You can't spell root word"
    if kind is RejectionKind.NOT_ORIGINAL:
        return "Word used already", "Be more original"
    if kind is RejectionKind.NOT_POSSIBLE:
        return "Word not possible", f"You can't spell that word from '{root_word}'!"
    if kind is RejectionKind.NOT_REAL:
        return "Word not recognized", "You can't just make them up, you know!"
    raise ValueError(f"Unknown rejection kind: {kind!r}")
