from .scoring import score
from .validation import (
    DEFAULT_LANGUAGE,
    MIN_WORD_LENGTH,
    is_original,
    is_possible,
    is_real,
    is_root_word,
    normalize,
)
from .outcomes import Accepted, Rejected, RejectionKind, SubmissionOutcome, rejection_message

__all__ = [
    "score", "normalize", "is_root_word", "is_original", "is_possible", "is_real",
    "MIN_WORD_LENGTH", "DEFAULT_LANGUAGE",
    "Accepted", "Rejected", "RejectionKind", "SubmissionOutcome", "rejection_message",
]
