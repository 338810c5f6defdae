import pytest
from wordscramble.engine import (
    RejectionKind, is_original, is_possible, is_real, is_root_word, normalize,
    rejection_message, score,
)


class StubOracle:
    def __init__(self, words):
        self.words = set(words)
        self.calls = []

    def check_spelling(self, text, language):
        self.calls.append((text, language))
        return text in self.words


# --- possibility (multiset subset) ---
@pytest.mark.parametrize("candidate,root,expected", [
    ("lines", "listen", True),
    ("silent", "listen", True),
    ("tin", "listen", True),
    ("sisters", "listen", False),   # only one 's'
    ("tents", "listen", False),     # only one 't'
    ("cat", "listen", False),
    ("", "listen", True),
    ("Lines", "listen", False),     # case-sensitive
])
def test_is_possible(candidate, root, expected):
    assert is_possible(candidate, root) is expected


@pytest.mark.parametrize("root", ["listen", "creation", "a", "aab"])
def test_word_is_always_possible_from_itself(root):
    assert is_possible(root, root) is True
    assert is_root_word(root, root) is True


def test_is_root_word_exact_match():
    assert is_root_word("listen", "listen") is True
    assert is_root_word("liste", "listen") is False


def test_is_original():
    used = ["tin", "lines"]
    assert is_original("silent", used) is True
    assert is_original("tin", used) is False
    assert is_original("tin", []) is True


def test_is_real_delegates_to_oracle_with_language():
    oracle = StubOracle(["lines"])
    assert is_real("lines", oracle) is True
    assert is_real("linez", oracle, "en") is False
    assert oracle.calls == [("lines", "en"), ("linez", "en")]


@pytest.mark.parametrize("word,expected", [("cat", 3), ("lines", 5), ("", 0)])
def test_score_is_length(word, expected):
    assert score(word) == expected


def test_normalize_lowercases_and_trims():
    assert normalize("  CaT \n") == "cat"
    assert normalize("\tLines") == "lines"


def test_rejection_messages():
    assert rejection_message(RejectionKind.TOO_SHORT, "listen") is None
    title, msg = rejection_message(RejectionKind.NOT_POSSIBLE, "listen")
    assert title == "Word not possible" and "'listen'" in msg
    assert rejection_message(RejectionKind.NOT_ORIGINAL, "listen")[0] == "Word used already"
    assert rejection_message(RejectionKind.NOT_REAL, "listen")[0] == "Word not recognized"
    assert rejection_message(RejectionKind.IS_ROOT_WORD, "listen")[0] == "Word not possible"
