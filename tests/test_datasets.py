from pathlib import Path

import pytest
from wordscramble.datasets import (
    DEFAULT_ROOTS_PATH, FileRootWordSource, StaticRootWordSource, WordfreqDictionary,
    WordListDictionary, load_dictionary, pretty_summary, read_lines, read_tokens,
    validate_wordlist, write_lines,
)


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_read_tokens_splits_on_any_whitespace(tmp_path: Path):
    p = tmp_path / "start.txt"
    p.write_text("listen silent\n\ncreation\tpainters\n", encoding="utf-8")
    assert read_tokens(p) == ["listen", "silent", "creation", "painters"]


def test_file_root_word_source(tmp_path: Path):
    p = tmp_path / "start.txt"
    _write(p, ["listen", "silent"])
    assert list(FileRootWordSource(p).all_root_words()) == ["listen", "silent"]


def test_file_root_word_source_missing_file(tmp_path: Path):
    src = FileRootWordSource(tmp_path / "nope.txt")
    with pytest.raises(FileNotFoundError):
        src.all_root_words()


def test_static_source_drops_blanks():
    src = StaticRootWordSource(["listen", "", "  ", "\tsilent\n"])
    assert list(src.all_root_words()) == ["listen", "silent"]


def test_word_list_dictionary_rules():
    d = WordListDictionary(["Lines", "a", "ice cream", "tin"])
    assert d.check_spelling("lines", "en") is True
    assert d.check_spelling("LINES", "en") is True
    assert d.check_spelling("tin", "en") is True
    assert d.check_spelling("a", "en") is False          # single letter
    assert d.check_spelling("ice cream", "en") is False  # whitespace
    assert d.check_spelling("", "en") is False
    assert d.check_spelling("lines", "fr") is False      # other language
    assert "tin" in d and "nope" not in d


def test_dictionary_from_file(tmp_path: Path):
    p = tmp_path / "words.txt"
    _write(p, ["lines", "silent"])
    d = WordListDictionary.from_file(p)
    assert len(d) == 2 and d.check_spelling("silent", "en")


def test_bundled_roots_are_valid():
    roots = validate_wordlist(str(DEFAULT_ROOTS_PATH), min_length=3)
    assert roots["passed"] is True and roots["count"] > 0


def test_validate_wordlist_happy_path(tmp_path: Path):
    p = tmp_path / "start.txt"
    _write(p, ["listen", "creation", "painters"])
    rep = validate_wordlist(str(p), min_length=3)
    assert rep["passed"] is True and rep["count"] == 3
    s = pretty_summary(rep)
    assert "start.txt" in s and "words=3" in s and s.endswith("OK")


def test_validate_wordlist_flags_errors(tmp_path: Path):
    p = tmp_path / "start.txt"
    p.write_text("listen\nAb\n???\nno\nlisten\n", encoding="utf-8")
    rep = validate_wordlist(str(p), min_length=3)
    assert rep["passed"] is False
    assert rep["invalid_lines"] == 3
    assert any("duplicate" in msg for msg in rep["issues"])


def test_validate_wordlist_missing(tmp_path: Path):
    rep = validate_wordlist(str(tmp_path / "missing.txt"))
    assert rep["exists"] is False and rep["passed"] is False


@pytest.mark.parametrize("word", ["tiles", "tins", "tinsel", "islet", "silt", "dents", "lines"])
def test_wordfreq_accepts_common_words(word):
    assert WordfreqDictionary().check_spelling(word, "en") is True


@pytest.mark.parametrize("text", ["dlitsen", "a", "s", "", "ice cream", "lines\n"])
def test_wordfreq_rejects_non_words(text):
    assert WordfreqDictionary().check_spelling(text, "en") is False


def test_load_dictionary_picks_backend(tmp_path: Path):
    assert isinstance(load_dictionary(), WordfreqDictionary)
    p = tmp_path / "words.txt"
    _write(p, ["lines"])
    d = load_dictionary(p)
    assert isinstance(d, WordListDictionary) and d.check_spelling("lines", "en")


def test_write_lines_round_trips_through_read(tmp_path: Path):
    out = write_lines(["listen", "silent"], tmp_path / "nested" / "start.txt")
    assert Path(out).read_text(encoding="utf-8") == "listen\nsilent\n"
    assert read_lines(out) == ["listen", "silent"]
