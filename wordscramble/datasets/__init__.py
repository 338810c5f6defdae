from .validator import validate_wordlist, pretty_summary
from .io import DATA_DIR, DEFAULT_ROOTS_PATH, read_lines, read_tokens, write_lines
from .sources import FileRootWordSource, RootWordSource, StaticRootWordSource
from .dictionary import DictionaryOracle, WordfreqDictionary, WordListDictionary, load_dictionary

__all__ = [
    "validate_wordlist", "pretty_summary",
    "DATA_DIR", "DEFAULT_ROOTS_PATH",
    "read_lines", "read_tokens", "write_lines",
    "RootWordSource", "StaticRootWordSource", "FileRootWordSource",
    "DictionaryOracle", "WordfreqDictionary", "WordListDictionary", "load_dictionary",
]
