"""Word dictionary: the concurrent visited-flag store and its word sources."""

from word_network.dictionary.source import (
    fetch_word_list,
    iter_words,
    load_words,
    parse_word_line,
    read_word_file,
)
from word_network.dictionary.store import WordStore
from word_network.dictionary.types import (
    LoadStats,
    SourceKind,
    SourceUnavailableError,
    WordSource,
)

__all__ = [
    "LoadStats",
    "SourceKind",
    "SourceUnavailableError",
    "WordSource",
    "WordStore",
    "fetch_word_list",
    "iter_words",
    "load_words",
    "parse_word_line",
    "read_word_file",
]
