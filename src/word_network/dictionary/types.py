"""Shared constants and metadata structures for the word dictionary."""

from dataclasses import dataclass
from enum import Enum

# Number of lock shards guarding visited flags in the word store.
DEFAULT_LOCK_SHARDS = 64

# Seconds to wait for the word list download.
DEFAULT_FETCH_TIMEOUT = 30

DEFAULT_WORD_LIST_PATH = "word_friends/word.list"
DEFAULT_WORD_LIST_URL = "https://github.com/causes/puzzles/raw/master/word_friends/word.list"


class SourceKind(Enum):
    """Where a word list comes from."""

    FILE = "file"
    URL = "url"


@dataclass(frozen=True, slots=True)
class WordSource:
    """A word list location: a local path or an HTTP(S) URL."""

    kind: SourceKind
    location: str


@dataclass
class LoadStats:
    """Statistics from load_words operation."""

    lines_read: int = 0
    empty_lines: int = 0
    words: int = 0


class SourceUnavailableError(Exception):
    """The word list could not be read or downloaded."""
