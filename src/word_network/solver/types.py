"""Defaults and result types for network solving."""

from dataclasses import dataclass

DEFAULT_START_WORD = "causes"
DEFAULT_WORKERS = 8

# Report progress every this many claimed words.
DEFAULT_PROGRESS_EVERY = 1000


@dataclass(frozen=True, slots=True)
class NetworkResult:
    """Outcome of one traversal: the size of the seed word's network."""

    start_word: str
    count: int
    elapsed: float
    words_loaded: int
    workers: int
    executor: str
