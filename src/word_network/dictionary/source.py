"""Word-list providers: local files and HTTP downloads."""

import logging
from collections.abc import Iterable, Iterator

import requests

from word_network.dictionary.types import (
    DEFAULT_FETCH_TIMEOUT,
    LoadStats,
    SourceKind,
    SourceUnavailableError,
    WordSource,
)

logger = logging.getLogger(__name__)


def parse_word_line(raw_line: str) -> str | None:
    """
    Clean one raw line into a word.

    Returns None for blank lines, including the trailing empty line most
    word lists end with.
    """
    word = raw_line.strip()
    if not word:
        return None
    return word


def iter_words(lines: Iterable[str]) -> Iterator[str]:
    """Yield cleaned words from raw lines, skipping blank lines."""
    for raw_line in lines:
        word = parse_word_line(raw_line)
        if word is not None:
            yield word


def read_word_file(path: str) -> list[str]:
    """
    Read raw lines from a local word list.

    Bytes that are not valid UTF-8 are replaced, so one bad line cannot
    abort the load.
    """
    try:
        with open(path, encoding="utf-8", errors="replace") as handle:
            return handle.read().splitlines()
    except OSError as e:
        raise SourceUnavailableError(f"cannot read {path}: {e}") from e


def fetch_word_list(
    url: str,
    timeout: float = DEFAULT_FETCH_TIMEOUT,
    session: requests.Session | None = None,
) -> list[str]:
    """Download a word list and return its raw lines."""
    http = session if session is not None else requests
    try:
        response = http.get(url, timeout=timeout)
        response.raise_for_status()
    except requests.RequestException as e:
        raise SourceUnavailableError(f"cannot fetch {url}: {e}") from e

    if response.encoding is None:
        response.encoding = "utf-8"
    return response.text.splitlines()


def load_words(
    source: WordSource,
    session: requests.Session | None = None,
) -> tuple[list[str], LoadStats]:
    """
    Load distinct words from a word source.

    An unavailable source is logged and reported as an empty word list, so
    callers always get a usable (possibly empty) result.
    """
    stats = LoadStats()

    if source.kind is SourceKind.URL:
        logger.info("Getting word list from: %s", source.location)
    else:
        logger.info("Reading word list from: %s", source.location)

    try:
        if source.kind is SourceKind.URL:
            lines = fetch_word_list(source.location, session=session)
        else:
            lines = read_word_file(source.location)
    except SourceUnavailableError as e:
        logger.error("Word source unavailable: %s", e)
        return [], stats

    stats.lines_read = len(lines)
    words = list(dict.fromkeys(iter_words(lines)))
    stats.words = len(words)
    stats.empty_lines = sum(1 for line in lines if parse_word_line(line) is None)

    logger.info("Retrieved %d word(s)", stats.words)

    return words, stats
