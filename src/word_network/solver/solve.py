import logging
import os
import time
from collections.abc import Iterable

from word_network.dictionary.source import load_words
from word_network.dictionary.store import WordStore
from word_network.dictionary.types import WordSource
from word_network.graph.frontier import Frontier
from word_network.graph.types import DEFAULT_ALPHABET
from word_network.solver.execution import (
    WN_EXECUTOR_ENV,
    describe_executor,
    get_executor_class,
    is_gil_enabled,
)
from word_network.solver.report import LoggingReporter, ProgressCounter, Reporter
from word_network.solver.types import (
    DEFAULT_PROGRESS_EVERY,
    DEFAULT_START_WORD,
    DEFAULT_WORKERS,
    NetworkResult,
)
from word_network.solver.worker import run_worker

logger = logging.getLogger(__name__)


def solve(
    words: Iterable[str],
    start_word: str = DEFAULT_START_WORD,
    workers: int = DEFAULT_WORKERS,
    alphabet: str = DEFAULT_ALPHABET,
    progress_every: int = DEFAULT_PROGRESS_EVERY,
    reporter: Reporter | None = None,
) -> NetworkResult:
    """
    Count the words reachable from ``start_word`` through edit-distance-1 steps.

    Algorithm:
    1. Load every word into the store, unvisited
    2. Claim the start word and push it onto the frontier
    3. Let a fixed pool of workers drain the frontier, each claiming and
       pushing the unvisited neighbours of the words it pops
    4. Count the claimed words

    The start word only counts if it is in the dictionary; otherwise the
    network is empty.
    """
    if workers < 1:
        raise ValueError(f"workers must be at least 1, got {workers}")
    if not alphabet:
        raise ValueError("alphabet must not be empty")

    if reporter is None:
        reporter = LoggingReporter()

    total_start = time.perf_counter()

    # Select executor based on policy.
    executor_class = get_executor_class()
    executor_name = describe_executor(executor_class)
    if executor_class is None:
        # Serial mode runs exactly one worker in this thread.
        workers = 1
    gil_status = "enabled" if is_gil_enabled() else "disabled"
    executor_override = os.environ.get(WN_EXECUTOR_ENV, "")
    override_info = f", WN_EXECUTOR={executor_override}" if executor_override else ""

    store = WordStore(words)

    logger.info(
        f"Starting: start_word={start_word}, words={len(store)}, workers={workers}, "
        f"executor={executor_name}, GIL={gil_status}{override_info}"
    )

    def finish() -> NetworkResult:
        count = store.claimed_count()
        elapsed = time.perf_counter() - total_start
        reporter.finished(count, elapsed)
        return NetworkResult(
            start_word=start_word,
            count=count,
            elapsed=elapsed,
            words_loaded=len(store),
            workers=workers,
            executor=executor_name,
        )

    if len(store) == 0:
        logger.warning("No words in word list")
        return finish()

    frontier = Frontier()
    progress = ProgressCounter(progress_every, reporter)

    if not store.try_claim(start_word):
        logger.warning("Start word %r is not in the word list", start_word)
        return finish()

    progress.advance(1)
    frontier.push(start_word)

    if executor_class is None:
        expanded = run_worker(store, frontier, alphabet, progress)
        logger.debug("Serial worker expanded %d words", expanded)
    else:
        with executor_class(max_workers=workers) as executor:
            futures = [
                executor.submit(run_worker, store, frontier, alphabet, progress)
                for _ in range(workers)
            ]
            for i, future in enumerate(futures):
                # Re-raises any exception from the worker.
                logger.debug("Worker %d expanded %d words", i, future.result())

    return finish()


def main_solve(
    source: WordSource,
    start_word: str = DEFAULT_START_WORD,
    workers: int = DEFAULT_WORKERS,
    alphabet: str = DEFAULT_ALPHABET,
    progress_every: int = DEFAULT_PROGRESS_EVERY,
) -> int:
    """Main entry point that prints the network size to stdout and returns it."""
    words, stats = load_words(source)
    logger.info(
        "Load done: %d words from %d lines (%d blank lines skipped)",
        stats.words,
        stats.lines_read,
        stats.empty_lines,
    )
    result = solve(
        words,
        start_word=start_word,
        workers=workers,
        alphabet=alphabet,
        progress_every=progress_every,
    )
    print(result.count)
    return result.count
