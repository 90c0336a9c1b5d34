"""Worker loop: pop a word, claim its dictionary neighbours, push them."""

from word_network.dictionary.store import WordStore
from word_network.graph.frontier import Frontier
from word_network.graph.types import DEFAULT_ALPHABET, DEFAULT_POLL_INTERVAL
from word_network.graph.variants import variants_of
from word_network.solver.report import ProgressCounter


def expand(
    word: str,
    store: WordStore,
    frontier: Frontier,
    alphabet: str = DEFAULT_ALPHABET,
    progress: ProgressCounter | None = None,
) -> int:
    """
    Claim every unvisited dictionary word one edit away and queue it.

    Returns the number of words claimed. Expanding a word a second time
    claims nothing, since its neighbours are already visited.
    """
    claimed = 0
    for candidate in variants_of(word, alphabet):
        if store.try_claim(candidate):
            frontier.push(candidate)
            claimed += 1

    if progress is not None:
        progress.advance(claimed)
    return claimed


def run_worker(
    store: WordStore,
    frontier: Frontier,
    alphabet: str = DEFAULT_ALPHABET,
    progress: ProgressCounter | None = None,
    poll_interval: float = DEFAULT_POLL_INTERVAL,
) -> int:
    """
    Drain the frontier until it is empty and no other worker is expanding.

    Returns the number of words this worker expanded.
    """
    expanded = 0
    while True:
        word = frontier.try_pop()
        if word is None:
            if not frontier.wait_for_work(poll_interval):
                return expanded
            continue

        try:
            expand(word, store, frontier, alphabet, progress)
        finally:
            frontier.task_done()
        expanded += 1
