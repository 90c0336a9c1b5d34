"""Concurrent word store holding the visited flag of every known word."""

import threading
from collections.abc import Iterable

from word_network.dictionary.types import DEFAULT_LOCK_SHARDS


class WordStore:
    """
    Dictionary of known words, each with a visited flag.

    Flags only ever go from False to True, and only through try_claim().
    Every word hashes onto one of ``shards`` locks, so claims on unrelated
    words rarely contend.
    """

    def __init__(self, words: Iterable[str] = (), shards: int = DEFAULT_LOCK_SHARDS):
        if shards < 1:
            raise ValueError(f"shards must be at least 1, got {shards}")

        self._visited: dict[str, bool] = dict.fromkeys(words, False)
        self._locks = [threading.Lock() for _ in range(shards)]
        # Claimed words per shard, each guarded by its shard lock.
        self._claimed = [0] * shards

    def __len__(self) -> int:
        return len(self._visited)

    def __contains__(self, word: object) -> bool:
        return word in self._visited

    def _shard(self, word: str) -> int:
        return hash(word) % len(self._locks)

    def contains(self, word: str) -> bool:
        """Return True if the word is in the dictionary."""
        return word in self._visited

    def try_claim(self, word: str) -> bool:
        """
        Atomically mark an unvisited word as visited.

        Returns True for exactly one caller per word; that caller owns the
        word's expansion. Returns False for unknown or already claimed words.
        """
        if word not in self._visited:
            return False

        shard = self._shard(word)
        with self._locks[shard]:
            if self._visited[word]:
                return False
            self._visited[word] = True
            self._claimed[shard] += 1
        return True

    def is_claimed(self, word: str) -> bool:
        return self._visited.get(word, False)

    def claimed_count(self) -> int:
        """Number of words claimed so far."""
        total = 0
        for shard, lock in enumerate(self._locks):
            with lock:
                total += self._claimed[shard]
        return total

    def network(self) -> frozenset[str]:
        """Snapshot of every claimed word."""
        return frozenset(word for word, visited in list(self._visited.items()) if visited)
