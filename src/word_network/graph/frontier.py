"""Shared work stack of claimed words waiting to be expanded."""

import threading


class Frontier:
    """
    Thread-safe LIFO of words awaiting expansion.

    Besides the stack itself, the frontier counts words that have been
    popped but not yet marked done. The traversal is finished only when the
    stack is empty and nothing is in flight, since an in-flight expansion
    may still push new words.
    """

    def __init__(self) -> None:
        self._stack: list[str] = []
        self._in_flight = 0
        self._cond = threading.Condition()

    def __len__(self) -> int:
        with self._cond:
            return len(self._stack)

    def push(self, word: str) -> None:
        with self._cond:
            self._stack.append(word)
            self._cond.notify()

    def try_pop(self) -> str | None:
        """Pop a word without blocking, or return None if the stack is empty."""
        with self._cond:
            if not self._stack:
                return None
            # Counted in flight under the same lock as the pop, so the
            # frontier never looks drained while this word is being expanded.
            self._in_flight += 1
            return self._stack.pop()

    def task_done(self) -> None:
        """Mark one popped word as fully expanded."""
        with self._cond:
            if self._in_flight <= 0:
                raise ValueError("task_done() called more times than words were popped")
            self._in_flight -= 1
            if self._in_flight == 0 and not self._stack:
                self._cond.notify_all()

    def is_empty(self) -> bool:
        with self._cond:
            return not self._stack

    @property
    def in_flight(self) -> int:
        with self._cond:
            return self._in_flight

    def is_drained(self) -> bool:
        """True once the stack is empty and no popped word is still being expanded."""
        with self._cond:
            return not self._stack and self._in_flight == 0

    def wait_for_work(self, timeout: float | None = None) -> bool:
        """
        Block until a word is available or the frontier drains.

        Returns False once drained, True otherwise (including on timeout).
        """
        with self._cond:
            self._cond.wait_for(lambda: self._stack or self._in_flight == 0, timeout)
            return bool(self._stack) or self._in_flight > 0
