"""Progress and result reporting."""

import logging
import threading
from typing import Protocol

logger = logging.getLogger(__name__)


class Reporter(Protocol):
    """Sink for traversal progress and the final result."""

    def progress(self, found: int) -> None: ...

    def finished(self, count: int, elapsed: float) -> None: ...


class LoggingReporter:
    """Reporter that writes to the log."""

    def progress(self, found: int) -> None:
        logger.info("Progress: %d words in network", found)

    def finished(self, count: int, elapsed: float) -> None:
        logger.info("Result: %d words in network (total %.2fs)", count, elapsed)


class ProgressCounter:
    """
    Thread-safe claim counter shared by all workers.

    Calls ``reporter.progress`` each time the total crosses a multiple of
    ``every``. A non-positive ``every`` disables progress reports.
    """

    def __init__(self, every: int, reporter: Reporter):
        self._every = every
        self._reporter = reporter
        self._lock = threading.Lock()
        self._total = 0

    @property
    def total(self) -> int:
        with self._lock:
            return self._total

    def advance(self, claimed: int = 1) -> None:
        if claimed <= 0:
            return

        with self._lock:
            before = self._total
            self._total += claimed
            after = self._total

        if self._every > 0 and after // self._every > before // self._every:
            self._reporter.progress(after)
