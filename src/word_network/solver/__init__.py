"""Concurrent traversal of the edit-distance-1 word network."""

from word_network.solver.report import LoggingReporter, ProgressCounter, Reporter
from word_network.solver.solve import main_solve, solve
from word_network.solver.types import NetworkResult
from word_network.solver.worker import expand, run_worker

__all__ = [
    "LoggingReporter",
    "NetworkResult",
    "ProgressCounter",
    "Reporter",
    "expand",
    "main_solve",
    "run_worker",
    "solve",
]
