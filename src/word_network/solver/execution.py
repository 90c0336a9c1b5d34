"""Execution policy and executor selection utilities."""

import os
import sys
from concurrent.futures import ThreadPoolExecutor
from typing import TypeAlias

ExecutorClass: TypeAlias = type[ThreadPoolExecutor] | None

# Environment variable to override executor selection.
WN_EXECUTOR_ENV = "WN_EXECUTOR"


def is_gil_enabled() -> bool:
    """Check if GIL is enabled."""
    try:
        return sys._is_gil_enabled()
    except AttributeError:
        return True


def get_executor_class() -> ExecutorClass:
    """
    Select the appropriate executor class.

    WN_EXECUTOR="serial" runs a single worker in the calling thread, which is
    useful for debugging with breakpoints. Anything else uses a thread pool:
    all workers share one in-memory word store, so process pools are not an
    option.
    """
    executor_override = os.environ.get(WN_EXECUTOR_ENV, "").lower()

    if executor_override == "serial":
        return None
    return ThreadPoolExecutor


def describe_executor(executor_class: ExecutorClass) -> str:
    """Convert an executor class into a readable policy name."""
    if executor_class is None:
        return "serial"
    return "threads"
