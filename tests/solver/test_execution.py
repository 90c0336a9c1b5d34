"""Tests for execution-policy helpers."""

from concurrent.futures import ThreadPoolExecutor

from word_network.solver import execution


def test_executor_override_modes(monkeypatch) -> None:
    monkeypatch.setenv(execution.WN_EXECUTOR_ENV, "serial")
    assert execution.describe_executor(execution.get_executor_class()) == "serial"

    monkeypatch.setenv(execution.WN_EXECUTOR_ENV, "THREADS")
    assert execution.describe_executor(execution.get_executor_class()) == "threads"


def test_executor_auto_policy_uses_threads(monkeypatch) -> None:
    monkeypatch.delenv(execution.WN_EXECUTOR_ENV, raising=False)
    assert execution.get_executor_class() is ThreadPoolExecutor
    assert execution.describe_executor(execution.get_executor_class()) == "threads"
