"""Tests for the shared frontier."""

import threading

import pytest

from word_network.graph.frontier import Frontier


class TestFrontier:
    """Test cases for Frontier."""

    def test_pops_in_lifo_order(self) -> None:
        frontier = Frontier()
        frontier.push("a")
        frontier.push("b")
        assert frontier.try_pop() == "b"
        assert frontier.try_pop() == "a"
        assert frontier.try_pop() is None

    def test_pop_tracks_in_flight(self) -> None:
        frontier = Frontier()
        frontier.push("a")
        assert len(frontier) == 1

        frontier.try_pop()
        assert frontier.is_empty()
        assert frontier.in_flight == 1
        assert not frontier.is_drained()

        frontier.task_done()
        assert frontier.in_flight == 0
        assert frontier.is_drained()

    def test_new_frontier_is_drained(self) -> None:
        frontier = Frontier()
        assert frontier.is_empty()
        assert frontier.is_drained()
        assert frontier.wait_for_work(0) is False

    def test_task_done_without_pop_raises(self) -> None:
        with pytest.raises(ValueError):
            Frontier().task_done()

    def test_wait_for_work_true_while_expansion_in_flight(self) -> None:
        frontier = Frontier()
        frontier.push("a")
        frontier.try_pop()
        # Empty stack but not drained: the waiter must keep going.
        assert frontier.wait_for_work(0.01) is True
        frontier.task_done()
        assert frontier.wait_for_work(0.01) is False

    def test_waiter_wakes_on_push(self) -> None:
        frontier = Frontier()
        frontier.push("seed")
        frontier.try_pop()

        woke = threading.Event()

        def waiter() -> None:
            if frontier.wait_for_work(5):
                woke.set()

        thread = threading.Thread(target=waiter)
        thread.start()
        frontier.push("found")
        thread.join(5)

        assert woke.is_set()
        assert frontier.try_pop() == "found"

    def test_waiter_wakes_on_drain(self) -> None:
        frontier = Frontier()
        frontier.push("seed")
        frontier.try_pop()

        results: list[bool] = []
        thread = threading.Thread(target=lambda: results.append(frontier.wait_for_work(5)))
        thread.start()
        frontier.task_done()
        thread.join(5)

        assert results == [False]


class TestConcurrentFrontier:
    """No pushed word may be lost or delivered twice."""

    def test_every_pushed_word_popped_exactly_once(self) -> None:
        frontier = Frontier()
        words = [f"w{i}" for i in range(5000)]
        popped: list[str] = []
        popped_lock = threading.Lock()
        barrier = threading.Barrier(9)

        def producer() -> None:
            barrier.wait()
            for word in words:
                frontier.push(word)

        def consumer() -> None:
            barrier.wait()
            local: list[str] = []
            while True:
                word = frontier.try_pop()
                if word is None:
                    with popped_lock:
                        if len(popped) + len(local) == len(words):
                            break
                    continue
                local.append(word)
                frontier.task_done()
                with popped_lock:
                    popped.extend(local)
                    local.clear()

        threads = [threading.Thread(target=producer)]
        threads += [threading.Thread(target=consumer) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join(30)

        assert sorted(popped) == sorted(words)
        assert frontier.is_drained()
