"""Tests for operation counters and the stopwatch."""
from __future__ import annotations

import pytest

from taskgraph_lite.metrics import CounterMetrics, Metrics, stopwatch


class TestCounterMetrics:
    def test_is_a_metrics(self) -> None:
        assert isinstance(CounterMetrics(), Metrics)

    def test_abstract_interface(self) -> None:
        with pytest.raises(TypeError):
            Metrics()  # type: ignore[abstract]

    def test_unknown_counter_is_zero(self) -> None:
        assert CounterMetrics().counter("dfs_visits") == 0

    def test_increment(self) -> None:
        m = CounterMetrics()
        m.increment("pops")
        m.increment("pops")
        m.increment("pushes", 5)
        assert m.counter("pops") == 2
        assert m.counters() == {"pops": 2, "pushes": 5}

    def test_counters_is_a_snapshot(self) -> None:
        m = CounterMetrics()
        m.increment("a")
        snap = m.counters()
        snap["a"] = 100
        assert m.counter("a") == 1

    def test_elapsed(self) -> None:
        m = CounterMetrics()
        m.record_elapsed(2_500_000)
        assert m.elapsed_ns == 2_500_000
        assert m.elapsed_ms == pytest.approx(2.5)

    def test_reset(self) -> None:
        m = CounterMetrics()
        m.increment("relaxations", 3)
        m.record_elapsed(10)
        m.reset()
        assert m.counters() == {}
        assert m.elapsed_ns == 0

    def test_summary(self) -> None:
        m = CounterMetrics()
        m.increment("pushes", 2)
        m.increment("edges_examined", 7)
        m.record_elapsed(1_000_000)
        lines = m.summary().splitlines()
        assert lines[0] == "=== Metrics Summary ==="
        assert lines[1] == "edges_examined: 7"
        assert lines[2] == "pushes: 2"
        assert lines[3] == "Execution time: 1.000 ms"

    def test_repr(self) -> None:
        m = CounterMetrics()
        m.increment("x")
        assert repr(m) == "CounterMetrics(counters={'x': 1}, elapsed_ns=0)"


class TestStopwatch:
    def test_records_elapsed(self) -> None:
        m = CounterMetrics()
        with stopwatch(m):
            sum(range(10_000))
        assert m.elapsed_ns > 0

    def test_records_even_on_error(self) -> None:
        m = CounterMetrics()
        with pytest.raises(RuntimeError):
            with stopwatch(m):
                sum(range(10_000))
                raise RuntimeError("boom")
        assert m.elapsed_ns > 0
