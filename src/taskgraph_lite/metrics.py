"""Operation counters and timing for graph algorithms.

Every algorithm takes a Metrics sink and records what it did while it
ran: how many vertices it visited, how many edges it looked at, how
many relaxations it tried, and how long the whole run took.  The
benchmark harness reads those numbers afterwards.

Metrics is the interface; CounterMetrics is the in-memory
implementation everything actually uses.  A sink belongs to one run.
If you want to reuse one, call reset() first.
"""
from __future__ import annotations

import time
from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Iterator


class Metrics(ABC):
    """Interface that algorithms record counters and elapsed time into."""

    @abstractmethod
    def increment(self, name: str, amount: int = 1) -> None:
        """Add *amount* to the counter called *name*."""
        ...

    @abstractmethod
    def counter(self, name: str) -> int:
        """Current value of *name*, 0 if it was never touched."""
        ...

    @abstractmethod
    def counters(self) -> dict[str, int]:
        """Snapshot of all counters."""
        ...

    @abstractmethod
    def record_elapsed(self, nanos: int) -> None:
        """Store the elapsed time of the run, in nanoseconds."""
        ...

    @property
    @abstractmethod
    def elapsed_ns(self) -> int:
        ...

    @abstractmethod
    def reset(self) -> None:
        """Clear all counters and the elapsed time."""
        ...

    @property
    def elapsed_ms(self) -> float:
        return self.elapsed_ns / 1_000_000

    def summary(self) -> str:
        """Human-readable dump of every counter plus the elapsed time."""
        lines = ["=== Metrics Summary ==="]
        for name, value in sorted(self.counters().items()):
            lines.append(f"{name}: {value}")
        lines.append(f"Execution time: {self.elapsed_ms:.3f} ms")
        return "\n".join(lines)


class CounterMetrics(Metrics):
    """Dict-backed Metrics implementation."""

    __slots__ = ("_counters", "_elapsed_ns")

    def __init__(self) -> None:
        self._counters: dict[str, int] = {}
        self._elapsed_ns = 0

    def increment(self, name: str, amount: int = 1) -> None:
        self._counters[name] = self._counters.get(name, 0) + amount

    def counter(self, name: str) -> int:
        return self._counters.get(name, 0)

    def counters(self) -> dict[str, int]:
        return dict(self._counters)

    def record_elapsed(self, nanos: int) -> None:
        self._elapsed_ns = nanos

    @property
    def elapsed_ns(self) -> int:
        return self._elapsed_ns

    def reset(self) -> None:
        self._counters.clear()
        self._elapsed_ns = 0

    def __repr__(self) -> str:
        return f"CounterMetrics(counters={self._counters!r}, elapsed_ns={self._elapsed_ns})"


@contextmanager
def stopwatch(metrics: Metrics) -> Iterator[None]:
    """Time the enclosed block and record it on *metrics*.

    The time is recorded even if the block raises.
    """
    start = time.perf_counter_ns()
    try:
        yield
    finally:
        metrics.record_elapsed(time.perf_counter_ns() - start)
