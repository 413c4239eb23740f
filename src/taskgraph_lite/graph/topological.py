"""Topological sort: Kahn's algorithm and DFS finish-order reversal.

Both sorters return an ordering where every edge u -> v has u before v,
or an empty list plus has_cycle() == True when no such ordering exists.
Neither raises on a cyclic graph; a cycle is an answer, not an error.

Kahn's algorithm (BFS with in-degree tracking):
  1.  Compute in-degree for every vertex.
  2.  Seed a FIFO queue with every in-degree-0 vertex, lowest id first.
  3.  Pop a vertex, append it to the result, decrement in-degree of its
      successors.  Any successor whose in-degree drops to 0 enters the
      queue.
  4.  If the result contains all vertices, the graph is a DAG.
      Otherwise the vertices left behind sit on or downstream of a
      cycle.

DFS three-colour marking:
  UNVISITED   -- not reached yet
  IN_PROGRESS -- on the current DFS path (ancestors of current vertex)
  FINISHED    -- fully explored
An edge into an IN_PROGRESS vertex is a back edge, which means a cycle,
and the sort stops right there.  Otherwise vertices are pushed as they
finish, and reading that stack from the top gives the order.  The DFS
sorter also keeps the cycle it tripped over, taken straight from the
frame stack, so callers can report exactly which tasks form the loop.
"""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections import deque

from taskgraph_lite.graph.adjacency import Graph
from taskgraph_lite.graph.traversal import Frame, VertexState
from taskgraph_lite.metrics import CounterMetrics, Metrics, stopwatch

log = logging.getLogger(__name__)


class TopologicalSorter(ABC):
    """Common interface for both sorting algorithms."""

    name = "topo"

    def __init__(self, graph: Graph, metrics: Metrics | None = None) -> None:
        self._graph = graph
        self._metrics = metrics if metrics is not None else CounterMetrics()
        self._order: list[int] = []
        self._has_cycle = False

    @abstractmethod
    def _run(self) -> list[int] | None:
        """Return the order, or None if the graph has a cycle."""
        ...

    def compute_order(self) -> list[int]:
        """Vertices in dependency order, or [] if the graph has a cycle."""
        with stopwatch(self._metrics):
            order = self._run()
        self._has_cycle = order is None
        self._order = order or []
        if self._has_cycle:
            log.debug("%s: cycle detected", self.name)
        return list(self._order)

    def has_cycle(self) -> bool:
        """True if the last compute_order() found a cycle."""
        return self._has_cycle

    @property
    def order(self) -> list[int]:
        return list(self._order)

    @property
    def metrics(self) -> Metrics:
        return self._metrics


class KahnTopologicalSort(TopologicalSorter):
    """Frontier-based sort driven by in-degrees."""

    name = "kahn"

    def __init__(self, graph: Graph, metrics: Metrics | None = None) -> None:
        super().__init__(graph, metrics)
        self._emitted: list[bool] = []

    def _run(self) -> list[int] | None:
        graph = self._graph
        metrics = self._metrics
        n = graph.vertex_count

        in_deg = [0] * n
        for edge in graph.edges():
            in_deg[edge.dst] += 1

        q: deque[int] = deque(v for v in range(n) if in_deg[v] == 0)

        result: list[int] = []
        while q:
            v = q.popleft()
            metrics.increment("pops")
            result.append(v)
            for edge in graph.adjacent(v):
                metrics.increment("edges_examined")
                in_deg[edge.dst] -= 1
                if in_deg[edge.dst] == 0:
                    q.append(edge.dst)
                    metrics.increment("pushes")

        self._emitted = [False] * n
        for v in result:
            self._emitted[v] = True

        if len(result) != n:
            return None
        return result

    def blocked_vertices(self) -> list[int]:
        """Vertices the last run never emitted (on or behind a cycle)."""
        return [v for v, done in enumerate(self._emitted) if not done]


class DFSTopologicalSort(TopologicalSorter):
    """Sort by reversed DFS finish order, with back-edge cycle detection."""

    name = "dfs"

    def __init__(self, graph: Graph, metrics: Metrics | None = None) -> None:
        super().__init__(graph, metrics)
        self._cycle: list[int] = []

    def _run(self) -> list[int] | None:
        graph = self._graph
        metrics = self._metrics
        n = graph.vertex_count

        state = [VertexState.UNVISITED] * n
        finished: list[int] = []
        self._cycle = []

        for start in range(n):
            if state[start] is not VertexState.UNVISITED:
                continue
            state[start] = VertexState.IN_PROGRESS
            metrics.increment("dfs_visits")
            frames = [Frame.enter(graph, start)]
            while frames:
                frame = frames[-1]
                edge = frame.next_edge()
                if edge is None:
                    frames.pop()
                    state[frame.vertex] = VertexState.FINISHED
                    finished.append(frame.vertex)
                    continue
                metrics.increment("edges_examined")
                w = edge.dst
                if state[w] is VertexState.IN_PROGRESS:
                    # the frames are exactly the IN_PROGRESS path
                    path = [f.vertex for f in frames]
                    self._cycle = path[path.index(w):] + [w]
                    return None
                if state[w] is VertexState.UNVISITED:
                    state[w] = VertexState.IN_PROGRESS
                    metrics.increment("dfs_visits")
                    frames.append(Frame.enter(graph, w))

        finished.reverse()
        return finished

    def cycle_path(self) -> list[int]:
        """Cycle found by the last run as [v0, ..., vk, v0], or []."""
        return list(self._cycle)
