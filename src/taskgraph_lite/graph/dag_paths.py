"""Shortest paths, longest paths and the critical path on a weighted DAG.

Edge weights are durations: u -> v with weight w means "v can start w
time units after u starts".  The longest path from the source is then
the critical path, the chain of tasks that decides how long the whole
plan takes.

Algorithm (single pass, both directions):
  1.  Topologically sort the DAG (DFS sorter).  A cycle aborts the
      computation: every distance stays at the sentinel.
  2.  dist[source] = 0, everything else +inf (shortest) or -inf
      (longest).
  3.  Walk vertices in topological order.  For each vertex u that has
      been reached, for each edge u -> v, relax: if dist[u] + w beats
      dist[v], update dist[v] and record u as v's predecessor.
  4.  Walk predecessors backward to reconstruct a path.

This is the standard DAG DP.  It runs in O(V + E), and the longest
path falls out of the same loop with the comparison flipped.  No
negated weights and no Dijkstra heap are needed, and negative weights
are fine.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Callable

from taskgraph_lite.graph.adjacency import Edge, Graph
from taskgraph_lite.graph.topological import DFSTopologicalSort
from taskgraph_lite.metrics import CounterMetrics, Metrics, stopwatch

log = logging.getLogger(__name__)


@dataclass(slots=True)
class CriticalPath:
    """Result of critical path analysis."""
    path: list[int]
    length: float
    bottleneck: Edge | None = None   # heaviest edge on the path

    @property
    def found(self) -> bool:
        return bool(self.path)


class DAGPaths:
    """Single-source path DP over topological order.

    Usage:
        paths = DAGPaths(graph)
        dist = paths.shortest_paths(0)
        route = paths.reconstruct_path(5)
        cp = paths.critical_path(0)

    distance() and reconstruct_path() answer from whichever of
    shortest_paths()/longest_paths() ran last.
    """

    __slots__ = (
        "_graph", "_metrics", "_dist", "_pred", "_order",
        "_source", "_unreached",
    )

    def __init__(self, graph: Graph, metrics: Metrics | None = None) -> None:
        self._graph = graph
        self._metrics = metrics if metrics is not None else CounterMetrics()
        self._dist: list[float] = []
        self._pred: list[int | None] = []
        self._order: list[int] = []
        self._source: int | None = None
        self._unreached = math.inf

    @property
    def metrics(self) -> Metrics:
        return self._metrics

    @property
    def topological_order(self) -> list[int]:
        """Order used by the last computation (empty if it had a cycle)."""
        return list(self._order)

    @property
    def source(self) -> int | None:
        return self._source

    # ---- computations ----------------------------------------------------

    def shortest_paths(self, source: int) -> list[float]:
        """Distances from *source*; math.inf for unreachable vertices."""
        return self._relax_all(source, math.inf, lambda cand, cur: cand < cur)

    def longest_paths(self, source: int) -> list[float]:
        """Longest distances from *source*; -math.inf for unreachable vertices."""
        return self._relax_all(source, -math.inf, lambda cand, cur: cand > cur)

    def critical_path(self, source: int) -> CriticalPath:
        """Longest path starting at *source*.

        The endpoint is the vertex with the largest finite longest-path
        distance (lowest id on ties).  If nothing beyond the source is
        reachable the path is just [source] with length 0.  An invalid
        source or a cyclic graph gives an empty path of length -inf.
        """
        dist = self.longest_paths(source)

        best_vertex: int | None = None
        best = -math.inf
        for v, d in enumerate(dist):
            if d != -math.inf and d > best:
                best = d
                best_vertex = v

        if best_vertex is None:
            return CriticalPath(path=[], length=-math.inf)

        path = self.reconstruct_path(best_vertex)
        heaviest: Edge | None = None
        for u, v in zip(path, path[1:]):
            edge = self._edge_on_path(u, v, dist)
            if heaviest is None or edge.weight > heaviest.weight:
                heaviest = edge

        return CriticalPath(path=path, length=best, bottleneck=heaviest)

    # ---- queries ---------------------------------------------------------

    def distance(self, target: int) -> float:
        """Distance to *target* from the last computation (sentinel if invalid)."""
        if 0 <= target < len(self._dist):
            return self._dist[target]
        return self._unreached

    def reconstruct_path(self, target: int) -> list[int]:
        """Vertices from the source to *target*; [] if unreached or invalid."""
        if not 0 <= target < len(self._dist):
            return []
        if self._dist[target] == self._unreached:
            return []
        path: list[int] = []
        cur: int | None = target
        while cur is not None:
            path.append(cur)
            cur = self._pred[cur]
        path.reverse()
        return path

    # ---- internals -------------------------------------------------------

    def _relax_all(
        self,
        source: int,
        unreached: float,
        better: Callable[[float, float], bool],
    ) -> list[float]:
        graph = self._graph
        metrics = self._metrics
        n = graph.vertex_count

        dist = [unreached] * n
        pred: list[int | None] = [None] * n
        self._unreached = unreached
        self._source = source if graph.is_valid_vertex(source) else None

        with stopwatch(metrics):
            if self._source is None:
                self._order = []
            else:
                sorter = DFSTopologicalSort(graph, CounterMetrics())
                self._order = sorter.compute_order()
                if sorter.has_cycle():
                    log.debug("DAG paths from %d aborted: graph has a cycle", source)
                else:
                    dist[source] = 0.0
                    for u in self._order:
                        if dist[u] == unreached:
                            continue
                        for edge in graph.adjacent(u):
                            metrics.increment("relaxations")
                            cand = dist[u] + edge.weight
                            if better(cand, dist[edge.dst]):
                                dist[edge.dst] = cand
                                pred[edge.dst] = u

        self._dist = dist
        self._pred = pred
        return list(dist)

    def _edge_on_path(self, u: int, v: int, dist: list[float]) -> Edge:
        # with multi-edges, pick the one that produced dist[v]
        candidates = [e for e in self._graph.adjacent(u) if e.dst == v]
        for e in candidates:
            if dist[u] + e.weight == dist[v]:
                return e
        return candidates[0]
