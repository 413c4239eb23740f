"""Strongly connected components: Tarjan's and Kosaraju's algorithms.

Both algorithms split the vertices into maximal groups where every
vertex can reach every other vertex in the group.  They always agree
on the groups themselves.  They do not agree on the order the groups
come out in, or on which group gets which index, so compare results
as sets of sets.

Tarjan's algorithm does it in one depth-first pass.  Each vertex gets
a discovery index and a "lowlink": the smallest index reachable from
its DFS subtree through edges that stay on the active stack.  A vertex
whose lowlink equals its own index is the root of a component, and
everything above it on the active stack belongs to that component.

Kosaraju's algorithm takes two passes.  Pass 1 records the order in
which vertices finish on the original graph.  Pass 2 walks the
transposed graph, starting from the vertex that finished last.  Each
walk there cannot leak out of its component (the edges that would let
it escape point the wrong way now), so each walk is exactly one SCC.

Both are O(V + E) and use explicit frame stacks (see traversal.py).
"""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from taskgraph_lite.graph.adjacency import Graph
from taskgraph_lite.graph.traversal import Frame
from taskgraph_lite.metrics import CounterMetrics, Metrics, stopwatch

log = logging.getLogger(__name__)


class SCCAlgorithm(ABC):
    """Common interface and result accessors for both SCC algorithms."""

    name = "scc"

    def __init__(self, graph: Graph, metrics: Metrics | None = None) -> None:
        self._graph = graph
        self._metrics = metrics if metrics is not None else CounterMetrics()
        self._components: list[list[int]] = []

    @abstractmethod
    def _run(self) -> list[list[int]]:
        ...

    def find_components(self) -> list[list[int]]:
        """Partition the vertices into strongly connected components."""
        with stopwatch(self._metrics):
            self._components = self._run()
        log.debug(
            "%s: %d component(s) over %d vertices in %.3f ms",
            self.name, len(self._components), self._graph.vertex_count,
            self._metrics.elapsed_ms,
        )
        return [list(c) for c in self._components]

    @property
    def metrics(self) -> Metrics:
        return self._metrics

    @property
    def components(self) -> list[list[int]]:
        """Components from the last run (empty before the first one)."""
        return [list(c) for c in self._components]

    @property
    def component_count(self) -> int:
        return len(self._components)

    def component_sizes(self) -> list[int]:
        """Component sizes, largest first."""
        return sorted((len(c) for c in self._components), reverse=True)

    def vertex_to_component(self) -> list[int]:
        """mapping[v] is the index in `components` of v's component."""
        mapping = [-1] * self._graph.vertex_count
        for cid, members in enumerate(self._components):
            for v in members:
                mapping[v] = cid
        return mapping


class TarjanSCC(SCCAlgorithm):
    """Single-pass SCC detection via discovery indices and lowlinks."""

    name = "tarjan"

    def _run(self) -> list[list[int]]:
        graph = self._graph
        metrics = self._metrics
        n = graph.vertex_count

        index = [-1] * n
        low = [0] * n
        active = [False] * n
        stack: list[int] = []
        components: list[list[int]] = []
        next_index = 0

        def _open(v: int) -> Frame:
            nonlocal next_index
            metrics.increment("dfs_visits")
            index[v] = low[v] = next_index
            next_index += 1
            stack.append(v)
            active[v] = True
            return Frame.enter(graph, v)

        for root in range(n):
            if index[root] != -1:
                continue
            frames = [_open(root)]
            while frames:
                frame = frames[-1]
                v = frame.vertex
                edge = frame.next_edge()
                if edge is not None:
                    metrics.increment("edges_examined")
                    w = edge.dst
                    if index[w] == -1:
                        frames.append(_open(w))
                    elif active[w]:
                        low[v] = min(low[v], low[w])
                    continue

                # all edges of v done: "return" to the parent frame
                frames.pop()
                if low[v] == index[v]:
                    component: list[int] = []
                    while True:
                        w = stack.pop()
                        active[w] = False
                        component.append(w)
                        if w == v:
                            break
                    components.append(component)
                if frames:
                    parent = frames[-1].vertex
                    low[parent] = min(low[parent], low[v])

        return components


def _walk(
    graph: Graph, start: int, visited: list[bool], metrics: Metrics
) -> tuple[list[int], list[int]]:
    """Depth-first walk from *start* over unvisited vertices.

    Marks everything it reaches in *visited* and returns the vertices in
    (pre-order, post-order).
    """
    pre: list[int] = [start]
    post: list[int] = []
    visited[start] = True
    metrics.increment("dfs_visits")
    frames = [Frame.enter(graph, start)]
    while frames:
        frame = frames[-1]
        edge = frame.next_edge()
        if edge is None:
            frames.pop()
            post.append(frame.vertex)
            continue
        metrics.increment("edges_examined")
        w = edge.dst
        if not visited[w]:
            visited[w] = True
            metrics.increment("dfs_visits")
            pre.append(w)
            frames.append(Frame.enter(graph, w))
    return pre, post


class KosarajuSCC(SCCAlgorithm):
    """Two-pass SCC detection: finish order, then walks on the transpose."""

    name = "kosaraju"

    def _run(self) -> list[list[int]]:
        graph = self._graph
        metrics = self._metrics
        n = graph.vertex_count

        # pass 1: finish order on the original graph
        visited = [False] * n
        finish: list[int] = []
        for start in range(n):
            if not visited[start]:
                _, post = _walk(graph, start, visited, metrics)
                finish.extend(post)

        # pass 2: each walk on the transpose is one component
        transpose = graph.transpose()
        visited = [False] * n
        components: list[list[int]] = []
        while finish:
            v = finish.pop()
            if visited[v]:
                continue
            reached, _ = _walk(transpose, v, visited, metrics)
            components.append(reached)

        return components
