"""Condensation graph: every SCC collapsed into a single vertex.

Given the components from an SCC run, component i gets an edge to
component j (i != j) if any original edge goes from a member of i to a
member of j.  Edges inside a component disappear, and parallel edges
between the same pair of components collapse into one.

If the components really are the maximal SCCs, the result is always a
DAG.  A cycle between two components would mean their members can all
reach each other, so they would have been one component.  That makes
the condensation the natural thing to topologically sort when the
original graph has cycles.
"""
from __future__ import annotations

from typing import Sequence

from taskgraph_lite.graph.adjacency import Graph


class CondensationGraph:
    """DAG of components built from an SCC partition of *graph*."""

    __slots__ = ("_components", "_vertex_to_component", "_succ", "_graph")

    def __init__(self, components: Sequence[Sequence[int]], graph: Graph) -> None:
        n = graph.vertex_count
        self._components = [list(c) for c in components]
        self._vertex_to_component = [-1] * n

        for cid, members in enumerate(self._components):
            for v in members:
                if not graph.is_valid_vertex(v):
                    raise ValueError(f"Component {cid} contains invalid vertex {v}")
                if self._vertex_to_component[v] != -1:
                    raise ValueError(
                        f"Vertex {v} appears in components "
                        f"{self._vertex_to_component[v]} and {cid}"
                    )
                self._vertex_to_component[v] = cid
        missing = [v for v in range(n) if self._vertex_to_component[v] == -1]
        if missing:
            raise ValueError(f"Vertices not in any component: {missing}")

        # dict keys as an insertion-ordered set: dedupes and stays deterministic
        self._succ: list[dict[int, None]] = [{} for _ in self._components]
        for edge in graph.edges():
            cu = self._vertex_to_component[edge.src]
            cv = self._vertex_to_component[edge.dst]
            if cu != cv:
                self._succ[cu][cv] = None

        self._graph = Graph(len(self._components))
        for cid, targets in enumerate(self._succ):
            for target in targets:
                self._graph.add_edge(cid, target)

    @property
    def component_count(self) -> int:
        return len(self._components)

    @property
    def edge_count(self) -> int:
        return sum(len(targets) for targets in self._succ)

    @property
    def graph(self) -> Graph:
        """The condensation as a plain Graph over component ids."""
        return self._graph

    def members(self, component_id: int) -> list[int]:
        if 0 <= component_id < len(self._components):
            return list(self._components[component_id])
        return []

    def component_of(self, vertex: int) -> int | None:
        if 0 <= vertex < len(self._vertex_to_component):
            return self._vertex_to_component[vertex]
        return None

    def successors(self, component_id: int) -> set[int]:
        """Components that *component_id* has an edge to."""
        if 0 <= component_id < len(self._succ):
            return set(self._succ[component_id])
        return set()

    def __repr__(self) -> str:
        return (
            f"CondensationGraph(components={self.component_count}, "
            f"edges={self.edge_count})"
        )


def build_condensation(
    components: Sequence[Sequence[int]], graph: Graph
) -> CondensationGraph:
    """Collapse *components* of *graph* into a CondensationGraph.

    Raises ValueError if *components* is not a partition of the
    graph's vertices.
    """
    return CondensationGraph(components, graph)
