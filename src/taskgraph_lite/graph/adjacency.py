"""Fixed-size weighted directed graph using adjacency lists.

Vertices are dense integer ids in [0, n).  The vertex count is fixed
when the graph is created; only edges get added afterwards.  Each
vertex keeps its outgoing edges in a list, in insertion order.  That
order matters: every traversal in this package walks edges in the
order they were added, which is what makes the algorithms
deterministic for a given graph.

Vertices can carry optional names ("build", "deploy", ...).  Names are
just labels for reports and file formats; the algorithms only ever see
ids.

Edges with an endpoint outside [0, n) are rejected with
InvalidVertexError rather than silently dropped.  Loaders that want to
skip bad edges have to check is_valid_vertex() themselves.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator


class InvalidVertexError(ValueError):
    """Raised when a vertex id is outside [0, vertex_count)."""

    def __init__(self, vertex: int, vertex_count: int) -> None:
        self.vertex = vertex
        self.vertex_count = vertex_count
        super().__init__(
            f"Vertex {vertex!r} out of range for graph with {vertex_count} vertices"
        )


@dataclass(frozen=True, slots=True)
class Edge:
    """A directed, weighted edge src -> dst."""
    src: int
    dst: int
    weight: float = 1.0


class Graph:
    """Directed multigraph over vertices 0..n-1.

    Duplicate edges and self-loops are allowed.  Nothing is ever
    removed: algorithms treat the graph as read-only, and transpose()
    builds a new graph instead of flipping this one.
    """

    __slots__ = ("_n", "_adj", "_name_to_id", "_id_to_name")

    def __init__(self, vertex_count: int) -> None:
        if vertex_count < 0:
            raise ValueError(f"vertex_count must be >= 0, got {vertex_count}")
        self._n = vertex_count
        self._adj: list[list[Edge]] = [[] for _ in range(vertex_count)]
        self._name_to_id: dict[str, int] = {}
        self._id_to_name: dict[int, str] = {}

    # ---- names -----------------------------------------------------------

    def set_name(self, vertex: int, name: str) -> None:
        """Label *vertex* with *name*.

        If *name* was already on another vertex, the name now resolves
        to *vertex*.  The vertex's previous name (if any) stops
        resolving to it.
        """
        self._check(vertex)
        old = self._id_to_name.get(vertex)
        if old is not None and old != name and self._name_to_id.get(old) == vertex:
            del self._name_to_id[old]
        self._name_to_id[name] = vertex
        self._id_to_name[vertex] = name

    def name_of(self, vertex: int) -> str:
        """Name of *vertex*, or its id as a string if it has none."""
        return self._id_to_name.get(vertex, str(vertex))

    def id_of(self, name: str) -> int | None:
        """Vertex currently labelled *name*, or None."""
        return self._name_to_id.get(name)

    def names(self) -> dict[int, str]:
        """Explicitly assigned names, keyed by vertex id."""
        return dict(self._id_to_name)

    # ---- edges -----------------------------------------------------------

    def add_edge(self, src: int, dst: int, weight: float = 1.0) -> None:
        """Append the edge src -> dst to src's adjacency list."""
        self._check(src)
        self._check(dst)
        self._adj[src].append(Edge(src, dst, float(weight)))

    def adjacent(self, vertex: int) -> tuple[Edge, ...]:
        """Outgoing edges of *vertex* in insertion order.

        An invalid id has no edges.
        """
        if not self.is_valid_vertex(vertex):
            return ()
        return tuple(self._adj[vertex])

    def edges(self) -> Iterator[Edge]:
        for edges in self._adj:
            yield from edges

    def transpose(self) -> Graph:
        """New graph with every edge reversed.  Weights and names carry over."""
        rev = Graph(self._n)
        for edges in self._adj:
            for e in edges:
                rev._adj[e.dst].append(Edge(e.dst, e.src, e.weight))
        rev._name_to_id = dict(self._name_to_id)
        rev._id_to_name = dict(self._id_to_name)
        return rev

    # ---- queries ---------------------------------------------------------

    def is_valid_vertex(self, vertex: int) -> bool:
        return 0 <= vertex < self._n

    @property
    def vertex_count(self) -> int:
        return self._n

    @property
    def edge_count(self) -> int:
        return sum(len(edges) for edges in self._adj)

    @property
    def density(self) -> float:
        """E / (V * (V - 1)); 0.0 for graphs with fewer than two vertices."""
        if self._n < 2:
            return 0.0
        return self.edge_count / (self._n * (self._n - 1))

    def _check(self, vertex: int) -> None:
        if not self.is_valid_vertex(vertex):
            raise InvalidVertexError(vertex, self._n)

    # ---- dunder ----------------------------------------------------------

    def __contains__(self, vertex: object) -> bool:
        return isinstance(vertex, int) and self.is_valid_vertex(vertex)

    def __len__(self) -> int:
        return self._n

    def __repr__(self) -> str:
        return f"Graph(vertices={self._n}, edges={self.edge_count})"
