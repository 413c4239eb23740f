"""Building blocks shared by the depth-first algorithms.

None of the DFS-based algorithms in this package recurse.  Python's
default recursion limit is about a thousand frames, and a plain chain
of a few thousand tasks would blow straight through it.  Instead each
algorithm keeps its own stack of Frame objects on the heap.

A Frame is what a recursive call would have held in its locals: the
vertex being expanded, its outgoing edges, and how far through those
edges we got.  "Recursing" is pushing a new frame; "returning" is
popping one and letting the parent frame carry on from its cursor.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from taskgraph_lite.graph.adjacency import Edge, Graph


class VertexState(Enum):
    UNVISITED = auto()
    IN_PROGRESS = auto()   # on the current DFS path
    FINISHED = auto()      # all descendants explored


@dataclass(slots=True)
class Frame:
    """One level of a flattened depth-first traversal."""
    vertex: int
    edges: tuple[Edge, ...]
    cursor: int = 0

    @classmethod
    def enter(cls, graph: Graph, vertex: int) -> Frame:
        return cls(vertex, graph.adjacent(vertex))

    def next_edge(self) -> Edge | None:
        """Advance the cursor and return the edge it passed, or None when done."""
        if self.cursor >= len(self.edges):
            return None
        edge = self.edges[self.cursor]
        self.cursor += 1
        return edge
