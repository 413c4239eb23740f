"""Graph algorithms for task dependency analysis."""

from taskgraph_lite.graph.adjacency import Edge, Graph, InvalidVertexError
from taskgraph_lite.graph.condensation import CondensationGraph, build_condensation
from taskgraph_lite.graph.dag_paths import CriticalPath, DAGPaths
from taskgraph_lite.graph.scc import KosarajuSCC, SCCAlgorithm, TarjanSCC
from taskgraph_lite.graph.topological import (
    DFSTopologicalSort,
    KahnTopologicalSort,
    TopologicalSorter,
)
from taskgraph_lite.graph.traversal import Frame, VertexState

__all__ = [
    "CondensationGraph",
    "CriticalPath",
    "DAGPaths",
    "DFSTopologicalSort",
    "Edge",
    "Frame",
    "Graph",
    "InvalidVertexError",
    "KahnTopologicalSort",
    "KosarajuSCC",
    "SCCAlgorithm",
    "TarjanSCC",
    "TopologicalSorter",
    "VertexState",
    "build_condensation",
]
