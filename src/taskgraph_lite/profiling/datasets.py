"""Synthetic task graphs for analysis and benchmarking.

The fixed suite has nine datasets in three size classes:

  small   (6-10 vertices):  one cyclic graph, two DAGs
  medium  (10-20 vertices): several SCCs, a sparse DAG, a dense cyclic graph
  large   (20-50 vertices): a sparse DAG, a dense DAG, chained SCCs

Every builder is deterministic.  The hand-written ones list their edges
explicitly.  The random ones draw from random.Random(seed), so the same
seed always gives the same graph.

random_dag() and layered_dag() build arbitrarily large DAGs for
benchmarks that need more than the fixed suite.
"""
from __future__ import annotations

import logging
import random
from pathlib import Path
from typing import Callable

from taskgraph_lite.graph.adjacency import Graph
from taskgraph_lite.storage.json_graph import save_graph

log = logging.getLogger(__name__)

SEED = 42


def _named(n: int, names: list[str] | None = None) -> Graph:
    g = Graph(n)
    labels = names if names is not None else [f"task_{i}" for i in range(n)]
    for i, name in enumerate(labels):
        g.set_name(i, name)
    return g


def _fixed(g: Graph, edges: list[tuple[int, int, float]]) -> Graph:
    for src, dst, w in edges:
        g.add_edge(src, dst, w)
    return g


def small_cyclic_1() -> Graph:
    """Two cycles (0-1-2-3 and 4-5-6) plus a sink."""
    g = _named(8, [f"task_{c}" for c in "ABCDEFGH"])
    return _fixed(g, [
        (0, 1, 2), (1, 2, 3), (2, 3, 2), (3, 0, 1),
        (4, 5, 2), (5, 6, 1), (6, 4, 1),
        (1, 4, 2), (3, 7, 3),
    ])


def small_dag_1() -> Graph:
    """A build pipeline: start -> prep -> build -> test/deploy -> verify -> end."""
    g = _named(7, ["start", "prep", "build", "test", "deploy", "verify", "end"])
    return _fixed(g, [
        (0, 1, 1), (1, 2, 2), (2, 3, 3), (2, 4, 2),
        (3, 4, 1), (4, 5, 2), (5, 6, 1),
    ])


def small_dag_2() -> Graph:
    """Three independent chains merging into one sink."""
    g = _named(10, [f"t{i}" for i in range(10)])
    return _fixed(g, [
        (0, 1, 2), (1, 2, 1),
        (3, 4, 3), (4, 5, 1),
        (6, 7, 2),
        (2, 8, 1), (5, 8, 2), (7, 8, 1),
        (8, 9, 2),
    ])


def medium_multiple_scc() -> Graph:
    """Three SCCs ({0,1,2}, {3,4,5}, {6,7}) feeding a tail of singletons."""
    g = _named(15)
    return _fixed(g, [
        (0, 1, 2), (1, 2, 1), (2, 0, 1),
        (3, 4, 2), (4, 5, 1), (5, 3, 2),
        (6, 7, 1), (7, 6, 2),
        (0, 3, 2), (2, 6, 1),
        (4, 8, 2), (7, 9, 1),
        (8, 10, 1), (9, 10, 2),
        (10, 11, 1), (11, 12, 2),
        (12, 13, 1), (13, 14, 2),
        (1, 9, 1), (5, 11, 2),
    ])


def medium_sparse_dag() -> Graph:
    """Six layers narrowing back to a single sink."""
    g = _named(16)
    return _fixed(g, [
        (0, 1, 1), (0, 2, 2),
        (1, 3, 2), (1, 4, 1), (2, 4, 2), (2, 5, 1),
        (3, 6, 1), (4, 7, 2), (5, 7, 1), (5, 8, 2),
        (6, 9, 2), (7, 10, 1), (8, 10, 1), (8, 11, 2),
        (9, 12, 1), (10, 13, 2), (11, 13, 1), (11, 14, 2),
        (12, 15, 2), (13, 15, 1), (14, 15, 2),
    ])


def medium_dense_cyclic(seed: int = SEED) -> Graph:
    """Three 6-cycles with random weights, linked into one 18-vertex SCC."""
    rng = random.Random(seed)
    n = 18
    g = _named(n)
    for i in range(3):
        base = i * 6
        for j in range(5):
            g.add_edge(base + j, base + j + 1, rng.randint(1, 3))
        g.add_edge(base + 5, base, rng.randint(1, 3))
    g.add_edge(0, 6, 2)
    g.add_edge(6, 12, 1)
    g.add_edge(8, 14, 2)
    g.add_edge(12, 2, 1)
    return g


def large_sparse_dag(seed: int = 123) -> Graph:
    """Five layers of five, each vertex linking to 1-3 vertices in the next layer.

    Vertices 25-29 sit outside the layers and stay isolated.
    """
    rng = random.Random(seed)
    layers, width = 5, 5
    g = _named(30)
    for layer in range(layers - 1):
        nxt = (layer + 1) * width
        for i in range(width):
            src = layer * width + i
            for _ in range(rng.randint(1, 3)):
                g.add_edge(src, nxt + rng.randrange(width), rng.randint(1, 5))
    return g


def large_dense_dag(seed: int = 456) -> Graph:
    """Forward edges to the next seven vertices, each kept with p=0.6."""
    rng = random.Random(seed)
    n = 35
    g = _named(n)
    for i in range(n):
        for j in range(i + 1, min(i + 8, n)):
            if rng.random() < 0.6:
                g.add_edge(i, j, rng.randint(1, 5))
    return g


def large_complex_scc(seed: int = 789) -> Graph:
    """Five 8-vertex rings connected in a forward chain."""
    rng = random.Random(seed)
    n = 40
    g = _named(n)
    for lo in range(0, n, 8):
        hi = lo + 8
        for i in range(lo, hi - 1):
            g.add_edge(i, i + 1, rng.randint(1, 3))
        g.add_edge(hi - 1, lo, rng.randint(1, 3))
    g.add_edge(3, 10, 2)
    g.add_edge(13, 20, 1)
    g.add_edge(19, 26, 2)
    g.add_edge(29, 34, 1)
    return g


DATASETS: dict[str, Callable[[], Graph]] = {
    "small_cyclic_1": small_cyclic_1,
    "small_dag_1": small_dag_1,
    "small_dag_2": small_dag_2,
    "medium_multiple_scc": medium_multiple_scc,
    "medium_sparse_dag": medium_sparse_dag,
    "medium_dense_cyclic": medium_dense_cyclic,
    "large_sparse_dag": large_sparse_dag,
    "large_dense_dag": large_dense_dag,
    "large_complex_scc": large_complex_scc,
}


def build_dataset(name: str) -> Graph:
    try:
        builder = DATASETS[name]
    except KeyError:
        raise ValueError(
            f"Unknown dataset {name!r}; expected one of {sorted(DATASETS)}"
        ) from None
    return builder()


def build_all() -> dict[str, Graph]:
    return {name: builder() for name, builder in DATASETS.items()}


def generate_all(out_dir: str | Path = "data") -> list[Path]:
    """Write every dataset to <out_dir>/<name>.json and return the paths."""
    out = Path(out_dir)
    written = []
    for name, graph in build_all().items():
        path = save_graph(graph, out / f"{name}.json", name=name)
        log.debug("Generated %s: %d vertices, %d edges",
                  path.name, graph.vertex_count, graph.edge_count)
        written.append(path)
    return written


def random_dag(n_vertices: int, edge_prob: float, seed: int = SEED) -> Graph:
    """Random DAG with forward edges only (i -> j for i < j), weights 1-5."""
    rng = random.Random(seed)
    g = Graph(n_vertices)
    for i in range(n_vertices):
        for j in range(i + 1, n_vertices):
            if rng.random() < edge_prob:
                g.add_edge(i, j, rng.randint(1, 5))
    return g


def layered_dag(n_layers: int, width: int, seed: int = SEED) -> Graph:
    """Layered DAG: each vertex in layer i > 0 has 1-3 parents in layer i-1."""
    rng = random.Random(seed)
    g = Graph(n_layers * width)
    for layer in range(1, n_layers):
        for w in range(width):
            node = layer * width + w
            n_parents = min(rng.randint(1, 3), width)
            for p in rng.sample(range(width), n_parents):
                g.add_edge((layer - 1) * width + p, node, rng.randint(1, 5))
    return g
