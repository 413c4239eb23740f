"""Shared fixtures for graph algorithm tests."""
from __future__ import annotations

import random

import pytest

from taskgraph_lite.graph.adjacency import Graph
from taskgraph_lite.storage.json_graph import create_graph

SEED = 42
DEEP = 50_000


@pytest.fixture
def empty_graph() -> Graph:
    return Graph(0)


@pytest.fixture
def chain_graph() -> Graph:
    """0 -(2)-> 1 -(3)-> 2 -(1)-> 3"""
    return create_graph(4, [(0, 1, 2), (1, 2, 3), (2, 3, 1)])


@pytest.fixture
def cycle_with_tail() -> Graph:
    """0 -> 1 -> 2 -> 0, plus 2 -> 3"""
    return create_graph(4, [(0, 1), (1, 2), (2, 0), (2, 3)])


@pytest.fixture
def branching_dag() -> Graph:
    """
    0 -(4)-> 1 -(1)-> 3 -(3)-> 4 -(2)-> 5
    0 -(2)-> 2 -(5)-> 3 -(2)-> 5
    """
    return create_graph(6, [
        (0, 1, 4), (0, 2, 2), (1, 3, 1), (2, 3, 5),
        (3, 4, 3), (3, 5, 2), (4, 5, 2),
    ])


@pytest.fixture
def diamond_graph() -> Graph:
    """
    0 -> 1 -> 3
    0 -> 2 -> 3
    """
    return create_graph(4, [(0, 1), (0, 2), (1, 3), (2, 3)])


@pytest.fixture
def multi_scc_graph() -> Graph:
    """Components {0,1,2}, {3,4}, {5}, {6,7,8} wired 0..2 -> 3,4 -> 5 -> 6..8."""
    return create_graph(9, [
        (0, 1), (1, 2), (2, 0),
        (3, 4), (4, 3),
        (6, 7), (7, 8), (8, 6),
        (2, 3), (1, 4), (4, 5), (5, 6), (0, 5),
    ])


@pytest.fixture
def deep_chain() -> Graph:
    """A DAG path far deeper than the interpreter recursion limit."""
    g = Graph(DEEP)
    for i in range(DEEP - 1):
        g.add_edge(i, i + 1)
    return g


@pytest.fixture
def deep_ring() -> Graph:
    """deep_chain closed back into one giant cycle."""
    g = Graph(DEEP)
    for i in range(DEEP):
        g.add_edge(i, (i + 1) % DEEP)
    return g


def random_digraph(n: int, edge_prob: float, seed: int = SEED) -> Graph:
    """Random directed graph with cycles, self-loops and parallel edges."""
    rng = random.Random(seed)
    g = Graph(n)
    for i in range(n):
        for j in range(n):
            if rng.random() < edge_prob:
                g.add_edge(i, j, rng.randint(1, 9))
                if rng.random() < 0.1:
                    g.add_edge(i, j, rng.randint(1, 9))
    return g


@pytest.fixture(params=[(8, 0.2, 1), (25, 0.08, 2), (60, 0.03, 3), (120, 0.015, 4)])
def random_graph(request: pytest.FixtureRequest) -> Graph:
    n, p, seed = request.param
    return random_digraph(n, p, seed)


def reachable_from(graph: Graph, start: int) -> set[int]:
    seen = {start}
    todo = [start]
    while todo:
        v = todo.pop()
        for e in graph.adjacent(v):
            if e.dst not in seen:
                seen.add(e.dst)
                todo.append(e.dst)
    return seen


@pytest.fixture
def reach():
    """reach(graph, v) -> set of vertices reachable from v (including v)."""
    return reachable_from
