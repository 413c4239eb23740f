"""Tests for the analysis and benchmark harness."""
from __future__ import annotations

import math

from taskgraph_lite.graph.adjacency import Edge, Graph
from taskgraph_lite.profiling.datasets import build_dataset
from taskgraph_lite.profiling.harness import (
    analyze_graph,
    benchmark_graph,
    run_benchmarks,
)

ALL_ALGORITHMS = [
    "SCC-Tarjan", "SCC-Kosaraju", "Topo-Kahn", "Topo-DFS",
    "DAG-Shortest", "DAG-Longest",
]


class TestAnalyzeGraph:
    def test_pipeline_dag(self) -> None:
        g = build_dataset("small_dag_1")
        a = analyze_graph(g, source=0)
        assert a.vertices == 7
        assert a.edges == 7
        assert a.is_dag
        assert a.scc_count == 7
        assert a.algorithms_agree
        assert a.condensation_edges == 7
        assert a.cycle == []
        assert sorted(a.order) == list(range(7))
        assert a.shortest == [0, 1, 3, 6, 5, 7, 8]
        assert a.reachable == 7
        assert a.critical is not None
        assert a.critical.length == 10
        assert [g.name_of(v) for v in a.critical.path] == [
            "start", "prep", "build", "test", "deploy", "verify", "end",
        ]
        assert a.critical.bottleneck == Edge(2, 3, 3.0)

    def test_cyclic_graph(self) -> None:
        g = build_dataset("small_cyclic_1")
        a = analyze_graph(g)
        assert not a.is_dag
        assert a.order == []
        assert a.cycle == [0, 1, 2, 3, 0]
        assert a.tarjan_sizes == a.kosaraju_sizes == [4, 3, 1]
        assert a.algorithms_agree
        assert a.condensation_edges == 2
        assert a.critical is None
        assert a.shortest == []

    def test_reachable_counts_only_finite(self) -> None:
        g = build_dataset("small_dag_2")
        a = analyze_graph(g, source=3)
        # 3 -> 4 -> 5 -> 8 -> 9
        assert a.reachable == 5
        assert a.shortest[0] == math.inf

    def test_invalid_source_skips_paths(self) -> None:
        a = analyze_graph(build_dataset("small_dag_1"), source=99)
        assert a.is_dag
        assert a.critical is None
        assert a.reachable == 0

    def test_every_dataset_agrees(self) -> None:
        for name in ("medium_multiple_scc", "medium_dense_cyclic", "large_complex_scc"):
            assert analyze_graph(build_dataset(name)).algorithms_agree


class TestBenchmarkGraph:
    def test_dag_runs_everything(self) -> None:
        results = benchmark_graph(build_dataset("small_dag_1"), "small_dag_1")
        assert [r.algorithm for r in results] == ALL_ALGORITHMS
        for r in results:
            assert r.dataset == "small_dag_1"
            assert r.vertices == 7
            assert r.time_ms >= 0
            assert r.operations > 0

    def test_cycle_skips_dag_paths(self) -> None:
        results = benchmark_graph(build_dataset("small_cyclic_1"), "small_cyclic_1")
        assert [r.algorithm for r in results] == ALL_ALGORITHMS[:4]

    def test_counters_are_per_run(self) -> None:
        g = build_dataset("medium_sparse_dag")
        results = {r.algorithm: r for r in benchmark_graph(g, "m")}
        assert results["SCC-Tarjan"].counters["dfs_visits"] == g.vertex_count
        assert results["SCC-Kosaraju"].counters["dfs_visits"] == 2 * g.vertex_count
        assert results["Topo-Kahn"].counters["pops"] == g.vertex_count
        assert results["DAG-Shortest"].counters["relaxations"] > 0

    def test_empty_graph(self) -> None:
        results = benchmark_graph(Graph(0), "empty")
        assert [r.algorithm for r in results] == ALL_ALGORITHMS[:4]
        assert all(r.operations == 0 for r in results)


class TestRunBenchmarks:
    def test_suite(self) -> None:
        graphs = {
            "a": build_dataset("small_dag_1"),
            "b": build_dataset("small_cyclic_1"),
        }
        run = run_benchmarks(graphs)
        assert len(run.results) == 6 + 4
        assert {r.dataset for r in run.results} == {"a", "b"}
        assert run.total_time_ms > 0
        assert run.cprofile_stats is None

    def test_with_profiling(self) -> None:
        run = run_benchmarks({"a": build_dataset("small_dag_1")}, profile=True)
        assert run.cprofile_stats is not None
        assert "function calls" in run.cprofile_stats
