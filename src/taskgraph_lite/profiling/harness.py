"""Analysis and benchmark harness for the graph algorithms.

analyze_graph() answers "what does this graph look like": how many
SCCs, whether it is a DAG, a topological order, distances and the
critical path from a source vertex.

benchmark_graph() answers "how much work did each algorithm do": every
algorithm runs once on the same graph with its own fresh
CounterMetrics, and the result records wall time plus the algorithm's
operation counters (DFS visits, edges examined, queue pushes/pops,
relaxations).  run_benchmarks() does that for a whole suite and can
optionally wrap the run in cProfile.

The harness is designed to be profiled, not to be fast.
"""
from __future__ import annotations

import cProfile
import io
import logging
import math
import pstats
import time
from dataclasses import dataclass, field
from typing import Callable, Mapping

from taskgraph_lite.graph.adjacency import Graph
from taskgraph_lite.graph.condensation import build_condensation
from taskgraph_lite.graph.dag_paths import CriticalPath, DAGPaths
from taskgraph_lite.graph.scc import KosarajuSCC, TarjanSCC
from taskgraph_lite.graph.topological import DFSTopologicalSort, KahnTopologicalSort
from taskgraph_lite.metrics import CounterMetrics, Metrics

log = logging.getLogger(__name__)


@dataclass(slots=True)
class GraphAnalysis:
    """Everything analyze_graph() found out about one graph."""
    vertices: int
    edges: int
    density: float
    tarjan_sizes: list[int]
    kosaraju_sizes: list[int]
    condensation_edges: int
    algorithms_agree: bool
    is_dag: bool
    order: list[int]
    cycle: list[int]
    source: int
    reachable: int = 0
    shortest: list[float] = field(default_factory=list)
    critical: CriticalPath | None = None

    @property
    def scc_count(self) -> int:
        return len(self.tarjan_sizes)


@dataclass(slots=True)
class BenchmarkResult:
    """One algorithm run on one dataset."""
    algorithm: str
    dataset: str
    vertices: int
    edges: int
    density: float
    time_ms: float
    counters: dict[str, int]

    @property
    def operations(self) -> int:
        return sum(self.counters.values())


@dataclass(slots=True)
class BenchmarkRun:
    """All results from run_benchmarks()."""
    results: list[BenchmarkResult]
    total_time_ms: float
    cprofile_stats: str | None = None


def _partition(components: list[list[int]]) -> set[frozenset[int]]:
    return {frozenset(c) for c in components}


def analyze_graph(graph: Graph, source: int = 0) -> GraphAnalysis:
    """Run every algorithm on *graph* and collect the headline numbers.

    Path analysis only happens when the graph is a DAG and *source* is
    a valid vertex.
    """
    tarjan = TarjanSCC(graph)
    components = tarjan.find_components()
    kosaraju = KosarajuSCC(graph)
    other = kosaraju.find_components()
    condensation = build_condensation(components, graph)

    kahn = KahnTopologicalSort(graph)
    order = kahn.compute_order()
    dfs = DFSTopologicalSort(graph)
    dfs.compute_order()

    analysis = GraphAnalysis(
        vertices=graph.vertex_count,
        edges=graph.edge_count,
        density=graph.density,
        tarjan_sizes=tarjan.component_sizes(),
        kosaraju_sizes=kosaraju.component_sizes(),
        condensation_edges=condensation.edge_count,
        algorithms_agree=_partition(components) == _partition(other),
        is_dag=not kahn.has_cycle(),
        order=order,
        cycle=dfs.cycle_path(),
        source=source,
    )

    if analysis.is_dag and graph.is_valid_vertex(source):
        paths = DAGPaths(graph)
        analysis.shortest = paths.shortest_paths(source)
        analysis.reachable = sum(1 for d in analysis.shortest if d != math.inf)
        analysis.critical = paths.critical_path(source)

    log.debug("Analyzed %r: %d SCC(s), dag=%s", graph, analysis.scc_count, analysis.is_dag)
    return analysis


def _timed(
    name: str, dataset: str, graph: Graph, run: Callable[[Metrics], object]
) -> BenchmarkResult:
    metrics = CounterMetrics()
    t0 = time.perf_counter()
    run(metrics)
    elapsed_ms = (time.perf_counter() - t0) * 1000
    return BenchmarkResult(
        algorithm=name,
        dataset=dataset,
        vertices=graph.vertex_count,
        edges=graph.edge_count,
        density=graph.density,
        time_ms=elapsed_ms,
        counters=metrics.counters(),
    )


def benchmark_graph(graph: Graph, dataset: str, source: int = 0) -> list[BenchmarkResult]:
    """Time every algorithm once on *graph*.

    DAG path algorithms are skipped when the graph has a cycle.
    """
    results = [
        _timed("SCC-Tarjan", dataset, graph,
               lambda m: TarjanSCC(graph, m).find_components()),
        _timed("SCC-Kosaraju", dataset, graph,
               lambda m: KosarajuSCC(graph, m).find_components()),
        _timed("Topo-Kahn", dataset, graph,
               lambda m: KahnTopologicalSort(graph, m).compute_order()),
        _timed("Topo-DFS", dataset, graph,
               lambda m: DFSTopologicalSort(graph, m).compute_order()),
    ]

    dag_check = KahnTopologicalSort(graph)
    dag_check.compute_order()
    if not dag_check.has_cycle() and graph.is_valid_vertex(source):
        results.append(_timed("DAG-Shortest", dataset, graph,
                              lambda m: DAGPaths(graph, m).shortest_paths(source)))
        results.append(_timed("DAG-Longest", dataset, graph,
                              lambda m: DAGPaths(graph, m).longest_paths(source)))
    else:
        log.debug("%s: skipping DAG path benchmarks", dataset)
    return results


def run_benchmarks(graphs: Mapping[str, Graph], profile: bool = False) -> BenchmarkRun:
    """Benchmark every graph in *graphs* (dataset name -> Graph).

    If profile=True, wraps the entire run in cProfile and includes
    the stats in the result.
    """
    results: list[BenchmarkResult] = []

    def _run() -> None:
        for name, graph in graphs.items():
            results.extend(benchmark_graph(graph, name))

    cprofile_text = None
    t_start = time.perf_counter()
    if profile:
        pr = cProfile.Profile()
        pr.enable()
        _run()
        pr.disable()
        s = io.StringIO()
        ps = pstats.Stats(pr, stream=s).sort_stats("cumulative")
        ps.print_stats(30)
        cprofile_text = s.getvalue()
    else:
        _run()
    total_ms = (time.perf_counter() - t_start) * 1000

    return BenchmarkRun(results=results, total_time_ms=total_ms, cprofile_stats=cprofile_text)
