"""Report generation for analysis and benchmark results.

Formats GraphAnalysis and BenchmarkResult data into plain-text tables
for terminal output.
"""
from __future__ import annotations

from collections import defaultdict

from taskgraph_lite.graph.adjacency import Graph
from taskgraph_lite.profiling.harness import BenchmarkResult, GraphAnalysis

_MAX_SHOWN = 10


def _path_names(graph: Graph, path: list[int]) -> str:
    return " -> ".join(graph.name_of(v) for v in path)


def format_analysis(analysis: GraphAnalysis, graph: Graph, label: str = "Graph") -> str:
    """Format a GraphAnalysis as a readable report string."""
    lines = [
        f"=== {label} ===",
        f"Vertices:          {analysis.vertices:,}",
        f"Edges:             {analysis.edges:,}",
        f"Density:           {analysis.density:.3f}",
        "",
        "Strongly connected components:",
        f"  Count:           {analysis.scc_count}",
    ]
    for i, size in enumerate(analysis.tarjan_sizes[:5]):
        lines.append(f"  Component {i + 1}:     {size} vertices")
    if analysis.scc_count > 5:
        lines.append(f"  ... and {analysis.scc_count - 5} more")
    lines.append(f"  Tarjan/Kosaraju:  {'agree' if analysis.algorithms_agree else 'DISAGREE'}")
    lines.append(f"  Condensation:     {analysis.scc_count} nodes, "
                 f"{analysis.condensation_edges} edges")

    lines.append("")
    lines.append("Topological sort:")
    if not analysis.is_dag:
        lines.append("  Status:          cycle detected, no order exists")
        if analysis.cycle:
            lines.append(f"  Cycle:           {_path_names(graph, analysis.cycle)}")
        return "\n".join(lines)

    shown = [graph.name_of(v) for v in analysis.order[:_MAX_SHOWN]]
    more = " ..." if len(analysis.order) > _MAX_SHOWN else ""
    lines.append(f"  Order:           {', '.join(shown)}{more}")

    lines.append("")
    lines.append(f"DAG paths from {graph.name_of(analysis.source)}:")
    if analysis.critical is None:
        lines.append("  Skipped:         source vertex is not in the graph")
        return "\n".join(lines)
    lines.append(f"  Reachable:       {analysis.reachable} of {analysis.vertices}")
    cp = analysis.critical
    lines.append(f"  Critical length: {cp.length:g}")
    lines.append(f"  Critical path:   {_path_names(graph, cp.path)}")
    if cp.bottleneck is not None:
        b = cp.bottleneck
        lines.append(
            f"  Bottleneck:      {graph.name_of(b.src)} -> {graph.name_of(b.dst)} "
            f"({b.weight:g})"
        )
    return "\n".join(lines)


def format_results(results: list[BenchmarkResult]) -> str:
    """One row per (dataset, algorithm)."""
    lines = [
        f"{'Algorithm':<14} {'Dataset':<22} {'V':>5} {'E':>6} "
        f"{'Time (ms)':>10} {'Ops':>8}  Counters",
        "-" * 100,
    ]
    for r in results:
        counters = ", ".join(f"{k}={v}" for k, v in sorted(r.counters.items()))
        lines.append(
            f"{r.algorithm:<14} {r.dataset:<22} {r.vertices:>5} {r.edges:>6} "
            f"{r.time_ms:>10.4f} {r.operations:>8}  {counters}"
        )
    return "\n".join(lines)


def format_summary(results: list[BenchmarkResult]) -> str:
    """Total, mean, min and max time per algorithm across all datasets."""
    by_algo: dict[str, list[BenchmarkResult]] = defaultdict(list)
    for r in results:
        by_algo[r.algorithm].append(r)

    lines = [
        f"{'Algorithm':<14} {'Runs':>5} {'Total (ms)':>12} {'Mean (ms)':>10} "
        f"{'Min (ms)':>10} {'Max (ms)':>10} {'Ops':>10}",
        "-" * 77,
    ]
    for algo, runs in by_algo.items():
        times = [r.time_ms for r in runs]
        total = sum(times)
        ops = sum(r.operations for r in runs)
        lines.append(
            f"{algo:<14} {len(runs):>5} {total:>12.4f} {total / len(runs):>10.4f} "
            f"{min(times):>10.4f} {max(times):>10.4f} {ops:>10}"
        )
    return "\n".join(lines)
