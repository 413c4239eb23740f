"""Datasets, analysis and benchmarking for taskgraph-lite."""

from taskgraph_lite.profiling.datasets import (
    DATASETS,
    build_all,
    build_dataset,
    generate_all,
    layered_dag,
    random_dag,
)
from taskgraph_lite.profiling.harness import (
    BenchmarkResult,
    BenchmarkRun,
    GraphAnalysis,
    analyze_graph,
    benchmark_graph,
    run_benchmarks,
)
from taskgraph_lite.profiling.report import (
    format_analysis,
    format_results,
    format_summary,
)

__all__ = [
    "DATASETS",
    "BenchmarkResult",
    "BenchmarkRun",
    "GraphAnalysis",
    "analyze_graph",
    "benchmark_graph",
    "build_all",
    "build_dataset",
    "format_analysis",
    "format_results",
    "format_summary",
    "generate_all",
    "layered_dag",
    "random_dag",
    "run_benchmarks",
]
