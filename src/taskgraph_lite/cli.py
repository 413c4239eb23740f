"""taskgraph-lite CLI entry point.

Usage: taskgraph-lite [-v] {generate,analyze,benchmark} ...
"""
import argparse
import logging
import sys
from pathlib import Path


def _add_generate_parser(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser(
        "generate",
        help="Write the built-in dataset suite as JSON files.",
    )
    p.add_argument(
        "--out", default="data",
        help="Output directory (default: data)",
    )


def _add_analyze_parser(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser(
        "analyze",
        help="Run SCC, topological sort and critical path analysis on graph files.",
    )
    p.add_argument("files", nargs="+", help="Graph JSON files")
    p.add_argument(
        "--source", type=int, default=0,
        help="Source vertex for path analysis (default: 0)",
    )


def _add_benchmark_parser(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser(
        "benchmark",
        help="Benchmark every algorithm on graph files or the built-in suite.",
    )
    p.add_argument(
        "files", nargs="*",
        help="Graph JSON files (default: the built-in dataset suite)",
    )
    p.add_argument(
        "--cprofile", action="store_true",
        help="Enable cProfile and print top functions by cumulative time.",
    )


def _run_generate(args: argparse.Namespace) -> int:
    from taskgraph_lite.profiling.datasets import generate_all

    for path in generate_all(args.out):
        print(f"Generated: {path}")
    return 0


def _run_analyze(args: argparse.Namespace) -> int:
    from taskgraph_lite.profiling.harness import analyze_graph
    from taskgraph_lite.profiling.report import format_analysis
    from taskgraph_lite.storage.json_graph import GraphFormatError, load_graph

    status = 0
    for i, file in enumerate(args.files):
        try:
            graph = load_graph(file)
        except (OSError, GraphFormatError) as exc:
            print(f"error: cannot load {file}: {exc}", file=sys.stderr)
            status = 1
            continue
        if i:
            print()
        print(format_analysis(analyze_graph(graph, args.source), graph, label=file))
    return status


def _run_benchmark(args: argparse.Namespace) -> int:
    from taskgraph_lite.profiling.datasets import build_all
    from taskgraph_lite.profiling.harness import run_benchmarks
    from taskgraph_lite.profiling.report import format_results, format_summary
    from taskgraph_lite.storage.json_graph import GraphFormatError, load_graph

    if args.files:
        graphs = {}
        for file in args.files:
            try:
                graphs[Path(file).stem] = load_graph(file)
            except (OSError, GraphFormatError) as exc:
                print(f"error: cannot load {file}: {exc}", file=sys.stderr)
                return 1
    else:
        graphs = build_all()

    run = run_benchmarks(graphs, profile=args.cprofile)
    print(format_results(run.results))
    print()
    print(format_summary(run.results))
    print(f"\nTotal: {run.total_time_ms:.1f} ms")
    if run.cprofile_stats:
        print()
        print("--- cProfile top functions ---")
        print(run.cprofile_stats)
    return 0


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="taskgraph-lite",
        description="Task dependency graph analysis -- SCCs, topological order, critical paths.",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Enable debug logging.",
    )
    subparsers = parser.add_subparsers(dest="command")

    _add_generate_parser(subparsers)
    _add_analyze_parser(subparsers)
    _add_benchmark_parser(subparsers)

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    handlers = {
        "generate": _run_generate,
        "analyze": _run_analyze,
        "benchmark": _run_benchmark,
    }
    sys.exit(handlers[args.command](args))
