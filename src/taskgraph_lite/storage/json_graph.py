"""Read and write task graphs as JSON documents.

Document format:
    {
        "name": "Task Graph",
        "vertices": 7,
        "vertexNames": ["start", "prep", "build", ...],
        "edges": [
            {"from": 0, "to": 1, "weight": 1.0},
            ...
        ]
    }

vertexNames may be shorter than vertices or hold nulls (unnamed
vertices fall back to their id) and weight may be omitted (defaults to 1.0).  Edges that
point outside [0, vertices) are dropped with a warning rather than
failing the whole load, so a dataset with one bad line is still
usable.  Anything else that is wrong with the document raises
GraphFormatError, including a vertexNames or edges value that is not a
list and an endpoint that is not an integer.

The graph store itself never touches files; this module is the only
place that does.
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Iterable, Sequence

from taskgraph_lite.graph.adjacency import Graph

log = logging.getLogger(__name__)

DEFAULT_NAME = "Task Graph"


class GraphFormatError(ValueError):
    """Raised when a JSON document does not describe a valid graph."""


def graph_to_dict(graph: Graph, name: str = DEFAULT_NAME) -> dict[str, Any]:
    # unnamed vertices are written as null so they stay unnamed on reload
    names = graph.names()
    return {
        "name": name,
        "vertices": graph.vertex_count,
        "vertexNames": [names.get(v) for v in range(graph.vertex_count)],
        "edges": [
            {"from": e.src, "to": e.dst, "weight": e.weight}
            for e in graph.edges()
        ],
    }


def _endpoint(raw: dict[str, Any], key: str) -> int:
    value = raw[key]
    if isinstance(value, bool):
        raise TypeError(f"{key!r} must be an integer, got {value!r}")
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if not isinstance(value, int):
        raise TypeError(f"{key!r} must be an integer, got {value!r}")
    return value


def graph_from_dict(data: Any) -> Graph:
    """Build a Graph from a decoded JSON document."""
    if not isinstance(data, dict):
        raise GraphFormatError("Graph document must be a JSON object")

    n = data.get("vertices")
    if isinstance(n, bool) or not isinstance(n, int) or n <= 0:
        raise GraphFormatError(f"'vertices' must be a positive integer, got {n!r}")

    names = data.get("vertexNames") or []
    if not isinstance(names, list):
        raise GraphFormatError(f"'vertexNames' must be a list, got {names!r}")
    raw_edges = data.get("edges") or []
    if not isinstance(raw_edges, list):
        raise GraphFormatError(f"'edges' must be a list, got {raw_edges!r}")

    graph = Graph(n)
    for v, name in enumerate(names[:n]):
        if name is not None:
            graph.set_name(v, str(name))

    dropped = 0
    for i, raw in enumerate(raw_edges):
        try:
            src = _endpoint(raw, "from")
            dst = _endpoint(raw, "to")
            weight = float(raw.get("weight", 1.0))
        except (KeyError, TypeError, ValueError, AttributeError) as exc:
            raise GraphFormatError(f"Malformed edge #{i}: {raw!r}") from exc
        if not (graph.is_valid_vertex(src) and graph.is_valid_vertex(dst)):
            dropped += 1
            continue
        graph.add_edge(src, dst, weight)

    if dropped:
        log.warning(
            "Dropped %d edge(s) with endpoints outside [0, %d)", dropped, n
        )
    return graph


def load_graph(path: str | Path) -> Graph:
    """Load a graph from a JSON file.

    Raises OSError if the file cannot be read and GraphFormatError if
    it is not UTF-8 JSON describing a valid graph.
    """
    raw = Path(path).read_bytes()
    try:
        data = json.loads(raw.decode("utf-8"))
    except UnicodeDecodeError as exc:
        raise GraphFormatError(f"{path}: not UTF-8 text: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise GraphFormatError(f"{path}: invalid JSON: {exc}") from exc
    graph = graph_from_dict(data)
    log.debug("Loaded %r from %s", graph, path)
    return graph


def save_graph(graph: Graph, path: str | Path, name: str = DEFAULT_NAME) -> Path:
    """Write *graph* to *path* as pretty-printed JSON, creating directories."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(graph_to_dict(graph, name), indent=2), encoding="utf-8")
    log.debug("Saved %r to %s", graph, path)
    return path


def create_graph(
    vertex_count: int,
    edges: Iterable[Sequence[float]],
    names: Sequence[str] | None = None,
) -> Graph:
    """Build a Graph from (src, dst) or (src, dst, weight) tuples.

    Unlike the JSON loader this does not drop bad edges: an endpoint
    outside the graph raises InvalidVertexError.
    """
    graph = Graph(vertex_count)
    if names is not None:
        for v, name in enumerate(names[:vertex_count]):
            graph.set_name(v, name)
    for edge in edges:
        if len(edge) < 2:
            raise ValueError(f"Edge needs at least (src, dst), got {edge!r}")
        weight = edge[2] if len(edge) >= 3 else 1.0
        graph.add_edge(int(edge[0]), int(edge[1]), weight)
    return graph
