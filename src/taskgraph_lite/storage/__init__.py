"""JSON persistence for task graphs."""

from taskgraph_lite.storage.json_graph import (
    GraphFormatError,
    create_graph,
    graph_from_dict,
    graph_to_dict,
    load_graph,
    save_graph,
)

__all__ = [
    "GraphFormatError",
    "create_graph",
    "graph_from_dict",
    "graph_to_dict",
    "load_graph",
    "save_graph",
]
