"""Text rendering of graphs and shortest-path results."""

from .summary import (
    graph_summary,
    print_graph_summary,
    print_shortest_paths,
    shortest_paths_summary,
)

__all__ = [
    "graph_summary",
    "print_graph_summary",
    "shortest_paths_summary",
    "print_shortest_paths",
]
