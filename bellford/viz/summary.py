"""Graph and shortest-path summary utilities.

This module turns graphs and run results into summary dictionaries and
human-readable text tables.
"""

from __future__ import annotations

import sys
from typing import IO, Any, Dict, List, Optional

from bellford.graphs.core import Graph
from bellford.graphs.paths import UnreachableTarget, reconstruct_path
from bellford.graphs.shortest import NegativeCycleDetected, RunResult


def graph_summary(graph: Graph) -> Dict[str, Any]:
    """
    Generate a summary dictionary for a graph.

    Parameters
    ----------
    graph:
        Graph to summarize.

    Returns
    -------
    Dict[str, Any]
        Dictionary containing:
        - vertex_count: int
        - edge_count: int
        - edges: List[Tuple[int, int, int]] in insertion order
        - negative_edge_count: int
        - self_loop_count: int
    """
    summary = graph.describe()
    summary["negative_edge_count"] = sum(1 for edge in graph if edge.weight < 0)
    summary["self_loop_count"] = sum(1 for edge in graph if edge.source == edge.destination)
    return summary


def print_graph_summary(graph: Graph, file: Optional[IO[str]] = None) -> None:
    """
    Pretty-print a graph to stdout or a file.

    This is a utility function for human-readable output, so it uses print()
    intentionally. For programmatic access, use graph_summary() instead.

    Parameters
    ----------
    graph:
        Graph to print.
    file:
        File-like object to write to. If None, writes to sys.stdout.
    """
    if file is None:
        file = sys.stdout

    summary = graph_summary(graph)

    print("Graph", file=file)
    print("=" * 50, file=file)
    print(f"Vertices: {summary['vertex_count']}", file=file)
    print(f"Edges: {summary['edge_count']}", file=file)
    print("\nEdges (source -> destination [weight]):", file=file)
    if not summary["edges"]:
        print("  (none)", file=file)
    for source, destination, weight in summary["edges"]:
        print(f"  {source} -> {destination} [{weight}]", file=file)


def shortest_paths_summary(result: RunResult) -> Dict[str, Any]:
    """
    Generate a summary dictionary for a run result.

    Parameters
    ----------
    result:
        ShortestPaths or NegativeCycleDetected.

    Returns
    -------
    Dict[str, Any]
        Always contains ``start`` and ``status`` (the EngineState value).
        For NegativeCycleDetected, ``witness`` holds the offending edge.
        For ShortestPaths, ``rows`` holds one dict per vertex with
        ``vertex``, ``distance`` (int, or None when unreachable) and
        ``path`` (list of vertices, or None when unreachable).
    """
    summary: Dict[str, Any] = {"start": result.start, "status": result.status.value}

    if isinstance(result, NegativeCycleDetected):
        summary["witness"] = tuple(result.witness)
        return summary

    rows: List[Dict[str, Any]] = []
    for vertex in range(result.vertex_count):
        path = reconstruct_path(result, result.start, vertex)
        rows.append(
            {
                "vertex": vertex,
                "distance": result.distances[vertex].value,
                "path": None if isinstance(path, UnreachableTarget) else path,
            }
        )
    summary["rows"] = rows
    summary["passes"] = result.passes
    return summary


def print_shortest_paths(result: RunResult, file: Optional[IO[str]] = None) -> None:
    """
    Pretty-print a run result to stdout or a file.

    Unreachable vertices show ``INF`` as distance. A negative cycle prints a
    notice instead of the table.

    Parameters
    ----------
    result:
        ShortestPaths or NegativeCycleDetected.
    file:
        File-like object to write to. If None, writes to sys.stdout.
    """
    if file is None:
        file = sys.stdout

    summary = shortest_paths_summary(result)

    print("Bellman-Ford Results", file=file)
    print("=" * 50, file=file)
    print(f"Start vertex: {summary['start']}", file=file)

    if isinstance(result, NegativeCycleDetected):
        source, destination, weight = summary["witness"]
        print(
            "The graph contains a negative-weight cycle reachable from the start vertex.",
            file=file,
        )
        print("Shortest paths cannot be determined.", file=file)
        print(f"Witness edge: {source} -> {destination} [{weight}]", file=file)
        return

    for row in summary["rows"]:
        vertex = row["vertex"]
        distance = "INF" if row["distance"] is None else row["distance"]
        print(f"\nVertex {vertex}:", file=file)
        print(f"  Distance: {distance}", file=file)
        if vertex == summary["start"]:
            print(f"  Path: {vertex} (start)", file=file)
        elif row["path"] is None:
            print("  Path: unreachable", file=file)
        else:
            print(f"  Path: {' -> '.join(str(v) for v in row['path'])}", file=file)
