"""Consistency checks for shortest-path results."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..errors import CorruptResult

if TYPE_CHECKING:
    from ..graphs.core import Graph
    from ..graphs.shortest import ShortestPaths


def assert_relaxation_fixpoint(
    graph: "Graph",
    result: "ShortestPaths",
) -> None:
    """
    Assert that no edge of ``graph`` can still relax ``result``.

    For every edge ``(u, v, w)`` with finite ``distance[u]`` this checks
    ``distance[v] <= distance[u] + w``, and that the start vertex has
    distance zero.

    Parameters
    ----------
    graph:
        Graph the result was computed on.
    result:
        Result of a successful run.

    Raises
    ------
    CorruptResult
        If the tables do not match the graph or an edge is still relaxable.
    """
    if result.vertex_count != graph.vertex_count:
        raise CorruptResult(
            f"Result has {result.vertex_count} vertices, graph has {graph.vertex_count}."
        )

    start_distance = result.distances[result.start]
    if start_distance.value != 0:
        raise CorruptResult(f"Start vertex {result.start} has distance {start_distance}, expected 0.")

    for u, v, weight in graph.edges():
        du = result.distances[u].value
        if du is None:
            continue
        total = du + weight
        dv = result.distances[v].value
        if dv is None or total < dv:
            raise CorruptResult(
                f"Edge {u} -> {v} (weight {weight}) still relaxes: "
                f"{du} + {weight} < {result.distances[v]}."
            )


def assert_predecessor_forest(result: "ShortestPaths") -> None:
    """
    Assert that the predecessor table forms a tree rooted at the start vertex.

    Parameters
    ----------
    result:
        Result of a successful run.

    Raises
    ------
    CorruptResult
        If the start vertex has a predecessor, a reachable vertex has none,
        an unreachable vertex has one, or a predecessor chain does not end
        at the start vertex.
    """
    n = result.vertex_count
    start = result.start

    if result.predecessors[start] is not None:
        raise CorruptResult(f"Start vertex {start} has predecessor {result.predecessors[start]}.")

    for vertex in range(n):
        if vertex == start:
            continue
        parent = result.predecessors[vertex]
        if result.distances[vertex].is_infinite:
            if parent is not None:
                raise CorruptResult(f"Unreachable vertex {vertex} has predecessor {parent}.")
            continue
        if parent is None:
            raise CorruptResult(f"Reachable vertex {vertex} has no predecessor.")

        # Walk back to start; more than n steps means a predecessor cycle
        current = vertex
        for _ in range(n):
            current = result.predecessors[current]
            if current is None or current == start:
                break
        if current != start:
            raise CorruptResult(f"Predecessor chain of vertex {vertex} does not reach start {start}.")
