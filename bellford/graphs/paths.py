"""
Path reconstruction from Bellman-Ford predecessor tables.
"""

from __future__ import annotations

import numbers
from dataclasses import dataclass
from typing import Dict, List, Sequence, Tuple, Union

from ..errors import CorruptResult, InvalidArgument
from .core import Graph
from .shortest import ShortestPaths


@dataclass(frozen=True)
class UnreachableTarget:
    """No path leads from ``start`` to ``target``."""

    start: int
    target: int


PathResult = Union[List[int], UnreachableTarget]


def reconstruct_path(result: ShortestPaths, start: int, target: int) -> PathResult:
    """
    Reconstruct the shortest path from ``start`` to ``target``.

    Args:
        result: Tables of a successful run.
        start: Start vertex; must equal ``result.start``.
        target: Vertex to reach.

    Returns:
        ``[start, ..., target]``, or UnreachableTarget if target has an
        infinite distance.

    Raises:
        InvalidArgument: If start does not match the result or target is out
            of range.
        CorruptResult: If the predecessor chain of a reachable target does
            not lead back to start.

    Example:
        >>> G = Graph.from_edges(3, [(0, 1, 1), (1, 2, 2)])
        >>> reconstruct_path(bellman_ford(G, 0), 0, 2)
        [0, 1, 2]
    """
    if start != result.start:
        raise InvalidArgument(f"start {start} does not match result start {result.start}.")
    if (
        isinstance(target, bool)
        or not isinstance(target, numbers.Integral)
        or not 0 <= target < result.vertex_count
    ):
        raise InvalidArgument(f"target {target!r} out of range [0, {result.vertex_count - 1}].")
    target = int(target)
    start = result.start

    if target == start:
        return [start]

    if result.distances[target].is_infinite:
        return UnreachableTarget(start=start, target=target)

    path = [target]
    current = target
    # A valid chain has at most vertex_count - 1 links
    for _ in range(result.vertex_count):
        current = result.predecessors[current]
        if current is None:
            raise CorruptResult(
                f"Predecessor chain of vertex {target} ends at {path[-1]} "
                f"without reaching start {start}."
            )
        path.append(current)
        if current == start:
            path.reverse()
            return path

    raise CorruptResult(f"Predecessor chain of vertex {target} contains a cycle.")


def path_weight(graph: Graph, path: Sequence[int]) -> int:
    """
    Return the total weight of ``path`` in ``graph``.

    Each consecutive pair uses its cheapest edge, which is the one
    Bellman-Ford relaxes through when parallel edges exist.

    Raises:
        InvalidArgument: If the path is empty or a pair has no edge.
    """
    if not path:
        raise InvalidArgument("path must contain at least one vertex.")

    cheapest: Dict[Tuple[int, int], int] = {}
    for u, v, weight in graph.edges():
        if (u, v) not in cheapest or weight < cheapest[(u, v)]:
            cheapest[(u, v)] = weight

    total = 0
    for u, v in zip(path, path[1:]):
        if (u, v) not in cheapest:
            raise InvalidArgument(f"No edge {u} -> {v} in graph.")
        total += cheapest[(u, v)]
    return total


__all__ = ["UnreachableTarget", "PathResult", "reconstruct_path", "path_weight"]
