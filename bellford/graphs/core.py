"""
Core graph data structures.

Provides the directed, integer-weighted edge-list Graph consumed by the
Bellman-Ford engine. Vertices are the integers ``0 .. vertex_count - 1`` and
edges are kept in insertion order so that every relaxation pass visits them
in the same sequence.
"""

from __future__ import annotations

import numbers
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Iterator, List, NamedTuple, Tuple

import numpy as np

from ..errors import InvalidArgument


class Edge(NamedTuple):
    """Directed weighted edge ``source -> destination``."""

    source: int
    destination: int
    weight: int


def _as_int(value: Any, name: str) -> int:
    # bool is an Integral subclass; True/False are never meant as vertices or weights
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise InvalidArgument(f"{name} must be an integer, got {value!r}.")
    return int(value)


@dataclass
class Graph:
    """
    Directed multigraph with integer edge weights.

    Weights may be negative, zero or positive. Parallel edges and self-loops
    are kept as separate entries; nothing is merged or deduplicated.

    Attributes:
        vertex_count: Number of vertices; vertices are ``0 .. vertex_count - 1``.
            Read only, since existing edges were range-checked against it.

    Complexity:
        - add_edge: O(1) amortized
        - edges: O(E) (returns a snapshot tuple)
    """

    _vertex_count: int
    _edges: List[Edge] = field(default_factory=list, repr=False)

    def __init__(self, vertex_count: int):
        """
        Initialize a graph with no edges.

        Args:
            vertex_count: Number of vertices, at least 1.

        Raises:
            InvalidArgument: If vertex_count is not an integer or is < 1.
        """
        vertex_count = _as_int(vertex_count, "vertex_count")
        if vertex_count < 1:
            raise InvalidArgument(f"vertex_count must be >= 1, got {vertex_count}.")
        self._vertex_count = vertex_count
        self._edges = []

    @property
    def vertex_count(self) -> int:
        return self._vertex_count

    @classmethod
    def from_edges(
        cls, vertex_count: int, edges: Iterable[Tuple[int, int, int]]
    ) -> "Graph":
        """
        Build a graph from ``(source, destination, weight)`` triples.

        Example:
            >>> G = Graph.from_edges(3, [(0, 1, 4), (1, 2, -2)])
            >>> len(G)
            2
        """
        graph = cls(vertex_count)
        for source, destination, weight in edges:
            graph.add_edge(source, destination, weight)
        return graph

    def has_vertex(self, vertex: Any) -> bool:
        """Return True if ``vertex`` is an integer in ``[0, vertex_count)``."""
        if isinstance(vertex, bool) or not isinstance(vertex, numbers.Integral):
            return False
        return 0 <= vertex < self.vertex_count

    def check_vertex(self, vertex: Any, name: str = "vertex") -> int:
        """
        Validate a vertex index and return it as a plain int.

        Raises:
            InvalidArgument: If vertex is not an integer in ``[0, vertex_count)``.
        """
        vertex = _as_int(vertex, name)
        if not 0 <= vertex < self.vertex_count:
            raise InvalidArgument(
                f"{name} {vertex} out of range [0, {self.vertex_count - 1}]."
            )
        return vertex

    def add_edge(self, source: int, destination: int, weight: int) -> None:
        """
        Append the directed edge ``source -> destination``.

        Args:
            source: Source vertex.
            destination: Destination vertex.
            weight: Integer weight (may be negative).

        Raises:
            InvalidArgument: If an endpoint is out of range or a field is not
                an integer.
        """
        edge = Edge(
            self.check_vertex(source, "source"),
            self.check_vertex(destination, "destination"),
            _as_int(weight, "weight"),
        )
        self._edges.append(edge)

    def vertices(self) -> range:
        """Return the vertex indices in ascending order."""
        return range(self.vertex_count)

    def edges(self) -> Tuple[Edge, ...]:
        """Return all edges in insertion order."""
        return tuple(self._edges)

    def __len__(self) -> int:
        return len(self._edges)

    def __iter__(self) -> Iterator[Edge]:
        return iter(self._edges)

    def describe(self) -> Dict[str, Any]:
        """
        Return a structural summary of the graph.

        Returns:
            Dictionary with ``vertex_count``, ``edge_count`` and ``edges``
            (list of ``(source, destination, weight)`` tuples in insertion
            order).
        """
        return {
            "vertex_count": self.vertex_count,
            "edge_count": len(self._edges),
            "edges": [tuple(edge) for edge in self._edges],
        }

    def edge_array(self) -> np.ndarray:
        """
        Return the edge list as an ``(E, 3)`` int64 array.

        Columns are source, destination and weight. Raises ``OverflowError``
        if a weight does not fit in int64.
        """
        if not self._edges:
            return np.empty((0, 3), dtype=np.int64)
        return np.array(self._edges, dtype=np.int64)
