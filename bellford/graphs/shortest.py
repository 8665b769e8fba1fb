"""
Bellman-Ford single-source shortest paths with negative-cycle detection.

A run walks the states INITIALIZING -> RELAXING -> VERIFYING and ends in
either DONE (a :class:`ShortestPaths` result) or NEGATIVE_CYCLE_FOUND (a
:class:`NegativeCycleDetected` result). Both outcomes are returned, never
raised; only malformed input raises :class:`~bellford.errors.InvalidArgument`.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 24.1 (Bellman-Ford).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence, Tuple, Union

import numpy as np

from ..diagnostics import assert_predecessor_forest, assert_relaxation_fixpoint, is_debug_enabled
from ..errors import DistanceOverflowError, InvalidArgument
from ..logging import get_logger
from .core import Edge, Graph, _as_int
from .distance import INFINITY, Distance

logger = get_logger(__name__)

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


class EngineState(Enum):
    """States of a single Bellman-Ford run."""

    INITIALIZING = "initializing"
    RELAXING = "relaxing"
    VERIFYING = "verifying"
    DONE = "done"
    NEGATIVE_CYCLE_FOUND = "negative_cycle_found"


@dataclass(frozen=True)
class EngineConfig:
    """
    Tuning knobs for :class:`ShortestPathEngine`.

    Attributes:
        early_exit: Stop relaxing after a pass that changed nothing. The
            final tables are identical; only ``ShortestPaths.passes`` differs.
        min_distance: Smallest representable distance, or None for
            unbounded.
        max_distance: Largest representable distance, or None for
            unbounded.

    Relaxation always runs on exact integers; the bounds apply to the final
    distances only. A reachable negative cycle is reported regardless of the
    bounds, and a cycle-free run with a final distance outside
    ``[min_distance, max_distance]`` raises DistanceOverflowError.
    """

    early_exit: bool = False
    min_distance: Optional[int] = None
    max_distance: Optional[int] = None

    def __post_init__(self) -> None:
        """Validate EngineConfig invariants."""
        if self.min_distance is not None and self.min_distance > 0:
            raise InvalidArgument(f"min_distance must be <= 0, got {self.min_distance}.")
        if self.max_distance is not None and self.max_distance < 0:
            raise InvalidArgument(f"max_distance must be >= 0, got {self.max_distance}.")

    @classmethod
    def int64(cls, early_exit: bool = False) -> "EngineConfig":
        """Config limiting distances to the signed 64-bit integer range."""
        return cls(early_exit=early_exit, min_distance=_INT64_MIN, max_distance=_INT64_MAX)


@dataclass(frozen=True)
class ShortestPaths:
    """
    Final distance and predecessor tables of a successful run.

    Attributes:
        start: Start vertex.
        distances: Distance per vertex; INFINITY marks unreachable vertices.
        predecessors: Previous vertex on the shortest path, or None for the
            start vertex and unreachable vertices.
        passes: Number of relaxation passes performed.
    """

    start: int
    distances: Tuple[Distance, ...]
    predecessors: Tuple[Optional[int], ...]
    passes: int = 0

    def __post_init__(self) -> None:
        distances = tuple(d if isinstance(d, Distance) else Distance(d) for d in self.distances)
        if not distances:
            raise InvalidArgument("ShortestPaths needs at least one vertex.")
        n = len(distances)
        if len(self.predecessors) != n:
            raise InvalidArgument(
                f"Table size mismatch: {n} distances, "
                f"{len(self.predecessors)} predecessors."
            )
        start = _as_int(self.start, "start")
        if not 0 <= start < n:
            raise InvalidArgument(f"start {start} out of range [0, {n - 1}].")
        predecessors = tuple(
            None if p is None else _as_int(p, f"predecessor of vertex {v}")
            for v, p in enumerate(self.predecessors)
        )
        for vertex, parent in enumerate(predecessors):
            if parent is not None and not 0 <= parent < n:
                raise InvalidArgument(
                    f"predecessor {parent} of vertex {vertex} out of range [0, {n - 1}]."
                )
        object.__setattr__(self, "start", start)
        object.__setattr__(self, "distances", distances)
        object.__setattr__(self, "predecessors", predecessors)

    @property
    def status(self) -> EngineState:
        return EngineState.DONE

    @property
    def vertex_count(self) -> int:
        return len(self.distances)

    def distance(self, vertex: int) -> Distance:
        return self.distances[vertex]

    def predecessor(self, vertex: int) -> Optional[int]:
        return self.predecessors[vertex]

    def is_reachable(self, vertex: int) -> bool:
        return self.distances[vertex].is_finite

    def reachable(self) -> List[int]:
        """Return reachable vertices in ascending order."""
        return [v for v, d in enumerate(self.distances) if d.is_finite]

    def distance_array(self) -> np.ndarray:
        """Return distances as a float64 array with ``np.inf`` for unreachable vertices."""
        return np.array([float(d) for d in self.distances], dtype=np.float64)

    def reachable_mask(self) -> np.ndarray:
        """Return a boolean array, True where the vertex is reachable."""
        return np.array([d.is_finite for d in self.distances], dtype=bool)


@dataclass(frozen=True)
class NegativeCycleDetected:
    """
    A negative-weight cycle is reachable from the start vertex.

    Shortest paths are undefined, so no tables are carried.

    Attributes:
        start: Start vertex of the run.
        witness: First edge (in graph order) that could still be relaxed in
            the verification pass.
    """

    start: int
    witness: Edge

    @property
    def status(self) -> EngineState:
        return EngineState.NEGATIVE_CYCLE_FOUND


RunResult = Union[ShortestPaths, NegativeCycleDetected]


class ShortestPathEngine:
    """
    Bellman-Ford engine.

    The engine holds only its configuration; every call to :meth:`run`
    allocates fresh tables and reads the graph without modifying it, so one
    engine and one graph can serve concurrent queries.

    Example:
        >>> G = Graph.from_edges(3, [(0, 1, 4), (1, 2, -2)])
        >>> result = ShortestPathEngine().run(G, 0)
        >>> [str(d) for d in result.distances]
        ['0', '4', '2']
    """

    def __init__(self, config: Optional[EngineConfig] = None):
        self.config = config if config is not None else EngineConfig()

    @staticmethod
    def _relax_pass(
        edges: Sequence[Edge],
        dist: List[Optional[int]],
        pred: List[Optional[int]],
    ) -> int:
        relaxed = 0
        for u, v, weight in edges:
            du = dist[u]
            if du is None:
                continue
            candidate = du + weight
            dv = dist[v]
            if dv is None or candidate < dv:
                dist[v] = candidate
                pred[v] = u
                relaxed += 1
        return relaxed

    @staticmethod
    def _find_relaxable(edges: Sequence[Edge], dist: List[Optional[int]]) -> Optional[Edge]:
        for edge in edges:
            u, v, weight = edge
            du = dist[u]
            if du is None:
                continue
            dv = dist[v]
            if dv is None or du + weight < dv:
                return edge
        return None

    def _check_bounds(self, dist: List[Optional[int]]) -> None:
        low, high = self.config.min_distance, self.config.max_distance
        for vertex, d in enumerate(dist):
            if d is None:
                continue
            if high is not None and d > high:
                raise DistanceOverflowError(
                    f"Distance {d} of vertex {vertex} exceeds max_distance {high}."
                )
            if low is not None and d < low:
                raise DistanceOverflowError(
                    f"Distance {d} of vertex {vertex} is below min_distance {low}."
                )

    def run(self, graph: Graph, start: int) -> RunResult:
        """
        Compute shortest paths from ``start``.

        Args:
            graph: Graph to search (read only).
            start: Start vertex.

        Returns:
            ShortestPaths, or NegativeCycleDetected if a negative-weight
            cycle is reachable from start.

        Raises:
            InvalidArgument: If start is not a vertex of graph.
            DistanceOverflowError: If no negative cycle is reachable and a
                final distance lies outside the configured bounds.
            CorruptResult: In debug mode, if the final tables fail the
                consistency checks.

        Complexity: O(VE) time, O(V) extra space.
        """
        logger.debug("%s: start=%r", EngineState.INITIALIZING.value, start)
        start = graph.check_vertex(start, "start")

        n = graph.vertex_count
        dist: List[Optional[int]] = [None] * n
        pred: List[Optional[int]] = [None] * n
        dist[start] = 0

        edges = graph.edges()

        logger.debug("%s: %d vertices, %d edges", EngineState.RELAXING.value, n, len(edges))
        passes = 0
        for _ in range(n - 1):
            passes += 1
            relaxed = self._relax_pass(edges, dist, pred)
            logger.debug("pass %d/%d relaxed %d edges", passes, n - 1, relaxed)
            if relaxed == 0 and self.config.early_exit:
                break

        logger.debug("%s", EngineState.VERIFYING.value)
        witness = self._find_relaxable(edges, dist)
        if witness is not None:
            logger.info(
                "Negative cycle reachable from %d (edge %d -> %d, weight %d)",
                start,
                witness.source,
                witness.destination,
                witness.weight,
            )
            return NegativeCycleDetected(start=start, witness=witness)

        self._check_bounds(dist)

        result = ShortestPaths(
            start=start,
            distances=tuple(INFINITY if d is None else Distance(d) for d in dist),
            predecessors=tuple(pred),
            passes=passes,
        )

        if is_debug_enabled():
            assert_relaxation_fixpoint(graph, result)
            assert_predecessor_forest(result)

        logger.debug("%s after %d passes", EngineState.DONE.value, passes)
        return result

    def reconstruct_path(self, result: ShortestPaths, start: int, target: int):
        """Delegate to :func:`bellford.graphs.paths.reconstruct_path`."""
        # Import here to avoid circular imports
        from .paths import reconstruct_path

        return reconstruct_path(result, start, target)


def bellman_ford(graph: Graph, start: int, config: Optional[EngineConfig] = None) -> RunResult:
    """
    Bellman-Ford algorithm for single-source shortest paths.

    Convenience wrapper around ``ShortestPathEngine(config).run(graph, start)``.

    Example:
        >>> G = Graph.from_edges(2, [(0, 1, 1), (1, 0, -3)])
        >>> bellman_ford(G, 0).status
        <EngineState.NEGATIVE_CYCLE_FOUND: 'negative_cycle_found'>
    """
    return ShortestPathEngine(config).run(graph, start)


__all__ = [
    "EngineState",
    "EngineConfig",
    "ShortestPaths",
    "NegativeCycleDetected",
    "RunResult",
    "ShortestPathEngine",
    "bellman_ford",
]
