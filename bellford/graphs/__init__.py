"""
Graph algorithms package for bellford.

This package provides:
- The integer-weighted directed Graph
- Finite-or-infinite Distance values
- The Bellman-Ford ShortestPathEngine with negative-cycle detection
- Path reconstruction from predecessor tables

All algorithms are deterministic: edges are relaxed in insertion order.
"""

from .core import Edge, Graph
from .distance import INFINITY, Distance
from .paths import PathResult, UnreachableTarget, path_weight, reconstruct_path
from .shortest import (
    EngineConfig,
    EngineState,
    NegativeCycleDetected,
    RunResult,
    ShortestPathEngine,
    ShortestPaths,
    bellman_ford,
)

__all__ = [
    "Edge",
    "Graph",
    "Distance",
    "INFINITY",
    "EngineConfig",
    "EngineState",
    "ShortestPaths",
    "NegativeCycleDetected",
    "RunResult",
    "ShortestPathEngine",
    "bellman_ford",
    "UnreachableTarget",
    "PathResult",
    "reconstruct_path",
    "path_weight",
]

# Example usage:
# from bellford.graphs import Graph, bellman_ford, reconstruct_path
#
# G = Graph(3)
# G.add_edge(0, 1, 4)
# G.add_edge(1, 2, -2)
# result = bellman_ford(G, 0)
# path = reconstruct_path(result, 0, 2)  # [0, 1, 2]
