"""Benchmark Bellman-Ford on random graphs."""

import time
from typing import Dict

import numpy as np

import bellford as bf


def random_graph(n_vertices: int, n_edges: int, seed: int = 0) -> bf.Graph:
    """Random graph with non-negative weights (no negative cycles)."""
    rng = np.random.default_rng(seed)
    sources = rng.integers(0, n_vertices, size=n_edges)
    destinations = rng.integers(0, n_vertices, size=n_edges)
    weights = rng.integers(0, 100, size=n_edges)
    return bf.Graph.from_edges(n_vertices, zip(sources, destinations, weights))


def benchmark_bellman_ford(
    n_vertices: int,
    n_edges: int,
    early_exit: bool = False,
    repeats: int = 3,
) -> Dict[str, float]:
    """Benchmark a full Bellman-Ford run from vertex 0.

    Args:
        n_vertices: Number of vertices.
        n_edges: Number of edges.
        early_exit: Stop after a pass without changes.
        repeats: Number of timed runs; the best is reported.

    Returns:
        Dictionary with timing results.
    """
    graph = random_graph(n_vertices, n_edges)
    engine = bf.ShortestPathEngine(bf.EngineConfig(early_exit=early_exit))

    best = float("inf")
    passes = 0
    for _ in range(repeats):
        start = time.perf_counter()
        result = engine.run(graph, 0)
        best = min(best, time.perf_counter() - start)
        passes = getattr(result, "passes", 0)

    return {
        "n_vertices": n_vertices,
        "n_edges": n_edges,
        "passes": passes,
        "total_time_sec": best,
        "edge_relaxations_per_sec": passes * n_edges / best if best > 0 else float("inf"),
    }


if __name__ == "__main__":
    print("Benchmarking Bellman-Ford...")

    for early_exit in (False, True):
        results = benchmark_bellman_ford(n_vertices=500, n_edges=5000, early_exit=early_exit)
        print(f"500 vertices, 5000 edges, early_exit={early_exit}:")
        print(f"  Passes: {results['passes']}")
        print(f"  Time: {results['total_time_sec']*1e3:.2f} ms")
        print(f"  Relaxations per second: {results['edge_relaxations_per_sec']:.0f}")
