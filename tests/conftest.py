"""Pytest configuration and shared fixtures for bellford tests.

This module provides:
- A deterministic numpy RNG fixture
- A factory fixture building random graphs without negative cycles
- Result consistency checks (debug mode) enabled for every test
"""

import os
from typing import Callable

import numpy as np
import pytest

from bellford.diagnostics import reset_debug_enabled, set_debug_enabled
from bellford.graphs import Graph


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG for tests.

    Uses seed from TEST_RNG_SEED environment variable (default: 0).
    This ensures tests are reproducible while allowing override for debugging.

    Returns:
        A seeded numpy.random.Generator instance.
    """
    seed = int(os.environ.get("TEST_RNG_SEED", "0"))
    return np.random.default_rng(seed)


@pytest.fixture(scope="function")
def potential_graph(rng: np.random.Generator) -> Callable[..., Graph]:
    """Factory for random graphs with negative weights but no negative cycle.

    Each weight is ``c + p[u] - p[v]`` with ``c >= 0`` and a random vertex
    potential ``p``, so every cycle sums to a non-negative value.
    """

    def build(n_vertices: int, n_edges: int) -> Graph:
        potential = rng.integers(-20, 21, size=n_vertices)
        sources = rng.integers(0, n_vertices, size=n_edges)
        destinations = rng.integers(0, n_vertices, size=n_edges)
        costs = rng.integers(0, 15, size=n_edges)
        graph = Graph(n_vertices)
        for u, v, c in zip(sources, destinations, costs):
            graph.add_edge(int(u), int(v), int(c + potential[u] - potential[v]))
        return graph

    return build


@pytest.fixture(scope="function", autouse=True)
def consistency_checks():
    """Auto-use fixture running every engine result through the debug checks.

    Resets debug mode to the BELLFORD_DEBUG default after each test.
    """
    set_debug_enabled(True)
    yield
    reset_debug_enabled()
