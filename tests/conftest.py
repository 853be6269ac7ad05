"""Pytest configuration and shared fixtures for densepath tests.

This module provides:
- A deterministic numpy RNG fixture
- Random dense graph builders used by the solver agreement tests
"""

import os
from typing import Callable

import numpy as np
import pytest

from densepath.graphs import MAX_VERTICES, DenseGraph


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
def random_graph(rng: np.random.Generator) -> Callable[..., DenseGraph]:
    """Factory for random non-negative dense graphs.

    Each off-diagonal cell holds an edge with probability ``density`` and an
    integer-valued weight in ``[1, max_weight]`` so sums stay exact.
    """

    def build(n: int = MAX_VERTICES, density: float = 0.4, max_weight: int = 20) -> DenseGraph:
        graph = DenseGraph(n)
        for i in range(n):
            for j in range(n):
                if i != j and rng.random() < density:
                    graph.set_edge(i, j, float(rng.integers(1, max_weight + 1)))
        return graph

    return build


@pytest.fixture
def chain_graph() -> DenseGraph:
    """Three vertices: 1->2 (2), 2->3 (3), 1->3 (10) in 1-indexed terms."""
    return DenseGraph.from_edges(3, [(0, 1, 2.0), (1, 2, 3.0), (0, 2, 10.0)])


@pytest.fixture
def negative_cycle_graph() -> DenseGraph:
    """Two vertices joined by a -1/-1 cycle."""
    return DenseGraph.from_edges(2, [(0, 1, -1.0), (1, 0, -1.0)])
