"""Benchmark Floyd-Warshall against repeated dense Dijkstra."""

import time
from typing import Callable, Dict

import numpy as np

from densepath.graphs import MAX_VERTICES, DenseGraph, all_pairs_via_dijkstra, floyd_warshall


def random_dense_graph(n: int, density: float, seed: int = 0) -> DenseGraph:
    """Build a random graph with positive integer weights."""
    rng = np.random.default_rng(seed)
    graph = DenseGraph(n)
    for i in range(n):
        for j in range(n):
            if i != j and rng.random() < density:
                graph.set_edge(i, j, float(rng.integers(1, 100)))
    return graph


def _time(fn: Callable[[], object], repeats: int) -> float:
    fn()  # warmup
    start = time.perf_counter()
    for _ in range(repeats):
        fn()
    return (time.perf_counter() - start) / repeats


def benchmark_all_pairs(
    n: int = MAX_VERTICES,
    density: float = 0.5,
    repeats: int = 1000,
) -> Dict[str, float]:
    """Time both all-pairs strategies on one random graph.

    Args:
        n: Number of vertices.
        density: Probability of each off-diagonal edge.
        repeats: Number of timed solves per strategy.

    Returns:
        Dictionary with timing results.
    """
    graph = random_dense_graph(n, density)

    fw_dist, _, _ = floyd_warshall(graph)
    dj_dist, _ = all_pairs_via_dijkstra(graph)
    np.testing.assert_allclose(fw_dist, dj_dist)

    fw = _time(lambda: floyd_warshall(graph), repeats)
    dj = _time(lambda: all_pairs_via_dijkstra(graph), repeats)

    return {
        "n": n,
        "density": density,
        "floyd_warshall_sec": fw,
        "dijkstra_all_pairs_sec": dj,
        "ratio": dj / fw,
    }


if __name__ == "__main__":
    print("Benchmarking all-pairs shortest paths...")

    for n in (4, 7, MAX_VERTICES):
        results = benchmark_all_pairs(n=n)
        print(f"All pairs ({n} vertices, density {results['density']}):")
        print(f"  Floyd-Warshall: {results['floyd_warshall_sec']*1e6:.1f} μs")
        print(f"  n x Dijkstra:   {results['dijkstra_all_pairs_sec']*1e6:.1f} μs")
