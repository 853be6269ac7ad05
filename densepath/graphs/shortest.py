"""
Shortest path algorithms: dense Dijkstra.

Dijkstra's algorithm for graphs without negative edges, using a linear scan
for minimum extraction instead of a priority queue. With at most
``MAX_VERTICES`` vertices the O(n^2) variant is simpler and as fast as a
heap; a binary heap would only pay off if the vertex bound were lifted.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 24.3 (Dijkstra).
"""

from typing import Tuple

import numpy as np

from .core import DenseGraph
from .numeric import INF, reachable_mask


def _dijkstra_rows(weights: np.ndarray, source: int) -> Tuple[np.ndarray, np.ndarray]:
    n = weights.shape[0]
    dist = np.full(n, INF, dtype=np.float64)
    prev = np.full(n, -1, dtype=np.int64)
    visited = np.zeros(n, dtype=bool)
    dist[source] = 0.0

    for _ in range(n):
        tentative = np.where(visited, INF, dist)
        v = int(np.argmin(tentative))
        if not reachable_mask(tentative[v]):
            break
        visited[v] = True

        edges = reachable_mask(weights[v])
        candidate = dist[v] + weights[v]
        improved = edges & (candidate < dist)
        dist[improved] = candidate[improved]
        prev[improved] = v

    return dist, prev


def dijkstra_from(graph: DenseGraph, source: int) -> Tuple[np.ndarray, np.ndarray]:
    """
    Dijkstra's algorithm for single-source shortest paths.

    The graph must not contain negative edges. This is not checked here:
    callers gate on ``graph.has_negative_edge`` first, otherwise the
    distances are silently wrong.

    Args:
        graph: Graph without negative edges. It is not modified.
        source: Source vertex (0-based).

    Returns:
        Tuple of:
        - dist: length-n float array of distances from source (sentinel when unreachable)
        - prev: length-n int array, previous vertex on the shortest path or ``-1``

    Raises:
        IndexError: If source is not a vertex of the graph.

    Complexity: O(n^2).

    Example:
        >>> g = DenseGraph.from_edges(3, [(0, 1, 1.0), (1, 2, 2.0), (0, 2, 5.0)])
        >>> dist, prev = dijkstra_from(g, 0)
        >>> float(dist[2]), int(prev[2])
        (3.0, 1)
    """
    if not 0 <= source < graph.n:
        raise IndexError(f"Source vertex {source} not in graph with {graph.n} vertices")
    return _dijkstra_rows(graph.weights, source)


def all_pairs_via_dijkstra(graph: DenseGraph) -> Tuple[np.ndarray, np.ndarray]:
    """
    Run :func:`dijkstra_from` once per source vertex.

    Same precondition as :func:`dijkstra_from`. The distance matrix has the
    shape :func:`floyd_warshall` produces, so both can be compared
    elementwise.

    Returns:
        Tuple of:
        - dist: ``(n, n)`` float array, row ``s`` holds distances from ``s``
        - prev: ``(n, n)`` int array, row ``s`` is the predecessor array of source ``s``

    Complexity: O(n^3).
    """
    weights = graph.weights
    n = weights.shape[0]
    dist = np.full((n, n), INF, dtype=np.float64)
    prev = np.full((n, n), -1, dtype=np.int64)
    for s in range(n):
        dist[s], prev[s] = _dijkstra_rows(weights, s)
    return dist, prev


__all__ = ["dijkstra_from", "all_pairs_via_dijkstra"]
