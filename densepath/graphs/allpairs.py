"""
All-pairs shortest path algorithms: Floyd-Warshall.

Computes shortest distances between all ordered pairs of vertices of a
DenseGraph, tolerating negative edge weights and reporting negative cycles.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 25.2 (Floyd-Warshall).
"""

from typing import Tuple

import numpy as np

from ..logging import get_logger
from .core import DenseGraph
from .numeric import reachable_mask

logger = get_logger(__name__)


def floyd_warshall(graph: DenseGraph) -> Tuple[np.ndarray, np.ndarray, bool]:
    """
    Floyd-Warshall algorithm for all-pairs shortest paths.

    ``pred[i][j]`` holds the vertex immediately preceding ``j`` on the best
    known path from ``i``. When a path through ``k`` improves ``i -> j`` the
    predecessor is inherited from the ``k -> j`` sub-path, so walking
    ``pred[i]`` backward from ``j`` always reproduces the final path.
    Cells at or above the unreachability threshold are never relaxed
    through.

    Args:
        graph: Graph to solve. It is not modified.

    Returns:
        Tuple of:
        - dist: ``(n, n)`` float array of shortest distances (sentinel when unreachable)
        - pred: ``(n, n)`` int array of predecessors, ``-1`` when no path is known
        - negative_cycle: True if some ``dist[i][i] < 0``; the whole output
          must then be treated as invalid

    Complexity: O(n^3) where n is number of vertices.

    Example:
        >>> g = DenseGraph.from_edges(3, [(0, 1, 2.0), (1, 2, 3.0), (0, 2, 10.0)])
        >>> dist, pred, negative_cycle = floyd_warshall(g)
        >>> float(dist[0, 2])
        5.0
    """
    dist = np.array(graph.weights, dtype=np.float64)
    n = dist.shape[0]

    pred = np.where(reachable_mask(dist), np.arange(n)[:, None], -1).astype(np.int64)
    np.fill_diagonal(pred, np.arange(n))

    for k in range(n):
        # Row k only changes while i == k, and then only through a negative
        # dist[k][k]. Candidates are taken from the row before it is written.
        through_k = reachable_mask(dist[k])
        for i in range(n):
            d_ik = dist[i, k]
            if not reachable_mask(d_ik):
                continue
            candidate = d_ik + dist[k]
            improved = through_k & (candidate < dist[i])
            dist[i, improved] = candidate[improved]
            pred[i, improved] = pred[k, improved]

    negative_cycle = bool(np.any(np.diag(dist) < 0))
    if negative_cycle:
        logger.warning("negative cycle detected on %d-vertex graph", n)

    return dist, pred, negative_cycle


__all__ = ["floyd_warshall"]
