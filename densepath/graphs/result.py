"""
All-pairs solve results.

Wraps the raw solver outputs in a single result container with an explicit
status so that a negative cycle or a refused Dijkstra run is surfaced
distinctly from "unreachable". The container binds the path reconstructor
that matches the bookkeeping of the solver that produced it.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

import numpy as np

from ..errors import NegativeCycleError, NegativeEdgeError
from ..logging import get_logger
from .allpairs import floyd_warshall
from .core import DenseGraph
from .numeric import is_reachable
from .shortest import all_pairs_via_dijkstra
from .utils import reconstruct_from_pred_matrix, reconstruct_from_prev_array

logger = get_logger(__name__)


class Method(Enum):
    """All-pairs solving strategy."""

    FLOYD_WARSHALL = "floyd_warshall"
    DIJKSTRA = "dijkstra"


class Status(Enum):
    """Solve status."""

    OK = "ok"
    NEGATIVE_CYCLE = "negative_cycle"
    PRECONDITION_VIOLATED = "precondition_violated"


@dataclass(frozen=True, eq=False)
class AllPairsResult:
    """
    Result of one all-pairs solve.

    Attributes:
        method: Strategy that produced the result.
        status: Whether the tables may be consumed.
        dist: ``(n, n)`` distance matrix, sentinel-encoded when unreachable.
        pred: ``(n, n)`` predecessor bookkeeping. For Floyd-Warshall this is
            the predecessor matrix; for Dijkstra row ``s`` is the predecessor
            array of source ``s``.
    """

    method: Method
    status: Status
    dist: np.ndarray
    pred: np.ndarray

    @property
    def n(self) -> int:
        return int(self.dist.shape[0])

    @property
    def ok(self) -> bool:
        return self.status is Status.OK

    def raise_for_status(self) -> None:
        """
        Raise if the tables of this result must not be consumed.

        Raises:
            NegativeCycleError: Floyd-Warshall detected a negative cycle.
            NegativeEdgeError: Dijkstra was refused on a negative edge.
        """
        if self.status is Status.NEGATIVE_CYCLE:
            raise NegativeCycleError("Graph contains a negative cycle; no shortest paths exist")
        if self.status is Status.PRECONDITION_VIOLATED:
            raise NegativeEdgeError("Graph has a negative edge; Dijkstra is not applicable")

    def _check_pair(self, i: int, j: int) -> None:
        if not (0 <= i < self.n and 0 <= j < self.n):
            raise IndexError(f"Pair ({i}, {j}) outside result with {self.n} vertices")

    def distance(self, i: int, j: int) -> Optional[float]:
        """Shortest distance ``i -> j`` (0-based), or None when unreachable."""
        self.raise_for_status()
        self._check_pair(i, j)
        value = float(self.dist[i, j])
        return value if is_reachable(value) else None

    def path(self, i: int, j: int) -> List[int]:
        """Shortest path ``i -> j`` as 1-indexed vertices, ``[]`` if none."""
        self.raise_for_status()
        self._check_pair(i, j)
        if self.method is Method.FLOYD_WARSHALL:
            return reconstruct_from_pred_matrix(self.pred, i, j)
        return reconstruct_from_prev_array(self.pred[i], i, j)


def solve_all_pairs(graph: DenseGraph, method: Method = Method.FLOYD_WARSHALL) -> AllPairsResult:
    """
    Solve all pairs of ``graph`` with the requested strategy.

    Dijkstra is never started on a graph with a negative edge: the result is
    returned with ``Status.PRECONDITION_VIOLATED`` and empty tables instead.

    Args:
        graph: Graph to solve. It is not modified.
        method: Solving strategy.

    Returns:
        AllPairsResult describing the outcome.

    Example:
        >>> g = DenseGraph.from_edges(2, [(0, 1, 4.0)])
        >>> result = solve_all_pairs(g, Method.DIJKSTRA)
        >>> result.distance(0, 1), result.path(0, 1)
        (4.0, [1, 2])
    """
    if method is Method.FLOYD_WARSHALL:
        dist, pred, negative_cycle = floyd_warshall(graph)
        status = Status.NEGATIVE_CYCLE if negative_cycle else Status.OK
    elif graph.has_negative_edge:
        dist = np.zeros((0, 0), dtype=np.float64)
        pred = np.zeros((0, 0), dtype=np.int64)
        status = Status.PRECONDITION_VIOLATED
    else:
        dist, pred = all_pairs_via_dijkstra(graph)
        status = Status.OK

    logger.debug("solved %d vertices with %s: %s", graph.n, method.value, status.value)
    return AllPairsResult(method=method, status=status, dist=dist, pred=pred)


__all__ = ["Method", "Status", "AllPairsResult", "solve_all_pairs"]
