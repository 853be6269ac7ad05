"""
Dense graph model.

Provides DenseGraph, a directed weighted graph over vertices ``0..n-1``
stored as an ``n x n`` numpy adjacency matrix. The matrix diagonal is always
zero and a missing edge is stored as the ``INF`` sentinel. The vertex count is
bounded by ``MAX_VERTICES``.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Tuple

import numpy as np

from ..logging import get_logger
from .numeric import INF, MAX_VERTICES, reachable_mask, validate_weight

logger = get_logger(__name__)


class DenseGraph:
    """
    Directed weighted graph backed by a bounded adjacency matrix.

    The graph is the only mutable state of the package. Solvers read it
    through :attr:`weights`, which returns a read-only copy, so a solve can
    never alter the graph or observe later mutations.

    Attributes:
        n: Number of vertices, always within ``[0, MAX_VERTICES]``.

    Complexity:
        - resize: O(n^2)
        - set_edge: O(n^2) (negative-edge flag is recomputed by rescan)
        - has_negative_edge: O(1)
    """

    def __init__(self, n: int = 0):
        """
        Initialize a graph with ``n`` vertices and no edges.

        Args:
            n: Initial vertex count, clamped into ``[0, MAX_VERTICES]``.
        """
        self._n = 0
        self._adj = np.zeros((0, 0), dtype=np.float64)
        self._negative_edge = False
        if n:
            self.resize(n)

    @classmethod
    def from_edges(
        cls, n: int, edges: Iterable[Tuple[int, int, Optional[float]]]
    ) -> "DenseGraph":
        """
        Build a graph with ``n`` vertices from ``(i, j, weight)`` triples.

        Indices are 0-based. Triples are applied in order with
        :meth:`set_edge`, so later triples overwrite earlier ones.

        Example:
            >>> g = DenseGraph.from_edges(3, [(0, 1, 2.0), (1, 2, 3.0)])
            >>> g.weight(0, 1)
            2.0
        """
        graph = cls(n)
        for i, j, weight in edges:
            graph.set_edge(i, j, weight)
        return graph

    @property
    def n(self) -> int:
        return self._n

    def __len__(self) -> int:
        return self._n

    @property
    def weights(self) -> np.ndarray:
        """Read-only snapshot of the adjacency matrix."""
        snapshot = self._adj.copy()
        snapshot.setflags(write=False)
        return snapshot

    @property
    def has_negative_edge(self) -> bool:
        """True iff some off-diagonal finite weight is strictly negative."""
        return self._negative_edge

    def resize(self, n: int) -> None:
        """
        Reshape the graph to ``n`` vertices.

        ``n`` is clamped into ``[0, MAX_VERTICES]`` without error. The
        overlapping top-left block of the previous matrix is preserved and
        newly exposed cells read as "no edge".

        Args:
            n: Requested vertex count.
        """
        n = max(0, min(int(n), MAX_VERTICES))

        adj = np.full((n, n), INF, dtype=np.float64)
        keep = min(n, self._n)
        adj[:keep, :keep] = self._adj[:keep, :keep]
        np.fill_diagonal(adj, 0.0)

        self._adj = adj
        self._n = n
        self._rescan_negative_edges()
        logger.debug("resized graph to %d vertices", n)

    def set_edge(self, i: int, j: int, weight: Optional[float]) -> None:
        """
        Set the weight of edge ``i -> j``.

        Out-of-range indices are ignored. A self-loop always stays at weight
        0 whatever value is passed.

        Args:
            i: Source vertex (0-based).
            j: Target vertex (0-based).
            weight: Finite weight, or ``None``/``INF`` for "no edge".

        Raises:
            InvalidWeightError: If ``weight`` is not a usable finite number.
        """
        if weight is None or weight == INF:
            value = INF
        else:
            value = validate_weight(weight)

        if not self._in_range(i, j):
            logger.debug("ignoring edge %r -> %r outside %d vertices", i, j, self._n)
            return
        if i == j:
            self._adj[i, j] = 0.0
            return

        self._adj[i, j] = value
        self._rescan_negative_edges()

    def remove_edge(self, i: int, j: int) -> None:
        """Remove edge ``i -> j`` if present."""
        self.set_edge(i, j, None)

    def clear(self) -> None:
        """Remove every edge, keeping the vertex count."""
        self._adj = np.full((self._n, self._n), INF, dtype=np.float64)
        np.fill_diagonal(self._adj, 0.0)
        self._negative_edge = False

    def weight(self, i: int, j: int) -> float:
        """
        Return the stored weight of ``i -> j`` (``INF`` when absent).

        Raises:
            IndexError: If ``i`` or ``j`` is not a vertex.
        """
        if not self._in_range(i, j):
            raise IndexError(f"Edge ({i}, {j}) outside graph with {self._n} vertices")
        return float(self._adj[i, j])

    def has_edge(self, i: int, j: int) -> bool:
        """Return True if ``i != j`` and an edge ``i -> j`` exists."""
        if not self._in_range(i, j) or i == j:
            return False
        return bool(reachable_mask(self._adj[i, j]))

    def edges(self) -> List[Tuple[int, int, float]]:
        """
        Return all existing edges as ``(i, j, weight)`` in row-major order.

        Self-loops are not reported.
        """
        mask = reachable_mask(self._adj)
        np.fill_diagonal(mask, False)
        return [(int(i), int(j), float(self._adj[i, j])) for i, j in zip(*np.nonzero(mask))]

    def _in_range(self, i: int, j: int) -> bool:
        return 0 <= i < self._n and 0 <= j < self._n

    def _rescan_negative_edges(self) -> None:
        off_diagonal = ~np.eye(self._n, dtype=bool)
        self._negative_edge = bool(np.any((self._adj < 0) & off_diagonal))

    def __repr__(self) -> str:
        return f"DenseGraph(n={self._n}, edges={len(self.edges())})"
