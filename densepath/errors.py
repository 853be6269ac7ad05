"""Exception types raised across :mod:`densepath`."""

from __future__ import annotations


class DensePathError(Exception):
    """Base class for all package-specific errors."""


class InvalidWeightError(DensePathError, ValueError):
    """Raised for malformed, NaN, infinite or out-of-range edge weights."""


class SolveError(DensePathError, RuntimeError):
    """Raised when a solve result cannot be consumed."""


class NegativeCycleError(SolveError):
    """Floyd-Warshall found a cycle of negative total weight."""


class NegativeEdgeError(SolveError):
    """Dijkstra was refused because the graph has a negative edge."""


__all__ = [
    "DensePathError",
    "InvalidWeightError",
    "SolveError",
    "NegativeCycleError",
    "NegativeEdgeError",
]
