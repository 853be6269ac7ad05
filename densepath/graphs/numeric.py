"""
Numeric conventions shared by the graph model and both solvers.

Absence of an edge is encoded by the finite sentinel ``INF``. Any value at or
above ``UNREACHABLE`` (half of the sentinel) is treated as "no path". Edge
weights are bounded by ``MAX_WEIGHT`` so that a simple path of at most
``MAX_VERTICES - 1`` edges always sums to a reachable value.
"""

from __future__ import annotations

import math
from numbers import Real

import numpy as np

from ..errors import InvalidWeightError

INF = 1e18
UNREACHABLE = INF / 2
MAX_VERTICES = 10
MAX_WEIGHT = UNREACHABLE / MAX_VERTICES


def is_reachable(value: float) -> bool:
    """Return True if ``value`` is a real distance rather than the sentinel."""
    return value < UNREACHABLE


def reachable_mask(values: np.ndarray) -> np.ndarray:
    """Elementwise :func:`is_reachable` for numpy arrays."""
    return values < UNREACHABLE


def validate_weight(weight: object) -> float:
    """
    Check that ``weight`` can be stored as a finite edge weight.

    Args:
        weight: Candidate weight.

    Returns:
        The weight as a Python float.

    Raises:
        InvalidWeightError: If the weight is not a real number, is NaN or
            infinite, or its magnitude reaches ``MAX_WEIGHT``.
    """
    if isinstance(weight, bool) or not isinstance(weight, Real):
        raise InvalidWeightError(f"Edge weight must be a real number, got {weight!r}")

    value = float(weight)
    if math.isnan(value) or math.isinf(value):
        raise InvalidWeightError(f"Edge weight must be finite, got {value!r}")
    if abs(value) >= MAX_WEIGHT:
        raise InvalidWeightError(
            f"Edge weight {value!r} is outside the supported range (|w| < {MAX_WEIGHT:g})"
        )
    return value


__all__ = [
    "INF",
    "UNREACHABLE",
    "MAX_VERTICES",
    "MAX_WEIGHT",
    "is_reachable",
    "reachable_mask",
    "validate_weight",
]
