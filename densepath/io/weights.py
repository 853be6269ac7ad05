"""Text conventions for edge weights, distances and paths.

This module parses weight cells typed by a user into values the graph model
accepts, and formats weights, distances and paths back into text. An empty
cell, ``∞``, ``inf`` or ``infinity`` means "no edge".
"""

from __future__ import annotations

import math
from typing import Iterable

import numpy as np

from ..errors import InvalidWeightError
from ..graphs.numeric import INF, is_reachable, validate_weight

NO_EDGE_TOKENS = frozenset({"", "∞", "inf", "infinity"})
UNREACHABLE_TEXT = "∞"
ARROW = " → "


def parse_weight(text: str) -> float:
    """
    Parse a weight cell.

    Parameters
    ----------
    text : str
        Cell contents, e.g. ``"3.5"``, ``"-2"``, ``"2,5"`` or ``""``.

    Returns
    -------
    float
        The weight, or ``INF`` when the cell means "no edge".

    Raises
    ------
    InvalidWeightError
        If the text is not a number, or is NaN, infinite or out of range.
    """
    s = text.strip()
    if s.lower() in NO_EDGE_TOKENS:
        return INF

    try:
        value = float(s.replace(",", "."))
    except ValueError:
        raise InvalidWeightError(f"Invalid weight: {text!r}") from None

    if math.isnan(value) or math.isinf(value):
        raise InvalidWeightError(f"Invalid weight: {text!r}")
    return validate_weight(value)


def format_number(value: float) -> str:
    """
    Shortest round-trip text for ``value`` in ``%g`` layout.

    Decimal exponents below -4 or at least 6 use scientific notation with a
    signed two-digit exponent (``1e+06``); other values are positional with
    no trailing zeros (``2.5``, ``123456``).
    """
    value = float(value)
    scientific = np.format_float_scientific(value, unique=True, trim="-", exp_digits=2)
    exponent = int(scientific.rsplit("e", 1)[1])
    if exponent < -4 or exponent >= 6:
        return scientific
    return np.format_float_positional(value, unique=True, trim="-")


def format_weight_cell(value: float, i: int, j: int) -> str:
    """
    Format a matrix cell for editing.

    The diagonal is always ``"0"`` and a missing edge is an empty cell.
    """
    if i == j:
        return "0"
    if not is_reachable(value):
        return ""
    return format_number(value)


def format_distance(value: float, unreachable: str = UNREACHABLE_TEXT) -> str:
    """Format a distance, using ``unreachable`` for the sentinel."""
    if not is_reachable(value):
        return unreachable
    return format_number(value)


def format_path(path: Iterable[int], separator: str = ARROW) -> str:
    """Join 1-indexed path vertices, e.g. ``"1 → 2 → 3"``."""
    return separator.join(str(v) for v in path)


__all__ = [
    "NO_EDGE_TOKENS",
    "UNREACHABLE_TEXT",
    "ARROW",
    "parse_weight",
    "format_number",
    "format_weight_cell",
    "format_distance",
    "format_path",
]
