"""Tests for the sentinel and weight validation conventions."""

import math

import numpy as np
import pytest

from densepath.errors import InvalidWeightError
from densepath.graphs import (
    INF,
    MAX_VERTICES,
    MAX_WEIGHT,
    UNREACHABLE,
    is_reachable,
    validate_weight,
)
from densepath.graphs.numeric import reachable_mask


def test_threshold_is_half_sentinel():
    assert UNREACHABLE == INF / 2


@pytest.mark.parametrize(
    "value, expected",
    [(0.0, True), (-5.0, True), (UNREACHABLE - 1e3, True), (UNREACHABLE, False), (INF, False)],
)
def test_is_reachable(value, expected):
    assert is_reachable(value) is expected


def test_reachable_mask():
    values = np.array([1.0, INF, UNREACHABLE, -2.0])
    np.testing.assert_array_equal(reachable_mask(values), [True, False, False, True])


@pytest.mark.parametrize(
    "weight", [0, 3, -2.5, np.float64(1.25), 1e12, MAX_WEIGHT - 1024.0, -(MAX_WEIGHT - 1024.0)]
)
def test_validate_weight_accepts(weight):
    assert validate_weight(weight) == float(weight)
    assert isinstance(validate_weight(weight), float)


@pytest.mark.parametrize(
    "weight",
    [math.nan, math.inf, -math.inf, None, "1", False, UNREACHABLE, MAX_WEIGHT, -MAX_WEIGHT, 3e17],
)
def test_validate_weight_rejects(weight):
    with pytest.raises(InvalidWeightError):
        validate_weight(weight)


def test_longest_simple_path_stays_reachable():
    largest = float(np.nextafter(MAX_WEIGHT, 0.0))
    assert validate_weight(largest) == largest
    assert is_reachable((MAX_VERTICES - 1) * largest)
    assert is_reachable(-(MAX_VERTICES - 1) * largest)
