"""Tests for forwardkit.forward.memo."""

from __future__ import annotations

import math

import numpy as np
import pytest

from forwardkit.forward.core import recursive_forward_step
from forwardkit.forward.memo import memoized_forward_step
from forwardkit.utils.numerics import count_function_evaluations


def mixed_3d(x):
    """A smooth nonlinear function in three dimensions."""
    return float(np.sin(x[0]) * np.exp(x[1]) + x[2] ** 3 + x[0] * x[2])


@pytest.mark.parametrize("order", [0, 1, 2, 3])
def test_memoized_matches_plain_recursion_exactly(order):
    """Tests that sharing sub-results does not change a single bit of the estimate."""
    x0 = [0.2, -0.1, 0.4]
    plain = recursive_forward_step(mixed_3d, x0, order, 1e-2)
    memo = memoized_forward_step(mixed_3d, x0, order, 1e-2)
    assert memo == plain


@pytest.mark.parametrize("dim, order", [(1, 1), (1, 3), (2, 1), (2, 2), (3, 2), (2, 4)])
def test_memoized_evaluates_each_grid_point_once(counting_function, dim, order):
    """Tests that the memoized recursion makes C(order + dim, dim) calls."""
    g, calls = counting_function(lambda x: float(np.sum(x ** 2)))
    memoized_forward_step(g, np.linspace(0.1, 0.9, dim), order, 1e-2)
    assert len(calls) == len(set(calls))
    assert len(calls) == count_function_evaluations(order, dim, memoize=True)


def test_memoized_two_dimensional_first_order_uses_three_points(counting_function):
    """Tests that the unperturbed point is shared between the two axes."""
    g, calls = counting_function(lambda x: x[0] * x[1])
    memoized_forward_step(g, [1.0, 2.0], 1, 0.5)
    assert sorted(calls) == [(1.0, 2.0), (1.0, 2.5), (1.5, 2.0)]


def test_memoized_empty_point():
    """Tests the dim=0 edge case for the memoized recursion."""
    assert memoized_forward_step(lambda x: 3.0, [], 2, 1e-3) == 0.0
    assert memoized_forward_step(lambda x: 3.0, [], 0, 1e-3) == 3.0


def test_memoized_zero_stepsize_gives_nan():
    """Tests that h=0 is not trapped by the memoized recursion either."""
    assert math.isnan(memoized_forward_step(lambda x: x[0] ** 2, [2.0], 1, 0.0))


def test_memoized_small_cache_gives_same_result():
    """Tests that a bounded cache only costs recomputation, not accuracy."""
    x0 = [0.2, -0.1, 0.4]
    unbounded = memoized_forward_step(mixed_3d, x0, 3, 1e-2)
    bounded = memoized_forward_step(mixed_3d, x0, 3, 1e-2, maxsize=2)
    assert bounded == unbounded


def test_memoized_rejects_non_scalar_output():
    """Tests that a vector-valued function is rejected."""
    with pytest.raises(TypeError):
        memoized_forward_step(lambda x: np.array([1.0, 2.0]), [1.0], 1, 1e-3)


def test_memoized_rejects_negative_order():
    """Tests that a negative order is rejected."""
    with pytest.raises(ValueError):
        memoized_forward_step(mixed_3d, [0.0, 0.0, 0.0], -2, 1e-3)
