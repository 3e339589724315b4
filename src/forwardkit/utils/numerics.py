"""Numerical utilities."""

from __future__ import annotations

from math import comb

import numpy as np

__all__ = [
    "count_function_evaluations",
    "relative_error",
]


def count_function_evaluations(order: int, dim: int, memoize: bool = False) -> int:
    """Counts the function evaluations of one recursive forward-difference call.

    Every level of the recursion visits each of the ``dim`` axes and
    recurses twice per axis, so the plain recursion costs
    ``(2 * dim) ** order`` evaluations. With memoization each distinct
    grid point ``x0 + h * k`` (``k`` non-negative integers summing to at
    most ``order``) is evaluated once, i.e. ``C(order + dim, dim)`` times.

    Args:
        order: Derivative order (non-negative integer).
        dim: Number of coordinates of the evaluation point.
        memoize: Whether the memoized recursion is used.

    Returns:
        Number of calls made to the function under test.
    """
    if order < 0 or dim < 0:
        raise ValueError("order and dim must be non-negative.")
    if dim == 0:
        # the axis loop never runs, only the bare order-0 call evaluates
        return 1 if order == 0 else 0
    if memoize:
        return comb(order + dim, dim)
    return (2 * dim) ** order


def relative_error(a: np.ndarray, b: np.ndarray) -> float:
    """Computes the relative error metric between a and b.

    This metric is defined as the maximum over all components of a and b of
    the absolute difference divided by the maximum of 1.0 and the absolute values of
    a and b.

    Args:
        a: First array-like input.
        b: Second array-like input.

    Returns:
        The relative error metric as a float.
    """
    a = np.asarray(a, dtype=float)
    b = np.asarray(b, dtype=float)
    denom = np.maximum(1.0, np.maximum(np.abs(a), np.abs(b)))
    return float(np.max(np.abs(a - b) / denom))
