"""Validation utilities for ForwardKit."""

from __future__ import annotations

from typing import Any

import numpy as np

from forwardkit.utils.types import FloatArray, PointLike

__all__ = [
    "validate_order",
    "validate_point",
    "as_scalar_output",
]


def validate_order(order: Any) -> int:
    """Checks that ``order`` is a non-negative integer.

    Args:
        order: Requested derivative order.

    Returns:
        The order as a Python ``int``.

    Raises:
        TypeError: If ``order`` is not an integer (booleans are rejected too).
        ValueError: If ``order`` is negative.
    """
    if isinstance(order, (bool, np.bool_)) or not isinstance(order, (int, np.integer)):
        raise TypeError(
            f"order must be an integer; got {type(order).__name__}."
        )
    if order < 0:
        raise ValueError(f"order must be non-negative; got {order}.")
    return int(order)


def validate_point(x0: PointLike) -> FloatArray:
    """Converts an evaluation point into a fresh 1D float array.

    A bare scalar is treated as a one-dimensional point. An empty
    sequence is accepted and gives a zero-dimensional problem.

    Args:
        x0: Scalar or 1D sequence of coordinates.

    Returns:
        A new 1D ``float64`` array. The input is never aliased.

    Raises:
        ValueError: If ``x0`` has more than one dimension.
    """
    point = np.array(x0, dtype=float, copy=True)
    if point.ndim == 0:
        return point.reshape(1)
    if point.ndim != 1:
        raise ValueError(f"x0 must be a scalar or 1D; got shape {point.shape}.")
    return point


def as_scalar_output(value: Any) -> float:
    """Returns a function value as a Python float.

    Args:
        value: Raw output of the function under test.

    Returns:
        The value as ``float``.

    Raises:
        TypeError: If the function returned more than one value.
    """
    arr = np.asarray(value, dtype=float)
    if arr.size != 1:
        raise TypeError(
            "the function must be scalar-valued; "
            f"got output of shape {arr.shape}."
        )
    return float(arr.reshape(()))
