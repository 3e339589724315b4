"""Sandbox utilities for experimentation and testing."""

from __future__ import annotations

from collections.abc import Callable

import numpy as np

__all__ = [
    "generate_test_function",
]


def generate_test_function(name: str = "sin") -> tuple[Callable, Callable]:
    """Return ``(f, df)`` for a named separable test function.

    ``f`` takes a 1D array and sums a one-variable function over its
    coordinates. ``df`` is the exact first-order value of the recursive
    forward-difference scheme, i.e. the sum of the partial derivatives.

    Args:
        name: One of {"square", "cube", "sin", "exp"}.

    Returns:
        Tuple of callables (f, df) taking a 1D array.
    """
    if name == "square":
        return (lambda x: float(np.sum(np.asarray(x) ** 2)),
                lambda x: float(np.sum(2.0 * np.asarray(x))))
    if name == "cube":
        return (lambda x: float(np.sum(np.asarray(x) ** 3)),
                lambda x: float(np.sum(3.0 * np.asarray(x) ** 2)))
    if name == "sin":
        return (lambda x: float(np.sum(np.sin(x))),
                lambda x: float(np.sum(np.cos(x))))
    if name == "exp":
        return (lambda x: float(np.sum(np.exp(x))),
                lambda x: float(np.sum(np.exp(x))))
    raise ValueError(f"Unknown test function: {name!r}")
