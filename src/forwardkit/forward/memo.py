"""Memoized variant of the recursive forward-difference estimator.

The plain recursion recomputes the unperturbed sub-tree once per axis and
reaches the same shifted points along many paths. Here every
``(remaining order, point)`` pair is computed once and every point is
evaluated once, which brings the number of function calls down to
``C(order + dim, dim)``. The floating-point operations are the same as in
:func:`forwardkit.forward.core.recursive_forward_step`, so a deterministic
function gives the same result.

This is only used when explicitly requested.
"""

from __future__ import annotations

from functools import lru_cache

import numpy as np

from forwardkit.utils.caching import wrap_point_cache
from forwardkit.utils.types import PointLike, ScalarFunction
from forwardkit.utils.validate import validate_order, validate_point

__all__ = ["memoized_forward_step"]


def memoized_forward_step(
    function: ScalarFunction,
    x0: PointLike,
    order: int,
    stepsize: float,
    maxsize: int | None = None,
) -> float:
    """Returns the recursive forward-difference estimate, sharing sub-results.

    Args:
        function: Scalar-valued function of a 1D array of coordinates.
            Assumed deterministic.
        x0: The point at which to evaluate the derivative.
        order: The number of differencing passes.
        stepsize: The step size (h).
        maxsize: Size of the sub-result and function-value caches.
            ``None`` (default) keeps everything for the duration of the call.

    Returns:
        The estimated derivative as a float.
    """
    point = validate_point(x0)
    order = validate_order(order)
    h = np.float64(stepsize)
    cached_function = wrap_point_cache(function, maxsize=maxsize)

    @lru_cache(maxsize=maxsize)
    def step(k: int, key: tuple[float, ...]) -> float:
        if k == 0:
            return cached_function(key)
        base = np.asarray(key, dtype=float)
        total = 0.0
        for i in range(base.size):
            perturbed = base.copy()
            perturbed[i] += h
            upper = step(k - 1, tuple(perturbed.tolist()))
            lower = step(k - 1, key)
            total += np.float64(upper - lower) / h
        return total

    with np.errstate(divide="ignore", invalid="ignore"):
        return float(step(order, tuple(point.tolist())))
