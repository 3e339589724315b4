"""Provides :func:`wrap_point_cache`."""
from __future__ import annotations

from collections.abc import Callable
from functools import lru_cache, wraps

import numpy as np

from forwardkit.utils.types import FloatArray
from forwardkit.utils.validate import as_scalar_output

__all__ = ["wrap_point_cache"]


def wrap_point_cache(
    function: Callable[[FloatArray], float],
    *,
    maxsize: int | None = None,
) -> Callable[[tuple[float, ...]], float]:
    """Caches the values of a scalar function keyed on the evaluation point.

    Unlike a value-rounding cache, points are compared exactly: two points
    share an entry only if every coordinate is the same float. The wrapper
    takes the point as a tuple and hands ``function`` a fresh array.

    Args:
        function: Scalar-valued function of a 1D array.
        maxsize: Size of the cache. ``None`` means unbounded.

    Returns:
        Caching wrapper with the ``cache_info`` and ``cache_clear``
        attributes of :func:`functools.lru_cache`.
    """
    @lru_cache(maxsize=maxsize)
    def cached_wrapper(point: tuple[float, ...]) -> float:
        return as_scalar_output(function(np.asarray(point, dtype=float)))

    @wraps(function)
    def wrapped(point: tuple[float, ...]) -> float:
        return cached_wrapper(tuple(point))

    wrapped.cache_info = cached_wrapper.cache_info
    wrapped.cache_clear = cached_wrapper.cache_clear

    return wrapped
