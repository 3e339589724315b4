"""Tests for forwardkit.utils.caching."""

from __future__ import annotations

import numpy as np
import pytest

from forwardkit.utils.caching import wrap_point_cache


def test_wrap_point_cache_has_cache_api():
    """Tests that the wrapper exposes the lru_cache attributes."""
    wrapped = wrap_point_cache(lambda x: x[0], maxsize=128)

    assert callable(wrapped.cache_info)
    assert callable(wrapped.cache_clear)
    assert wrapped.cache_info().maxsize == 128


def test_wrap_point_cache_caches_identical_points():
    """Tests that the function is called once per distinct point."""
    calls = {"n": 0}

    def f(x: np.ndarray) -> float:
        calls["n"] += 1
        return float(x[0] ** 2 + x[1])

    wrapped = wrap_point_cache(f)

    assert wrapped((2.0, 1.0)) == 5.0
    assert wrapped([2.0, 1.0]) == 5.0
    assert wrapped(np.array([2.0, 1.0])) == 5.0
    assert calls["n"] == 1

    assert wrapped((2.0, 1.5)) == 5.5
    assert calls["n"] == 2

    info = wrapped.cache_info()
    assert info.misses == 2
    assert info.hits == 2


def test_wrap_point_cache_compares_exactly():
    """Tests that nearby but different points do not share an entry."""
    calls = {"n": 0}

    def f(x: np.ndarray) -> float:
        calls["n"] += 1
        return float(x[0])

    wrapped = wrap_point_cache(f)
    wrapped((1.0,))
    wrapped((1.0 + 1e-15,))
    assert calls["n"] == 2


def test_wrap_point_cache_clear_resets_counts():
    """Tests that cache_clear empties the cache and resets statistics."""
    wrapped = wrap_point_cache(lambda x: float(x[0]), maxsize=4)
    wrapped((1.0,))
    wrapped.cache_clear()
    info = wrapped.cache_info()
    assert info.misses == 0
    assert info.hits == 0
    assert info.currsize == 0


def test_wrap_point_cache_passes_array_to_function():
    """Tests that the wrapped function receives a float array."""
    seen = {}

    def f(x):
        seen["x"] = x
        return 0.0

    wrap_point_cache(f)((1.0, 2.0))
    assert isinstance(seen["x"], np.ndarray)
    assert seen["x"].dtype == np.float64


def test_wrap_point_cache_rejects_vector_output():
    """Tests that non-scalar function values raise TypeError."""
    wrapped = wrap_point_cache(lambda x: np.array([1.0, 2.0]))
    with pytest.raises(TypeError):
        wrapped((0.0,))
