"""Tests for forwardkit.utils.sandbox."""

from __future__ import annotations

import numpy as np
import pytest

from forwardkit.forward.core import recursive_forward_step
from forwardkit.utils.sandbox import generate_test_function


@pytest.mark.parametrize("name", ["square", "cube", "sin", "exp"])
def test_generated_derivative_matches_recursion(name):
    """Tests that the analytic first-order value matches the estimator."""
    f, df = generate_test_function(name)
    x0 = np.array([0.3, -0.4, 0.8])
    est = recursive_forward_step(f, x0, 1, 1e-7)
    assert est == pytest.approx(df(x0), rel=1e-5, abs=1e-6)


def test_generated_functions_return_floats():
    """Tests that the generated functions are scalar-valued."""
    f, df = generate_test_function("sin")
    assert isinstance(f(np.array([0.1, 0.2])), float)
    assert isinstance(df(np.array([0.1, 0.2])), float)


def test_unknown_test_function_raises():
    """Tests that an unknown name raises ValueError."""
    with pytest.raises(ValueError):
        generate_test_function("tan")
