"""Unit tests for public API."""

from __future__ import annotations

import forwardkit
from forwardkit import (
    DerivativeKit,
    MemoizedForwardDerivative,
    RecursiveForwardDerivative,
    recursive_forward_step,
)


def test_public_names_importable_from_top_level():
    """Test that the public engines and kit can be imported from top level."""
    assert DerivativeKit is not None
    assert RecursiveForwardDerivative is not None
    assert MemoizedForwardDerivative is not None


def test_public_all_is_complete():
    """Test that every name in __all__ is an attribute of the package."""
    for name in forwardkit.__all__:
        assert hasattr(forwardkit, name), name


def test_kit_reports_its_module():
    """Test that DerivativeKit presents as coming from derivative_kit."""
    assert DerivativeKit.__module__ == "forwardkit.derivative_kit"


def test_top_level_estimate():
    """Test the functional entry point from the package root."""
    assert abs(recursive_forward_step(lambda x: x[0] ** 2, [1.0], 1, 1e-6) - 2.0) < 1e-3
