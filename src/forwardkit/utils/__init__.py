"""Utility functions for ForwardKit package."""

from .numerics import (
    count_function_evaluations,
    relative_error,
)

__all__ = [
    "count_function_evaluations",
    "relative_error",
]
