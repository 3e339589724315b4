"""Recursive forward-difference derivative estimation."""

from forwardkit.forward.core import forward_components, recursive_forward_step
from forwardkit.forward.memo import memoized_forward_step
from forwardkit.forward.recursive_forward import (
    MemoizedForwardDerivative,
    RecursiveForwardDerivative,
)

__all__ = [
    "recursive_forward_step",
    "forward_components",
    "memoized_forward_step",
    "RecursiveForwardDerivative",
    "MemoizedForwardDerivative",
]
