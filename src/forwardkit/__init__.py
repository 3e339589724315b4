"""Provides all forwardkit methods."""

from importlib.metadata import PackageNotFoundError, version

from forwardkit.derivative_kit import (
    DerivativeKit,
    available_methods,
    register_method,
)
from forwardkit.forward.core import forward_components, recursive_forward_step
from forwardkit.forward.memo import memoized_forward_step
from forwardkit.forward.recursive_forward import (
    MemoizedForwardDerivative,
    RecursiveForwardDerivative,
    set_evaluation_warning_threshold,
)
from forwardkit.stepsize import scan_stepsizes

try:
    __version__ = version("forwardkit")
except PackageNotFoundError:
    pass

DerivativeKit.__module__ = "forwardkit.derivative_kit"

__all__ = [
    "DerivativeKit",
    "MemoizedForwardDerivative",
    "RecursiveForwardDerivative",
    "available_methods",
    "forward_components",
    "memoized_forward_step",
    "recursive_forward_step",
    "register_method",
    "scan_stepsizes",
    "set_evaluation_warning_threshold",
]
