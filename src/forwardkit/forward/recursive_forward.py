"""Provides the RecursiveForwardDerivative class.

The user must specify the function to differentiate and the point at
which the derivative should be evaluated. The function receives the point
as a 1D NumPy array and must return a single number.

Examples:
--------
First derivative of a one-dimensional function:

>>> from forwardkit.forward.recursive_forward import RecursiveForwardDerivative
>>> f = lambda x: x[0] ** 2
>>> d = RecursiveForwardDerivative(function=f, x0=[2.0])
>>> round(d.differentiate(order=1, stepsize=1e-6), 4)
4.0

Per-axis terms of a two-dimensional function:

>>> g = lambda x: x[0] ** 2 + 3.0 * x[1]
>>> d = RecursiveForwardDerivative(function=g, x0=[1.0, 0.0])
>>> val, parts = d.differentiate(order=1, stepsize=1e-6, return_components=True)
>>> [round(p, 4) for p in parts]
[2.0, 3.0]
"""

from __future__ import annotations

import numpy as np

from forwardkit.forward.core import forward_components, recursive_forward_step
from forwardkit.forward.memo import memoized_forward_step
from forwardkit.logger import forwardkit_logger
from forwardkit.utils.numerics import count_function_evaluations
from forwardkit.utils.types import PointLike, ScalarFunction
from forwardkit.utils.validate import validate_order, validate_point

__all__ = [
    "RecursiveForwardDerivative",
    "MemoizedForwardDerivative",
    "set_evaluation_warning_threshold",
]

_EVALUATION_WARNING_THRESHOLD: int | None = 1_000_000


def set_evaluation_warning_threshold(n: int | None) -> None:
    """Sets the evaluation count above which a warning is logged.

    Args:
        n: Number of function evaluations, or ``None`` to never warn.
    """
    global _EVALUATION_WARNING_THRESHOLD
    _EVALUATION_WARNING_THRESHOLD = None if n is None else int(n)


class RecursiveForwardDerivative:
    """Computes numerical derivatives by recursive forward differencing.

    Each differencing pass sums the forward differences along all axes of
    the evaluation point, and each pass is applied to the result of the
    previous one. For a one-dimensional point this is the n-th forward
    difference. The cost is ``(2 * dim) ** order`` function evaluations,
    or ``C(order + dim, dim)`` with ``memoize=True``.

    Attributes:
        function: The function to differentiate. Must accept a 1D array
            and return a single number.
        x0: The point at which the derivative is evaluated.
    """

    default_memoize = False

    def __init__(
        self,
        function: ScalarFunction,
        x0: PointLike,
    ) -> None:
        """Initialises the class based on function and evaluation point.

        Arguments:
            function: The function to differentiate. Must accept a 1D array
                and return a single number.
            x0: The point at which the derivative is evaluated. A scalar
                is treated as a one-dimensional point.
        """
        self.function = function
        self.x0 = x0

    def differentiate(
        self,
        order: int = 1,
        stepsize: float = 1e-6,
        n_workers: int = 1,
        memoize: bool | None = None,
        return_components: bool = False,
    ) -> float | tuple[float, np.ndarray]:
        """Computes the derivative with the recursive forward-difference scheme.

        Args:
            order: The number of differencing passes. ``0`` returns the
                function value. Default is 1.
            stepsize: Step size (h) added to one coordinate at a time.
                It is not validated: ``0`` gives ``inf``/``nan`` and very
                small values give cancellation noise. Default is 1e-6.
            n_workers: Number of threads evaluating the top-level axis
                branches. Default is 1 (serial). Ignored when memoizing.
            memoize: Share repeated sub-results between branches. ``None``
                uses the class default (False for this class).
            return_components: If True, also return the per-axis terms of
                the top level of the recursion.

        Returns:
            The estimated derivative, or ``(value, components)`` when
            ``return_components`` is True.

        Raises:
            TypeError: If ``order`` is not an integer or the function is
                not scalar-valued.
            ValueError: If ``order`` is negative, ``x0`` is not at most 1D,
                or ``return_components`` is combined with memoization.
        """
        order = validate_order(order)
        point = validate_point(self.x0)
        memoize = self.default_memoize if memoize is None else bool(memoize)

        if memoize and return_components:
            raise ValueError("return_components is not available with memoize=True.")

        self._log_plan(order, point.size, stepsize, memoize)

        if memoize:
            return memoized_forward_step(self.function, point, order, stepsize)

        if not return_components:
            return recursive_forward_step(
                self.function, point, order, stepsize, n_workers=n_workers
            )

        components = forward_components(
            self.function, point, order, stepsize, n_workers=n_workers
        )
        if order == 0:
            value = recursive_forward_step(self.function, point, 0, stepsize)
        else:
            value = 0.0
            for term in components:
                value += term
            value = float(value)
        return value, components

    @staticmethod
    def _log_plan(order: int, dim: int, stepsize: float, memoize: bool) -> None:
        """Logs the evaluation budget and degenerate step sizes."""
        n_evals = count_function_evaluations(order, dim, memoize=memoize)
        forwardkit_logger.info(
            "recursive forward difference: order=%d, dim=%d, h=%g, "
            "%d function evaluations%s.",
            order, dim, stepsize, n_evals, " (memoized)" if memoize else "",
        )
        threshold = _EVALUATION_WARNING_THRESHOLD
        if threshold is not None and n_evals > threshold:
            forwardkit_logger.warning(
                "order=%d in %d dimensions needs %d function evaluations; "
                "consider memoize=True or a lower order.",
                order, dim, n_evals,
            )
        if order > 0 and dim > 0 and stepsize == 0:
            forwardkit_logger.warning(
                "stepsize is zero; the derivative will be inf or nan.",
            )


class MemoizedForwardDerivative(RecursiveForwardDerivative):
    """Recursive forward differencing with memoization on by default.

    Gives the same numbers as :class:`RecursiveForwardDerivative` for a
    deterministic function while evaluating each grid point only once.
    """

    default_memoize = True
