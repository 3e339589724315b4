"""Recursive forward-difference derivative estimation with a single step size.

The estimate of order ``n`` at a point ``x`` is built from estimates of
order ``n - 1``::

    D_n(x) = sum_i (D_{n-1}(x + h e_i) - D_{n-1}(x)) / h,    D_0(x) = f(x)

Every level differences along every axis and the unperturbed sub-tree is
recomputed for each axis, so a call costs ``(2 * dim) ** n`` function
evaluations. For ``dim == 1`` this is the ordinary n-th forward difference;
for ``dim > 1`` it is the sum over all axes of the repeated differences,
not a mixed partial derivative.

No step-size control is applied. A zero step gives ``inf`` or ``nan``, a
step near the floating-point resolution of ``x`` gives cancellation noise,
and both are returned unchanged.
"""

from __future__ import annotations

from functools import partial

import numpy as np

from forwardkit.utils.concurrency import parallel_execute, resolve_branch_workers
from forwardkit.utils.types import FloatArray, PointLike, ScalarFunction
from forwardkit.utils.validate import (
    as_scalar_output,
    validate_order,
    validate_point,
)

__all__ = [
    "recursive_forward_step",
    "forward_components",
]


def recursive_forward_step(
    function: ScalarFunction,
    x0: PointLike,
    order: int,
    stepsize: float,
    n_workers: int = 1,
) -> float:
    """Returns one recursive forward-difference estimate at a given step size h.

    Args:
        function:
            Scalar-valued function of a 1D array of coordinates.
        x0:
            The point at which to evaluate the derivative. A scalar is
            treated as a one-dimensional point.
        order:
            The number of differencing passes. ``0`` returns ``function(x0)``.
        stepsize:
            The step size (h) added to one coordinate at a time. It is
            shared by all axes and all recursion levels.
        n_workers:
            Number of threads evaluating the top-level axis branches.
            Default is ``1`` (serial).

    Returns:
        The estimated derivative as a float.

    Raises:
        TypeError:
            If ``order`` is not an integer or ``function`` is not
            scalar-valued.
        ValueError:
            If ``order`` is negative or ``x0`` is not at most 1D.
    """
    point = validate_point(x0)
    order = validate_order(order)
    h = np.float64(stepsize)

    with np.errstate(divide="ignore", invalid="ignore"):
        if order == 0:
            return _recurse(function, point, 0, h)
        terms = _axis_terms(function, point, order, h, n_workers)
    return _left_sum(terms)


def forward_components(
    function: ScalarFunction,
    x0: PointLike,
    order: int,
    stepsize: float,
    n_workers: int = 1,
) -> FloatArray:
    """Returns the per-axis terms of the top level of the recursion.

    Entry ``i`` is ``(D_{n-1}(x0 + h e_i) - D_{n-1}(x0)) / h``. Summing the
    entries from first to last gives :func:`recursive_forward_step` exactly.
    For ``order == 1`` the entries are the forward-difference partial
    derivatives, i.e. a gradient estimate.

    Args:
        function: Scalar-valued function of a 1D array of coordinates.
        x0: The point at which to evaluate the derivative.
        order: The number of differencing passes.
        stepsize: The step size (h).
        n_workers: Number of threads evaluating the axis branches.

    Returns:
        A 1D array of length ``dim``. Empty when ``order == 0`` or ``dim == 0``.
    """
    point = validate_point(x0)
    order = validate_order(order)
    if order == 0:
        return np.empty(0, dtype=float)

    h = np.float64(stepsize)
    with np.errstate(divide="ignore", invalid="ignore"):
        terms = _axis_terms(function, point, order, h, n_workers)
    return np.asarray(terms, dtype=float)


def _recurse(
    function: ScalarFunction,
    point: FloatArray,
    order: int,
    h: np.float64,
) -> float:
    """Plain recursion, evaluated serially."""
    if order == 0:
        return as_scalar_output(function(point.copy()))

    total = 0.0
    for i in range(point.size):
        total += _axis_term(function, point, i, order, h)
    return total


def _axis_term(
    function: ScalarFunction,
    point: FloatArray,
    i: int,
    order: int,
    h: np.float64,
) -> float:
    """Forward difference of the next-lower-order estimate along axis ``i``."""
    perturbed = point.copy()
    perturbed[i] += h
    upper = _recurse(function, perturbed, order - 1, h)
    lower = _recurse(function, point, order - 1, h)
    return np.float64(upper - lower) / h


def _axis_terms(
    function: ScalarFunction,
    point: FloatArray,
    order: int,
    h: np.float64,
    n_workers: int,
) -> list[float]:
    """Evaluates every top-level axis term, in parallel when requested."""
    workers = resolve_branch_workers(n_workers, point.size)
    worker = partial(_axis_term, function, point, order=order, h=h)
    tasks = [(i,) for i in range(point.size)]
    return parallel_execute(worker, tasks, n_workers=workers)


def _left_sum(terms: list[float]) -> float:
    """Sums the axis terms from first to last."""
    total = 0.0
    for term in terms:
        total += term
    return float(total)
