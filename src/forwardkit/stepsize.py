"""Step-size sensitivity scans.

A forward difference trades truncation error (large ``h``) against
cancellation error (small ``h``). :func:`scan_stepsizes` evaluates the
same derivative for a list of step sizes so the trade-off can be
inspected. It does not pick a step size.

Examples:
--------
>>> import numpy as np
>>> from forwardkit.stepsize import scan_stepsizes
>>> hs, est, err = scan_stepsizes(
...     lambda x: x[0] ** 2, [2.0], order=1,
...     stepsizes=[1e-2, 1e-4], exact=4.0,
... )
>>> np.round(err, 6).tolist()
[0.01, 0.0001]
"""

from __future__ import annotations

from typing import Sequence

import numpy as np

from forwardkit.derivative_kit import DerivativeKit
from forwardkit.logger import forwardkit_logger
from forwardkit.utils.types import FloatArray, PointLike, ScalarFunction

__all__ = ["scan_stepsizes"]


def scan_stepsizes(
    function: ScalarFunction,
    x0: PointLike,
    order: int,
    stepsizes: Sequence[float],
    exact: float | None = None,
    method: str | None = None,
    **dk_kwargs,
) -> tuple[FloatArray, FloatArray, FloatArray | None]:
    """Estimates the same derivative once per step size.

    Args:
        function: Scalar-valued function of a 1D array of coordinates.
        x0: The point at which the derivative is evaluated.
        order: The number of differencing passes.
        stepsizes: Non-empty 1D sequence of step sizes, used in the given order.
        exact: Reference value of the derivative. If given, absolute
            errors are returned.
        method: Method name or alias passed to :class:`DerivativeKit`.
            Default is the kit default (``"recursive"``).
        **dk_kwargs: Additional keyword arguments passed to
            ``DerivativeKit.differentiate``.

    Returns:
        ``(stepsizes, estimates, errors)`` as float arrays. ``errors`` is
        ``None`` when ``exact`` is not given. Non-finite estimates are kept.

    Raises:
        ValueError: If ``stepsizes`` is empty or not 1D.
    """
    hs = np.asarray(stepsizes, dtype=float)
    if hs.ndim != 1 or hs.size == 0:
        raise ValueError("stepsizes must be a non-empty 1D sequence.")

    kit = DerivativeKit(function, x0)
    estimates = np.array(
        [
            kit.differentiate(method=method, order=order, stepsize=float(h), **dk_kwargs)
            for h in hs
        ],
        dtype=float,
    )

    n_bad = int(np.count_nonzero(~np.isfinite(estimates)))
    if n_bad:
        forwardkit_logger.warning(
            "scan_stepsizes: %d of %d step sizes gave non-finite estimates.",
            n_bad, hs.size,
        )

    if exact is None:
        return hs, estimates, None
    return hs, estimates, np.abs(estimates - float(exact))
