"""Shared typing aliases for ForwardKit."""

from __future__ import annotations

from typing import Callable, Sequence, TypeAlias

import numpy as np
from numpy.typing import NDArray

FloatArray: TypeAlias = NDArray[np.float64]

PointLike: TypeAlias = float | Sequence[float] | NDArray[np.floating]
ScalarFunction: TypeAlias = Callable[[FloatArray], float]
