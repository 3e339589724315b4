"""Provides the DerivativeKit API.

This class is a lightweight front end over ForwardKit's derivative engines.
You provide the function to differentiate and the evaluation point `x0`,
then choose an engine by name (``"recursive"`` or ``"memoized"``).

Adding methods
--------------
New engines can be registered without modifying this class by calling
``register_method`` (see example below).

Examples:
    Basic usage:

        >>> from forwardkit.derivative_kit import DerivativeKit
        >>> dk = DerivativeKit(function=lambda x: x[0] ** 3, x0=[1.0])
        >>> round(dk.differentiate(order=2, stepsize=1e-3), 1)
        6.0

    Registering a new method:

        >>> from forwardkit.derivative_kit import register_method
        >>> from mypackage.engines import CentralDerivative  # doctest: +SKIP
        >>> register_method(
        ...     name="central",
        ...     cls=CentralDerivative,
        ...     aliases=("central-difference", "cd"),
        ... )  # doctest: +SKIP

Notes:
    - Method names are case/spacing/punctuation insensitive; aliases like
      ``"recursive-forward"`` or ``"memo"`` are supported when registered.
    - For available canonical method names at runtime, call
      ``available_methods()``.
"""

from __future__ import annotations

import re
from functools import lru_cache
from typing import Any, Callable, Iterable, Mapping, Protocol, Type

from forwardkit.forward.recursive_forward import (
    MemoizedForwardDerivative,
    RecursiveForwardDerivative,
)
from forwardkit.utils.types import PointLike


class DerivativeEngine(Protocol):
    """Protocol each derivative engine must satisfy.

    Any class registered as a derivative engine must be constructible with
    a target function `function` and an evaluation point `x0`, and must
    provide a `.differentiate(...)` method that performs the actual
    derivative computation. It carries no runtime behavior.
    """
    def __init__(self, function: Callable[..., Any], x0: PointLike):
        """Initialize the engine with a target function and evaluation point."""
        ...
    def differentiate(self, *args: Any, **kwargs: Any) -> Any:
        """Compute the derivative using the engine's algorithm."""
        ...


# Built-in methods.
_METHOD_SPECS: list[tuple[str, Type[DerivativeEngine], list[str]]] = [
    ("recursive", RecursiveForwardDerivative, ["recursive-forward", "forward", "rf"]),
    ("memoized", MemoizedForwardDerivative, ["memoized-recursive", "memo", "mf"]),
]


def _norm(s: str) -> str:
    """Normalize a method string for robust matching (case/spacing/punct insensitive).

    Args:
        s: Input string.

    Returns:
        Normalized string.
    """
    return re.sub(r"[^a-z0-9]+", "", s.lower())


@lru_cache(maxsize=1)
def _method_maps() -> tuple[Mapping[str, Type[DerivativeEngine]], tuple[str, ...]]:
    """Construct and cache lookup tables for derivative methods.

    Returns:
        A pair ``(method_map, canonical_names)`` where ``method_map`` maps
        normalized names and aliases to engine classes and
        ``canonical_names`` lists the sorted canonical method names.
    """
    method_map: dict[str, Type[DerivativeEngine]] = {}
    canonical: set[str] = set()
    for name, cls, aliases in _METHOD_SPECS:
        k = _norm(name)
        method_map[k] = cls
        canonical.add(k)
        for a in aliases:
            method_map[_norm(a)] = cls
    return method_map, tuple(sorted(canonical))


def register_method(
    name: str,
    cls: Type[DerivativeEngine],
    *,
    aliases: Iterable[str] = (),
) -> None:
    """Register a new derivative method.

    Adds a new derivative engine that can be referenced by name in
    :class:`DerivativeKit`. The lookup cache is cleared and rebuilt on the
    next lookup, so this is safe regardless of import order.

    Args:
        name: Canonical public name of the method (e.g., "central").
        cls: Engine class implementing the DerivativeEngine protocol.
        aliases: Additional accepted spellings (e.g., "central-difference").
    """
    _METHOD_SPECS.append((name, cls, list(aliases)))
    _method_maps.cache_clear()


def _resolve(method: str) -> Type[DerivativeEngine]:
    """Resolve a user-provided method name or alias to an engine class.

    Args:
        method: User-provided method name or alias.

    Returns:
        Corresponding derivative engine class.
    """
    method_map, canon = _method_maps()
    try:
        return method_map[_norm(method)]
    except KeyError:
        opts = ", ".join(canon)
        raise ValueError(f"Unknown derivative method '{method}'. Choose one of {{{opts}}}.") from None


class DerivativeKit:
    """Unified interface for computing numerical derivatives.

    You only need to supply a function and the point ``x0`` at which to
    compute the derivative. By default, the plain recursive method is used.

    Example:
        >>> from forwardkit.derivative_kit import DerivativeKit
        >>> d = DerivativeKit(lambda x: x[0] ** 2, x0=[2.0])
        >>> round(d.differentiate(order=1), 3)
        4.0

    Attributes:
        function: The callable to differentiate.
        x0: The point at which the derivative is evaluated.
        default_method: The engine used when no method is specified.
    """

    def __init__(self, function: Callable[..., Any], x0: PointLike):
        """Initializes the DerivativeKit with a target function and evaluation point.

        Args:
            function: The function to be differentiated. Must accept a 1D
                array of coordinates and return a single number.
            x0: Point at which to evaluate the derivative.
        """
        self.function = function
        self.x0 = x0
        self.default_method = "recursive"

    def differentiate(self,
                      *,
                      method: str | None = None,
                      **kwargs: Any) -> Any:
        """Compute derivatives using the chosen method.

        Forwards all keyword arguments to the engine's `.differentiate()`.

        Args:
            method: Method name or alias (e.g., "recursive", "memo").
                Default is "recursive".
            **kwargs: Passed through to the chosen engine.

        Returns:
            The derivative result from the underlying engine.

        Raises:
            ValueError: If `method` is not recognized.
        """
        chosen = method or self.default_method
        Engine = _resolve(chosen)
        return Engine(self.function, self.x0).differentiate(**kwargs)


def available_methods() -> list[str]:
    """List canonical method names exposed by this API.

    Returns:
        List of method names.
    """
    _, canon = _method_maps()
    return list(canon)
