"""Concurrency management for the axis branches of a derivative recursion."""

from __future__ import annotations

import contextvars
import os
from concurrent.futures import ThreadPoolExecutor
from contextlib import contextmanager
from typing import Any, Callable, Iterator, Sequence, Tuple

__all__ = [
    "set_default_branch_workers",
    "set_branch_workers",
    "resolve_branch_workers",
    "parallel_execute",
    "normalize_workers",
]


_branch_workers_var: contextvars.ContextVar[int | None] = contextvars.ContextVar(
    "forwardkit_branch_workers", default=None
)
_DEFAULT_BRANCH_WORKERS: int | None = None


def set_default_branch_workers(n: int | None) -> None:
    """Sets the module-wide default for branch workers.

    Args:
        n: Number of branch workers, or None to fall back to the caller's
            ``n_workers`` argument.
    """
    global _DEFAULT_BRANCH_WORKERS
    _DEFAULT_BRANCH_WORKERS = None if n is None else normalize_workers(n)


@contextmanager
def set_branch_workers(n: int | None) -> Iterator[int | None]:
    """Temporarily sets the number of branch workers.

    Args:
        n: Number of branch workers, or ``None`` to clear the override.

    Yields:
        int | None: The previous setting (restored on exit).
    """
    prev = _branch_workers_var.get()
    token = _branch_workers_var.set(None if n is None else normalize_workers(n))
    try:
        yield prev
    finally:
        _branch_workers_var.reset(token)


def _int_env(name: str) -> int | None:
    """Reads a positive integer from an environment variable, or None if unset/invalid."""
    v = os.getenv(name)
    if not v:
        return None
    try:
        i = int(v)
        return i if i > 0 else None
    except ValueError:
        return None


def _detect_hw_threads() -> int:
    """Detects the number of hardware threads, capped by thread-count environment hints.

    Returns:
        Number of hardware threads (at least 1).
    """
    hints = [
        _int_env("OMP_NUM_THREADS"),
        _int_env("MKL_NUM_THREADS"),
        _int_env("OPENBLAS_NUM_THREADS"),
        _int_env("VECLIB_MAXIMUM_THREADS"),
        _int_env("NUMEXPR_NUM_THREADS"),
    ]
    env_cap = min([h for h in hints if h is not None], default=None)
    hw = os.cpu_count() or 1
    return max(1, min(hw, env_cap) if env_cap else hw)


def resolve_branch_workers(n_workers: Any, n_branches: int) -> int:
    """Decides how many threads evaluate the top-level axis branches.

    Precedence is: context override, module default, then ``n_workers``.
    ``n_workers="auto"`` uses the detected hardware threads. The result is
    capped by the number of branches and is at least 1.

    Args:
        n_workers: Requested number of workers (or ``"auto"``).
        n_branches: Number of independent branches, i.e. the dimension.

    Returns:
        Number of workers to use.
    """
    w = _branch_workers_var.get()
    if w is None:
        w = _DEFAULT_BRANCH_WORKERS
    if w is None:
        w = _detect_hw_threads() if n_workers == "auto" else normalize_workers(n_workers)
    if n_branches <= 1:
        return 1
    return max(1, min(w, n_branches))


def parallel_execute(
    worker: Callable[..., Any],
    arg_tuples: Sequence[Tuple[Any, ...]],
    *,
    n_workers: int = 1,
) -> list[Any]:
    """Runs ``worker(*args)`` for each tuple in arg_tuples, in order.

    Results are returned in the order of ``arg_tuples`` whatever the
    completion order. Each task runs in a copy of the caller's context, so
    context-local state (e.g. ``numpy.errstate``) is seen by the workers.
    Exceptions raised by a worker propagate to the caller.
    """
    if n_workers > 1:
        with ThreadPoolExecutor(max_workers=n_workers) as ex:
            futures = []
            for args in arg_tuples:
                ctx = contextvars.copy_context()
                futures.append(ex.submit(ctx.run, worker, *args))
            return [f.result() for f in futures]
    return [worker(*args) for args in arg_tuples]


def normalize_workers(
    n_workers: Any
) -> int:
    """Ensures n_workers is a positive integer, defaulting to 1.

    Args:
        n_workers: Input number of workers (can be None, float, negative, etc.)

    Returns:
        int: A positive integer number of workers (at least 1).
    """
    try:
        n = int(n_workers)
    except (TypeError, ValueError):
        n = 1
    return 1 if n < 1 else n
