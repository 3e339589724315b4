"""Pytest configuration file with fixtures for thread usage and call counting."""

import os
from concurrent.futures import ThreadPoolExecutor, TimeoutError

import pytest

import forwardkit.utils.concurrency as conc

__all__ = ["extra_threads_ok", "counting_function"]


@pytest.fixture(autouse=True, scope="session")
def _limit_blas_threads():
    os.environ.setdefault("OMP_NUM_THREADS", "1")
    os.environ.setdefault("OPENBLAS_NUM_THREADS", "1")
    os.environ.setdefault("MKL_NUM_THREADS", "1")
    os.environ.setdefault("VECLIB_MAXIMUM_THREADS", "1")
    os.environ.setdefault("NUMEXPR_NUM_THREADS", "1")


@pytest.fixture(scope="session")
def threads_ok():
    """Return a callable that checks thread-spawning capability.

    The returned function has signature `check(n=2, timeout=1.0) -> bool` and
    returns True if at least `n` threads can be started and joined within `timeout`.
    """
    def _can_spawn(n: int = 2, timeout: float = 1.0) -> bool:
        try:
            with ThreadPoolExecutor(max_workers=n) as ex:
                futs = [ex.submit(lambda: None) for _ in range(n)]
                for f in futs:
                    f.result(timeout=timeout)
            return True
        except (RuntimeError, MemoryError, OSError, TimeoutError):
            return False
    return _can_spawn


@pytest.fixture(scope="session")
def extra_threads_ok(threads_ok):
    """Convenience: True iff we can start >= 2 threads (common case)."""
    return threads_ok(2)


@pytest.fixture(autouse=True)
def _serial_by_default(request, monkeypatch):
    """Force one branch worker unless the test is marked @pytest.mark.parallel."""
    if request.node.get_closest_marker("parallel"):
        return
    monkeypatch.setattr(conc, "_DEFAULT_BRANCH_WORKERS", 1, raising=True)


@pytest.fixture
def counting_function():
    """Return a factory wrapping a function so that its calls are recorded.

    ``wrap(f)`` returns ``(g, calls)`` where ``g`` forwards to ``f`` and
    ``calls`` is the list of points ``g`` was called with (as tuples).
    """
    def wrap(f):
        calls = []

        def g(x):
            calls.append(tuple(float(v) for v in x))
            return f(x)

        return g, calls
    return wrap
