"""Pytest configuration file with fixtures shared across the stepkit tests."""

from concurrent.futures import ThreadPoolExecutor, TimeoutError

import pytest

import stepkit.finite.difference as difference

__all__ = ["extra_threads_ok"]


@pytest.fixture(scope="session")
def extra_threads_ok():
    """True iff at least two threads can be started and joined within one second."""
    try:
        with ThreadPoolExecutor(max_workers=2) as ex:
            futs = [ex.submit(lambda: None) for _ in range(2)]
            for f in futs:
                f.result(timeout=1.0)
        return True
    except (RuntimeError, MemoryError, OSError, TimeoutError):
        return False


@pytest.fixture
def isolated_registry():
    """Restores the difference-method registry after a test registers a scheme."""
    saved = list(difference._METHOD_SPECS)
    yield
    difference._METHOD_SPECS[:] = saved
    difference._method_maps.cache_clear()
