"""
Backend-specific test fixtures and configuration.

These fixtures extend the global fixtures with helpers for testing the
user store, the service layer and the routers.
"""

import sys
import threading
import time
from pathlib import Path

import pytest

# Add backend to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent / "backend"))


# =============================================================================
# Storage Fixtures
# =============================================================================

@pytest.fixture
def slow_memory_backend():
    """
    In-memory backend whose reads are slow.

    Widens the window between load and save so overlapping requests
    really do overlap.
    """
    from userpanel.database.storage import MemoryBackend

    class SlowMemoryBackend(MemoryBackend):
        def read(self):
            data = self.data
            time.sleep(0.05)
            return data

    return SlowMemoryBackend()


@pytest.fixture
def run_concurrently():
    """
    Run callables in parallel threads and re-raise the first error.

    Usage:
        run_concurrently(lambda: ..., lambda: ...)
    """
    def _run(*funcs):
        errors = []

        def _wrap(func):
            try:
                func()
            except Exception as e:  # surfaced below
                errors.append(e)

        threads = [threading.Thread(target=_wrap, args=(f,)) for f in funcs]
        for t in threads:
            t.start()
        for t in threads:
            t.join(timeout=10)
        if errors:
            raise errors[0]

    return _run


# =============================================================================
# Service Fixtures
# =============================================================================

@pytest.fixture
def user_service(memory_store):
    """UserService over an in-memory store."""
    from userpanel.services.user_service import UserService
    return UserService(memory_store)


# =============================================================================
# Response Assertion Helpers
# =============================================================================

@pytest.fixture
def assert_error_response():
    """Helper to assert error response structure."""
    def _assert(response, status_code: int, detail_contains: str = None):
        assert response.status_code == status_code
        data = response.json()
        assert "detail" in data
        if detail_contains:
            assert detail_contains.lower() in data["detail"].lower()
    return _assert
