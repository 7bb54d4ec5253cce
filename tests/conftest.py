"""
Global test fixtures for UserPanel.

This module provides shared fixtures for all tests including:
- Test settings (fast bcrypt, known admin password)
- In-memory and file-backed user stores
- User data factories
- FastAPI test clients wired to a temporary user document
"""

import json
import os
import sys
from pathlib import Path
from typing import Generator

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

# Add backend to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "backend"))

# Must be set before userpanel settings are first read
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["ADMIN_PASSWORD"] = "test-admin-secret"
os.environ["LOG_LEVEL"] = "DEBUG"


# =============================================================================
# Settings Fixtures
# =============================================================================

@pytest.fixture(autouse=True)
def fresh_settings():
    """
    Clear cached settings and password context around every test.

    Tests that change environment variables get a consistent view.
    """
    from userpanel.config import get_settings
    from userpanel.core.security import get_password_context

    get_settings.cache_clear()
    get_password_context.cache_clear()
    yield
    get_settings.cache_clear()
    get_password_context.cache_clear()


@pytest.fixture
def admin_password() -> str:
    """The control-panel password configured for tests."""
    return os.environ["ADMIN_PASSWORD"]


# =============================================================================
# User Store Fixtures
# =============================================================================

@pytest.fixture
def memory_store():
    """A user store backed by an in-memory document."""
    from userpanel.database import MemoryBackend, UserStore
    return UserStore(MemoryBackend())


@pytest.fixture
def users_file(tmp_path) -> Path:
    """Path of a (not yet existing) user document."""
    return tmp_path / "users.json"


@pytest.fixture
def file_store(users_file):
    """A user store backed by a temporary JSON file."""
    from userpanel.database import JsonFileBackend, UserStore
    return UserStore(JsonFileBackend(users_file))


@pytest.fixture
def user_document(users_file):
    """
    Raw access to the temporary user document.

    Usage:
        user_document.write([{"username": "a", "password": "..."}])
        assert user_document.read() == [...]
    """
    class UserDocument:
        path = users_file

        def write(self, users: list[dict]) -> None:
            users_file.write_text(json.dumps(users, indent=2), encoding="utf-8")

        def read(self) -> list[dict]:
            return json.loads(users_file.read_text(encoding="utf-8"))

    return UserDocument()


# =============================================================================
# User Fixtures
# =============================================================================

@pytest.fixture
def test_user_data() -> dict:
    """Basic test user data for registration."""
    return {
        "username": "alice",
        "password": "pw1",
    }


@pytest.fixture
def make_user():
    """
    Factory building a stored user record with a real hash.

    Usage:
        record = make_user("alice", "pw1")
    """
    from userpanel.core.security import hash_password
    from userpanel.models.user import UserRecord

    def _make(username: str, password: str = "secret") -> "UserRecord":
        return UserRecord(username=username, password_hash=hash_password(password))

    return _make


# =============================================================================
# FastAPI Test Client Fixtures
# =============================================================================

@pytest.fixture
def app(file_store):
    """
    FastAPI app using the temporary file store.

    The global store handle is swapped for the test and dropped afterwards.
    """
    from userpanel.database.connections import reset_user_store
    from userpanel.main import app

    reset_user_store(file_store)
    yield app
    reset_user_store(None)


@pytest.fixture
def client(app) -> Generator:
    """
    Create a TestClient for the FastAPI app.

    Use this for synchronous endpoint testing.
    """
    with TestClient(app) as c:
        yield c


@pytest_asyncio.fixture
async def async_client(app):
    """
    Create an async test client.

    Use this for testing async endpoints.
    """
    from httpx import AsyncClient, ASGITransport

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test"
    ) as ac:
        yield ac


@pytest.fixture
def registered_user(client, test_user_data) -> dict:
    """Register the default test user through the API."""
    response = client.post("/register", json=test_user_data)
    assert response.status_code == 201
    return test_user_data
