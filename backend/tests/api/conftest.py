"""API test fixtures — FastAPI test client over the per-test SQLite database.

Invariants:
    - get_db dependency overridden to use the test session factory
    - db_manager patched so readiness probes see the test engine
    - login(name) returns the identity and ready-to-use auth headers

Design Decisions:
    - Requests go through the full app (guard, handlers, error envelope):
      route tests assert status codes and bodies only
"""

import pytest
from httpx import ASGITransport, AsyncClient

import wasaphoto.infrastructure.database as db_module
from wasaphoto.infrastructure.database import DatabaseSessionManager, get_db
from wasaphoto.main import app


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
def login(client):
    """Log a username in; returns (user_id, headers)."""
    async def _login(name: str) -> tuple[int, dict]:
        res = await client.post("/api/v1/session", json={"name": name})
        assert res.status_code == 201
        user_id = res.json()["identifier"]
        return user_id, {"Authorization": f"Bearer {user_id}"}
    return _login


@pytest.fixture
def upload(client):
    """Upload bytes as a user; returns the new photo id."""
    async def _upload(user_id: int, headers: dict, content: bytes = b"\x89PNG") -> int:
        res = await client.post(
            f"/api/v1/user/{user_id}/photos/", content=content, headers=headers,
        )
        assert res.status_code == 201
        return res.json()["photo_id"]
    return _upload
