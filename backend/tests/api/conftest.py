"""API test fixtures — FastAPI test client over an in-memory database.

Invariants:
    - get_db dependency overridden to use the per-test in-memory session factory
    - app.state.db_manager points at the same engine (readiness probe)
    - spy repositories record every store call so tests can assert "no store access"

Design Decisions:
    - ASGITransport does not run the lifespan: state is wired here instead
"""

import pytest
from httpx import ASGITransport, AsyncClient

from secureboard.api.dependencies import get_comment_repository, get_user_repository
from secureboard.infrastructure.database import DatabaseSessionManager, get_db
from secureboard.main import app


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    app.state.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    app.state.db_manager = None


class SpyUserRepository:
    def __init__(self):
        self.calls: list[tuple] = []

    async def lookup_by_identifier(self, user_id):
        self.calls.append(("lookup_by_identifier", user_id))
        return {"id": user_id, "name": "Spy"}

    async def insert(self, name, password_hash):
        self.calls.append(("insert", name))
        return 1

    async def list_all(self):
        self.calls.append(("list_all",))
        return []


class SpyCommentRepository:
    def __init__(self):
        self.calls: list[tuple] = []

    async def insert(self, content):
        self.calls.append(("insert", content))
        return 1

    async def list_all(self):
        self.calls.append(("list_all",))
        return []


@pytest.fixture
def spy_users(client):
    spy = SpyUserRepository()
    app.dependency_overrides[get_user_repository] = lambda: spy
    return spy


@pytest.fixture
def spy_comments(client):
    spy = SpyCommentRepository()
    app.dependency_overrides[get_comment_repository] = lambda: spy
    return spy
