"""API test fixtures - FastAPI test client over a per-test store.

Invariants:
    - Every test gets a fresh, empty TodoStore
    - get_todo_store dependency overridden so the module-level store is never touched

Design Decisions:
    - httpx AsyncClient over ASGITransport: exercises the real middleware stack
      (CORS, exception handlers) without binding a socket
"""

import pytest
from httpx import ASGITransport, AsyncClient

from todo_api.api.routes.todos import get_todo_store
from todo_api.main import app


@pytest.fixture
async def client(store):
    """FastAPI test client with the store dependency overridden."""
    app.dependency_overrides[get_todo_store] = lambda: store

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
def seed_todo(store):
    """Insert one todo directly into the store."""
    return store.insert("seeded", False)[0]
