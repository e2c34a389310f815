"""API test fixtures - FastAPI test client over an isolated store.

Invariants:
    - Every test gets a freshly seeded in-memory store
    - get_store dependency overridden; the module singleton is never touched

Design Decisions:
    - httpx AsyncClient over ASGITransport: no server process, lifespan not run
"""

import pytest
from httpx import ASGITransport, AsyncClient

from app.infrastructure.memory_store import get_store
from app.main import app


@pytest.fixture
async def client(store):
    """FastAPI test client with the store dependency overridden."""
    app.dependency_overrides[get_store] = lambda: store

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
