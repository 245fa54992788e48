"""API test fixtures: fresh in-memory store + FastAPI test client.

Invariants:
    - Every test gets a fresh, empty InMemoryOrderStore
    - get_order_repository dependency overridden to return that store

Design Decisions:
    - Override the dependency rather than the module singleton: routes are
      exercised exactly as they would be with a different backend
"""

import pytest
from httpx import ASGITransport, AsyncClient

from orderdesk.infrastructure.order_store import (
    InMemoryOrderStore, get_order_repository,
)
from orderdesk.main import app

VALID_ORDER = {"client": "Acme", "date": "2024-01-01", "total": 10.5}


@pytest.fixture
def store():
    return InMemoryOrderStore()


@pytest.fixture
async def client(store):
    """FastAPI test client with the order repository overridden."""
    app.dependency_overrides[get_order_repository] = lambda: store

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
async def created_order(client):
    """POST a valid order and return the response body."""
    res = await client.post("/orders", json=VALID_ORDER)
    assert res.status_code == 201
    return res.json()
