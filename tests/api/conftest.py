"""API test fixtures — FastAPI app over httpx ASGITransport.

Invariants:
    - The app's db_manager points at the per-test SQLite file
    - Dependency overrides and app.state are reset after each test

Design Decisions:
    - ASGITransport does not run the lifespan, so the manager is set on app.state directly
"""

import pytest
from httpx import ASGITransport, AsyncClient

from customer_api.main import app


@pytest.fixture
async def client(db_manager):
    app.state.db_manager = db_manager
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
    app.dependency_overrides.clear()
    app.state.db_manager = None
