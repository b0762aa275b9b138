"""Root conftest — shared test configuration and database fixtures.

Invariants:
    - Every test gets a fresh SQLite file under tmp_path
    - Schema is created through DatabaseSessionManager.ensure_schema, as on startup
"""

import os

import pytest

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///test.db")
os.environ.setdefault("LOG_FORMAT", "text")

from customer_api.infrastructure.database import DatabaseSessionManager  # noqa: E402
from customer_api.services.customer_store import CustomerStore  # noqa: E402


@pytest.fixture
async def db_manager(tmp_path):
    manager = DatabaseSessionManager(
        f"sqlite+aiosqlite:///{tmp_path / 'customers.db'}",
    )
    await manager.ensure_schema()
    yield manager
    await manager.dispose()


@pytest.fixture
async def test_db(db_manager):
    async with db_manager.session() as session:
        yield session


@pytest.fixture
def store(test_db):
    return CustomerStore(test_db)
