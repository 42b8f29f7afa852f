"""
COVID-19 India API — Test Configuration (conftest.py)
======================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy (all function-scoped):
    ├── mock_db_session: Mock database session (service unit tests)
    ├── store_path:      Path of a fresh SQLite store file
    ├── storage:         Storage handle on a seeded store
    └── test_client:     HTTPX AsyncClient wired to an app built on `storage`

Seed Data:
    state 1   Andaman and Nicobar Islands
    state 2   Andhra Pradesh
    state 21  Maharashtra    ← districts 1 (Mumbai) and 2 (Pune)
    state 36  Lakshadweep    ← no districts
    district 3 Anantapur belongs to state 2
"""

import os

# Override settings for testing BEFORE any app imports
os.environ["LOG_LEVEL"] = "WARNING"

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy import insert
from unittest.mock import AsyncMock, MagicMock

from covid19_api.database import Base, Storage
from covid19_api.models.district import District
from covid19_api.models.state import State


SEED_STATES = [
    {"state_id": 1, "state_name": "Andaman and Nicobar Islands", "population": 380581},
    {"state_id": 2, "state_name": "Andhra Pradesh", "population": 49577103},
    {"state_id": 21, "state_name": "Maharashtra", "population": 112374333},
    {"state_id": 36, "state_name": "Lakshadweep", "population": 64473},
]

SEED_DISTRICTS = [
    {"district_id": 1, "district_name": "Mumbai", "state_id": 21,
     "cases": 10, "cured": 5, "active": 3, "deaths": 2},
    {"district_id": 2, "district_name": "Pune", "state_id": 21,
     "cases": 20, "cured": 5, "active": 10, "deaths": 5},
    {"district_id": 3, "district_name": "Anantapur", "state_id": 2,
     "cases": 53, "cured": 45, "active": 6, "deaths": 2},
]


# ══════════════════════════════════════════════════════════════════════════
# Function-Scoped Fixtures (created fresh for each test)
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def mock_db_session():
    """
    Provides a mock async database session.

    Usage:
        async def test_get_state(mock_db_session):
            mock_db_session.execute.return_value.scalar_one_or_none.return_value = state
            result = await state_service.get_state(mock_db_session, 1)
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.flush = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    return session


@pytest.fixture
def store_path(tmp_path):
    """Location of the store file for one test (not created yet)."""
    return tmp_path / "covid19India.db"


@pytest_asyncio.fixture
async def storage(store_path):
    """
    Provides a Storage handle on a freshly built and seeded store.

    The schema comes from the ORM metadata; the running service never
    creates tables itself.
    """
    handle = Storage(f"sqlite+aiosqlite:///{store_path}")
    async with handle.engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
        await conn.execute(insert(State), SEED_STATES)
        await conn.execute(insert(District), SEED_DISTRICTS)
    yield handle
    await handle.dispose()


@pytest_asyncio.fixture
async def test_client(storage):
    """
    Provides an async HTTP test client for endpoint testing.

    ASGITransport does not run the lifespan, so the store is never "opened"
    here; sessions connect lazily through the storage handle.
    """
    from covid19_api.main import create_app
    app = create_app(storage)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
