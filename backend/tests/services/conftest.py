"""Service test fixtures: async DB + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use the test engine
    - db_manager patched so the readiness probe sees the test engine

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for route tests
    - get_db override goes through DatabaseSessionManager.session() so
      store errors are mapped exactly as in production
"""

from datetime import datetime, timezone

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncSession, async_sessionmaker, create_async_engine,
)

import resource_api.infrastructure.database as db_module
from resource_api.db.base import Base
from resource_api.infrastructure.database import DatabaseSessionManager, get_db
from resource_api.main import app
from resource_api.models.resource import Resource
from resource_api.services.resource_service import ResourceService


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
def service(test_db):
    return ResourceService(test_db)


@pytest.fixture
def fake_manager(test_engine, test_session_factory):
    manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    manager.engine = test_engine
    manager._session_factory = test_session_factory
    return manager


@pytest.fixture
async def client(fake_manager):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with fake_manager.session() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
async def seed_resources(test_db):
    """Insert resources named item-01..item-25, oldest first."""
    created = []
    for i in range(1, 26):
        resource = Resource(name=f"item-{i:02d}", description=f"#{i}")
        test_db.add(resource)
        await test_db.commit()
        await test_db.refresh(resource)
        created.append(resource)
    return created


@pytest.fixture
def later_clock(monkeypatch):
    """Pin the service clock to an instant after anything the tests insert."""
    instant = datetime(2100, 1, 1, tzinfo=timezone.utc)
    monkeypatch.setattr(
        "resource_api.services.resource_service.utcnow", lambda: instant,
    )
    return instant
