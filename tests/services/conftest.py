"""Service test fixtures — fresh in-memory SQLite database per test.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - The store, the service and the assertions share one AsyncSession,
      matching the read-after-write visibility the service relies on
"""

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)

from farm.core.capacity import CapacityPolicy
from farm.db.base import Base
from farm.infrastructure.partition_store import SqlAlchemyPartitionStore
from farm.services.farm_service import FarmService
import farm.models  # noqa: F401


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
def store(test_db):
    return SqlAlchemyPartitionStore(test_db)


@pytest.fixture
def farm(store):
    """FarmService with the default capacity of 20."""
    return FarmService(store, CapacityPolicy(20))


@pytest.fixture
def small_farm(store):
    """FarmService with capacity 3, so boundaries are cheap to reach."""
    return FarmService(store, CapacityPolicy(3))
