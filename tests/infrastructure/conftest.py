"""Infrastructure test fixtures — a DatabaseSessionManager over in-memory SQLite."""

import pytest

from farm.infrastructure.database import DatabaseSessionManager


@pytest.fixture
async def manager():
    mgr = DatabaseSessionManager("sqlite+aiosqlite:///:memory:")
    await mgr.create_schema()
    yield mgr
    await mgr.dispose()
