"""Farm Bootstrap — startup wiring of logging and the database from settings.

Invariants:
    - init_farm is the only place settings reach setup_logging and init_db
    - farm_unit_of_work commits only when the body finishes without raising;
      DatabaseSessionManager rolls back otherwise

Design Decisions:
    - Explicit init call instead of import-time side effects: the embedding
      application decides when logging and the engine come up
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from farm.config import Settings, get_settings
from farm.infrastructure.database import DatabaseSessionManager, get_db, init_db
from farm.infrastructure.observability import setup_logging
from farm.services.farm_service import FarmService, create_farm_service

logger = logging.getLogger(__name__)


def init_farm(settings: Settings | None = None) -> DatabaseSessionManager:
    """Configure logging and the process-wide database manager."""
    settings = settings or get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    logger.info(f"Farm initialized with barn capacity {settings.barn_capacity}")
    return manager


@asynccontextmanager
async def farm_unit_of_work(
    settings: Settings | None = None,
) -> AsyncGenerator[FarmService, None]:
    """FarmService over a fresh session, committed when the block succeeds."""
    async with get_db() as db:
        yield create_farm_service(db, settings)
        await db.commit()
