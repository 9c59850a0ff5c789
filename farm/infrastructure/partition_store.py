"""SQLAlchemy Partition Store — PartitionStore implementation over an AsyncSession.

Invariants:
    - Every write flushes, so later reads through the same session see it
    - Animals are always returned in creation order (ascending id)
    - Barns come back in the requested creation order
    - Never commits: the caller owns the unit of work

Design Decisions:
    - Colors normalized to their string value before binding: the column is a
      plain String and drivers differ on str-Enum handling
"""

import logging
from typing import Sequence

from sqlalchemy import select, delete
from sqlalchemy.ext.asyncio import AsyncSession

from farm.core.domain_types import AnimalId, BarnId, Color, SortOrder
from farm.models.animal import Animal
from farm.models.barn import Barn

logger = logging.getLogger(__name__)


class SqlAlchemyPartitionStore:
    """Animal and barn persistence backed by SQLAlchemy."""

    def __init__(self, db: AsyncSession):
        self.db = db

    # ─── Animals ──────────────────────────────────────────────────

    async def find_animals_by_color(self, color: Color) -> list[Animal]:
        result = await self.db.execute(
            select(Animal)
            .where(Animal.favorite_color == Color(color).value)
            .order_by(Animal.id.asc())
        )
        return list(result.scalars().all())

    async def get_animal(self, animal_id: AnimalId) -> Animal | None:
        return await self.db.get(Animal, animal_id)

    async def exists_animal(self, animal_id: AnimalId) -> bool:
        result = await self.db.execute(
            select(Animal.id).where(Animal.id == animal_id),
        )
        return result.scalar_one_or_none() is not None

    async def save_animal(self, animal: Animal) -> Animal:
        """Insert or update; assigns the id on first save."""
        animal.favorite_color = Color(animal.favorite_color).value
        self.db.add(animal)
        await self.db.flush()
        return animal

    async def delete_animal(self, animal: Animal) -> None:
        await self.db.delete(animal)
        await self.db.flush()

    async def find_all_animals(self) -> Sequence[Animal]:
        result = await self.db.execute(select(Animal).order_by(Animal.id.asc()))
        return result.scalars().all()

    async def delete_all_animals(self) -> None:
        await self.db.flush()
        await self.db.execute(delete(Animal))

    # ─── Barns ────────────────────────────────────────────────────

    async def find_barns_by_color(
        self, color: Color, order: SortOrder = SortOrder.CREATION_ASC,
    ) -> list[Barn]:
        ordering = Barn.id.asc() if order == SortOrder.CREATION_ASC else Barn.id.desc()
        result = await self.db.execute(
            select(Barn)
            .where(Barn.color == Color(color).value)
            .order_by(ordering)
        )
        return list(result.scalars().all())

    async def get_barn(self, barn_id: BarnId) -> Barn | None:
        return await self.db.get(Barn, barn_id)

    async def save_barn(self, barn: Barn) -> Barn:
        barn.color = Color(barn.color).value
        self.db.add(barn)
        await self.db.flush()
        return barn

    async def delete_barn(self, barn: Barn) -> None:
        await self.db.delete(barn)
        await self.db.flush()

    async def delete_all_barns(self) -> None:
        await self.db.flush()
        await self.db.execute(delete(Barn))
