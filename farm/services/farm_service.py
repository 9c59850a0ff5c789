"""Farm Service — add_to_farm / remove_from_farm keeping every color's barns balanced.

Invariants (after every completed call, per color):
    - Every animal lives in a barn of its own color
    - barn count == ceil(animals / capacity), and 0 barns for 0 animals
    - max(load) - min(load) <= 1
    - No empty barn outlives the call that emptied it

Design Decisions:
    - Partition state is always re-read from the store, never cached
    - Growth uses the general floor-division check (core/balancer.py)
    - Shrink always retires the most recently created barn (creation-descending read)
    - Batch forms run strictly in sequence; each element sees the previous one's effect
    - Callers must serialize writers per color (one writer per color, or a store
      that detects conflicting transactions); colors are independent of each other
"""

import logging
from typing import Iterable, Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from farm.config import Settings, get_settings
from farm.core.balancer import (
    compute_barn_loads, growth_needed, least_loaded_barn_id,
    most_loaded_barn_id, pick_animal_to_move, rebalance_needed, shrink_needed,
)
from farm.core.barn_factory import barn_label
from farm.core.capacity import CapacityPolicy
from farm.core.distribution import barn_index_for
from farm.core.domain_types import BarnId, Color, SortOrder
from farm.core.errors import (
    AnimalAlreadyPlacedError, AnimalNotFoundError, ErrorContext, InvariantViolationError,
)
from farm.core.partition_stats import compute_partition_stats, find_invariant_violations
from farm.core.repository_protocols import PartitionStore
from farm.infrastructure.partition_store import SqlAlchemyPartitionStore
from farm.models.animal import Animal
from farm.models.barn import Barn
from farm.services.distributor import Distributor

logger = logging.getLogger(__name__)


class FarmService:
    """Places and removes animals, creating and retiring barns as needed."""

    def __init__(self, store: PartitionStore, policy: CapacityPolicy | None = None):
        self.store = store
        self.policy = policy or CapacityPolicy()
        self.distributor = Distributor(store)

    # ─── Bulk maintenance ────────────────────────────────────────

    async def find_all(self) -> list[Animal]:
        return list(await self.store.find_all_animals())

    async def delete_all(self) -> None:
        """Remove every animal, then every barn (no balancing involved)."""
        await self.store.delete_all_animals()
        await self.store.delete_all_barns()
        logger.info("Deleted all animals and barns")

    # ─── Placement ───────────────────────────────────────────────

    async def add_to_farm(self, animal: Animal) -> Animal:
        """Place one animal in a barn of its favorite color."""
        if animal.id is not None and await self.store.exists_animal(animal.id):
            raise AnimalAlreadyPlacedError(animal.id)

        color = Color(animal.favorite_color)
        existing = await self.store.find_animals_by_color(color)
        barns = await self.store.find_barns_by_color(color, SortOrder.CREATION_ASC)

        if not barns:
            barn = await self._create_barn(color, 0)
            animal.barn_id = barn.id
            return await self.store.save_animal(animal)

        if growth_needed(len(existing), len(barns), self.policy.capacity()):
            barn = await self._create_barn(color, len(barns))
            barns.append(barn)
            await self.distributor.distribute(existing, barns)
            target = barns[barn_index_for(len(existing), len(barns))]
        else:
            loads = compute_barn_loads(existing, barns)
            target_id = least_loaded_barn_id(loads)
            target = next(b for b in barns if b.id == target_id)

        animal.barn_id = target.id
        return await self.store.save_animal(animal)

    async def add_all_to_farm(self, animals: Iterable[Animal]) -> list[Animal]:
        return [await self.add_to_farm(animal) for animal in animals]

    # ─── Removal ─────────────────────────────────────────────────

    async def remove_from_farm(self, animal: Animal) -> None:
        """Remove one animal, retiring or rebalancing barns of its color."""
        stored = None
        if animal.id is not None and await self.store.exists_animal(animal.id):
            stored = await self.store.get_animal(animal.id)
        if stored is None:
            err = AnimalNotFoundError(animal.id)
            logger.info(err.message, extra={"error_code": err.code, "animal_id": animal.id})
            return

        color = Color(stored.favorite_color)
        former_barn_id = stored.barn_id
        await self.store.delete_animal(stored)

        remaining = await self.store.find_animals_by_color(color)
        capacity = self.policy.capacity()

        if not remaining:
            await self._delete_former_barn(former_barn_id)
        elif shrink_needed(len(remaining), capacity):
            await self._retire_newest_barn(color, remaining)
        else:
            await self._rebalance_one(color, remaining)

    async def remove_all_from_farm(self, animals: Iterable[Animal]) -> None:
        for animal in animals:
            await self.remove_from_farm(animal)

    # ─── Diagnostics ─────────────────────────────────────────────

    async def partition_stats(self, color: Color) -> dict:
        """Counts, loads and any broken invariants for one color. Read-only."""
        animals = await self.store.find_animals_by_color(color)
        barns = await self.store.find_barns_by_color(color, SortOrder.CREATION_ASC)
        capacity = self.policy.capacity()
        stats = compute_partition_stats(animals, barns, capacity)
        stats["color"] = Color(color).value
        stats["capacity"] = capacity
        stats["violations"] = find_invariant_violations(animals, barns, capacity)
        return stats

    # ─── Internals ───────────────────────────────────────────────

    async def _create_barn(self, color: Color, number: int) -> Barn:
        barn = await self.store.save_barn(Barn(name=barn_label(color, number), color=color))
        logger.info(
            f"Created barn {barn.name}",
            extra={"color": color.value, "barn_id": barn.id, "barn_count": number + 1},
        )
        return barn

    async def _delete_former_barn(self, barn_id: BarnId | None) -> None:
        if barn_id is None:
            return
        barn = await self.store.get_barn(barn_id)
        if barn is not None:
            await self.store.delete_barn(barn)
            logger.info(f"Deleted emptied barn {barn.name}", extra={"barn_id": barn_id})

    async def _retire_newest_barn(self, color: Color, remaining: Sequence[Animal]) -> None:
        barns = await self.store.find_barns_by_color(color, SortOrder.CREATION_DESC)
        if len(barns) < 2:
            raise InvariantViolationError(
                f"Shrinking {color.value} needs at least two barns, found {len(barns)}",
                ErrorContext(
                    color=color.value,
                    debug_info={"animal_count": len(remaining), "barn_count": len(barns)},
                ),
            )
        newest, kept = barns[0], barns[1:]
        await self.distributor.distribute(remaining, kept)
        await self.store.delete_barn(newest)
        logger.info(
            f"Retired barn {newest.name}",
            extra={"color": color.value, "barn_id": newest.id, "barn_count": len(kept)},
        )

    async def _rebalance_one(self, color: Color, remaining: Sequence[Animal]) -> None:
        barns = await self.store.find_barns_by_color(color, SortOrder.CREATION_ASC)
        loads = compute_barn_loads(remaining, barns)
        emptiest = least_loaded_barn_id(loads)
        fullest = most_loaded_barn_id(loads)
        if not rebalance_needed(loads[emptiest], loads[fullest]):
            return
        mover = pick_animal_to_move(remaining, fullest)
        mover.barn_id = emptiest
        await self.store.save_animal(mover)
        logger.info(
            f"Moved animal {mover.id} to rebalance {color.value}",
            extra={"color": color.value, "animal_id": mover.id, "barn_id": emptiest},
        )


def create_farm_service(db: AsyncSession, settings: Settings | None = None) -> FarmService:
    """Wire a FarmService over a SQLAlchemy session with the configured capacity."""
    settings = settings or get_settings()
    return FarmService(
        SqlAlchemyPartitionStore(db),
        CapacityPolicy(settings.barn_capacity),
    )
