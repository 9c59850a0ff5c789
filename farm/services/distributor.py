"""Distributor — applies a round-robin plan to a partition and persists every animal.

Invariants:
    - Every animal is saved, even when its barn did not change
    - Store failures propagate unchanged; there is no partial-success bookkeeping
"""

import logging
from typing import Sequence

from farm.core.distribution import plan_distribution
from farm.core.repository_protocols import AnimalLike, BarnLike, PartitionStore

logger = logging.getLogger(__name__)


class Distributor:
    """Round-robin redistribution of a whole partition."""

    def __init__(self, store: PartitionStore):
        self.store = store

    async def distribute(
        self, animals: Sequence[AnimalLike], barns: Sequence[BarnLike],
    ) -> None:
        for animal, barn in plan_distribution(animals, barns):
            animal.barn_id = barn.id
            await self.store.save_animal(animal)
        logger.info(
            f"Distributed {len(animals)} animals across {len(barns)} barns",
            extra={"animal_count": len(animals), "barn_count": len(barns)},
        )
