"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell; dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, the ORM models satisfy AnimalLike
      and BarnLike without inheriting from anything here
    - Async in PartitionStore: implementations do IO, but the core functions that
      consume AnimalLike/BarnLike are never async themselves
    - No Partition entity: a partition is always derived from the store by color
"""

from typing import Protocol, Sequence

from farm.core.domain_types import AnimalId, BarnId, Color, SortOrder


class AnimalLike(Protocol):
    """Structural contract for animals handed to balancing logic."""
    id: AnimalId | None
    favorite_color: str
    barn_id: BarnId | None


class BarnLike(Protocol):
    """Structural contract for barns handed to balancing logic."""
    id: BarnId | None
    name: str
    color: str


class PartitionStore(Protocol):
    """Contract for animal and barn persistence, implemented by shell.

    Reads must observe every write made earlier through the same store.
    """
    async def find_animals_by_color(self, color: Color) -> list: ...
    async def find_barns_by_color(
        self, color: Color, order: SortOrder = SortOrder.CREATION_ASC,
    ) -> list: ...
    async def get_animal(self, animal_id: AnimalId) -> AnimalLike | None: ...
    async def get_barn(self, barn_id: BarnId) -> BarnLike | None: ...
    async def exists_animal(self, animal_id: AnimalId) -> bool: ...
    async def save_animal(self, animal: AnimalLike) -> AnimalLike: ...
    async def save_barn(self, barn: BarnLike) -> BarnLike: ...
    async def delete_animal(self, animal: AnimalLike) -> None: ...
    async def delete_barn(self, barn: BarnLike) -> None: ...
    async def find_all_animals(self) -> Sequence: ...
    async def delete_all_animals(self) -> None: ...
    async def delete_all_barns(self) -> None: ...
