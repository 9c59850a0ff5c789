"""Balancer — pure decisions for barn growth, shrink and single-animal rebalance.

Invariants:
    - growth_needed is evaluated on the PRE-insertion animal count and the current barn count
    - shrink_needed is evaluated on the POST-removal animal count
    - Loads are keyed by barn id, never by label; empty barns report load 0
    - A single removal can unbalance loads by at most 2, so one move restores balance

Design Decisions:
    - General floor-division growth check instead of "count % capacity == 0":
      the modulo shortcut only agrees when barn count has tracked ceil(N / C)
      since the partition was created
    - Minimum/maximum selection takes the first match in barn order; any
      minimum keeps loads within 1, so ties are not broken further
"""

from typing import Sequence

from farm.core.domain_types import BarnId
from farm.core.repository_protocols import AnimalLike, BarnLike


def growth_needed(existing_count: int, barn_count: int, capacity: int) -> bool:
    """True when the barns on hand cannot take one more animal without a new barn."""
    return (existing_count // capacity) + 1 > barn_count


def shrink_needed(remaining_count: int, capacity: int) -> bool:
    """True when a removal crossed a capacity boundary and one barn must go."""
    return remaining_count > 0 and remaining_count % capacity == 0


def rebalance_needed(min_load: int, max_load: int) -> bool:
    return max_load - min_load > 1


def compute_barn_loads(
    animals: Sequence[AnimalLike], barns: Sequence[BarnLike],
) -> dict[BarnId, int]:
    """Count animals per barn id, in barn order.

    Every barn in `barns` appears, with 0 if it houses nothing. Animals
    housed in a barn outside `barns` are counted under that barn's id too,
    appended after the known barns.
    """
    loads: dict[BarnId, int] = {barn.id: 0 for barn in barns}
    for animal in animals:
        if animal.barn_id is None:
            continue
        loads[animal.barn_id] = loads.get(animal.barn_id, 0) + 1
    return loads


def least_loaded_barn_id(loads: dict[BarnId, int]) -> BarnId:
    return min(loads, key=loads.__getitem__)


def most_loaded_barn_id(loads: dict[BarnId, int]) -> BarnId:
    return max(loads, key=loads.__getitem__)


def pick_animal_to_move(
    animals: Sequence[AnimalLike], barn_id: BarnId,
) -> AnimalLike | None:
    """First animal, in the given order, currently housed in barn_id."""
    return next((a for a in animals if a.barn_id == barn_id), None)
