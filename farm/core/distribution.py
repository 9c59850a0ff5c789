"""Round-Robin Distribution — pure placement plan for a whole partition.

Invariants:
    - animals[i] goes to barns[i mod len(barns)], in the order given
    - Over K barns every load is floor(N / K) or ceil(N / K)
    - Same inputs always produce the same plan (redistribution is idempotent)
    - Empty barn list or mixed colors raise InvariantViolationError

Design Decisions:
    - The plan covers every animal, even those already in the right barn:
      correctness is positional, so no previous assignment is assumed to survive
"""

from typing import Sequence

from farm.core.domain_types import Color
from farm.core.errors import ErrorContext, InvariantViolationError
from farm.core.repository_protocols import AnimalLike, BarnLike


def barn_index_for(position: int, barn_count: int) -> int:
    if barn_count <= 0:
        raise InvariantViolationError(
            "Cannot compute a barn index without barns",
            ErrorContext(debug_info={"position": position, "barn_count": barn_count}),
        )
    return position % barn_count


def plan_distribution(
    animals: Sequence[AnimalLike], barns: Sequence[BarnLike],
) -> list[tuple[AnimalLike, BarnLike]]:
    """Pair each animal with its round-robin barn."""
    if not barns:
        raise InvariantViolationError(
            "Distribution requires at least one barn",
            ErrorContext(debug_info={"animal_count": len(animals)}),
        )
    _check_single_color(animals, barns)
    barn_count = len(barns)
    return [
        (animal, barns[barn_index_for(i, barn_count)])
        for i, animal in enumerate(animals)
    ]


def _check_single_color(
    animals: Sequence[AnimalLike], barns: Sequence[BarnLike],
) -> None:
    colors = {Color(b.color) for b in barns} | {Color(a.favorite_color) for a in animals}
    if len(colors) > 1:
        raise InvariantViolationError(
            "Animals and barns of a distribution must share one color",
            ErrorContext(debug_info={"colors": sorted(c.value for c in colors)}),
        )
