"""Partition Stats — pure summary and health check of one color's partition.

Invariants:
    - All inputs come from a single store read (no IO here)
    - find_invariant_violations returns [] for a healthy partition
    - Returns JSON-serializable values only

Design Decisions:
    - Violations are human-readable strings, not exceptions: stats are a
      read-only diagnostic and must never abort the caller
"""

import math
from typing import Sequence

from farm.core.balancer import compute_barn_loads
from farm.core.domain_types import Color
from farm.core.repository_protocols import AnimalLike, BarnLike


def expected_barn_count(animal_count: int, capacity: int) -> int:
    return math.ceil(animal_count / capacity) if animal_count > 0 else 0


def compute_partition_stats(
    animals: Sequence[AnimalLike], barns: Sequence[BarnLike], capacity: int,
) -> dict:
    """Summarize counts and loads for one partition. Pure, no IO."""
    loads = compute_barn_loads(animals, barns)
    labels = {b.id: b.name for b in barns}
    load_values = list(loads.values())
    min_load = min(load_values) if load_values else 0
    max_load = max(load_values) if load_values else 0
    return {
        "animal_count": len(animals),
        "barn_count": len(barns),
        "expected_barn_count": expected_barn_count(len(animals), capacity),
        "loads": {labels.get(bid, str(bid)): n for bid, n in loads.items()},
        "min_load": min_load,
        "max_load": max_load,
        "imbalance": max_load - min_load,
    }


def find_invariant_violations(
    animals: Sequence[AnimalLike], barns: Sequence[BarnLike], capacity: int,
) -> list[str]:
    """List every broken balancing invariant for one partition."""
    violations: list[str] = []
    barn_colors = {b.id: Color(b.color) for b in barns}

    for animal in animals:
        if animal.barn_id is None:
            violations.append(f"animal {animal.id} has no barn")
        elif animal.barn_id not in barn_colors:
            violations.append(
                f"animal {animal.id} is housed in barn {animal.barn_id} outside its partition",
            )
        elif barn_colors[animal.barn_id] != Color(animal.favorite_color):
            violations.append(
                f"animal {animal.id} ({animal.favorite_color}) is in a "
                f"{barn_colors[animal.barn_id].value} barn",
            )

    expected = expected_barn_count(len(animals), capacity)
    if len(barns) != expected:
        violations.append(
            f"{len(barns)} barns for {len(animals)} animals, expected {expected}",
        )

    loads = compute_barn_loads(animals, barns)
    for barn in barns:
        if loads[barn.id] == 0:
            violations.append(f"barn {barn.name} is empty")
    if loads and max(loads.values()) - min(loads.values()) > 1:
        violations.append(
            f"load imbalance {max(loads.values()) - min(loads.values())} exceeds 1",
        )
    return violations
