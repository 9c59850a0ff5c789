"""Capacity Policy — the fixed per-barn capacity C shared by every partition.

Invariants:
    - capacity() is a positive integer constant for the lifetime of the policy
    - No side effects, no failure modes after construction
"""

from dataclasses import dataclass

from farm.core.errors import InvariantViolationError

DEFAULT_BARN_CAPACITY = 20


@dataclass(frozen=True)
class CapacityPolicy:
    """Barn capacity value object."""
    barn_capacity: int = DEFAULT_BARN_CAPACITY

    def __post_init__(self):
        if self.barn_capacity <= 0:
            raise InvariantViolationError(
                f"Barn capacity must be positive, got {self.barn_capacity}",
            )

    def capacity(self) -> int:
        return self.barn_capacity
