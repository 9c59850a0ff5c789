"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - AnimalId and BarnId wrap store-assigned integers; ascending id is creation order
    - Partition keys are Color members; no raw string matching in domain logic

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: stored as plain strings and compare equal to their values
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

AnimalId = NewType("AnimalId", int)
BarnId = NewType("BarnId", int)


# ─── Enums ───────────────────────────────────────────────────────

class Color(str, Enum):
    """Favorite colors, the partition key segregating animals and barns."""
    RED = "RED"
    ORANGE = "ORANGE"
    YELLOW = "YELLOW"
    GREEN = "GREEN"
    BLUE = "BLUE"
    INDIGO = "INDIGO"
    VIOLET = "VIOLET"
    PINK = "PINK"
    BROWN = "BROWN"
    BLACK = "BLACK"
    WHITE = "WHITE"
    GRAY = "GRAY"


class SortOrder(str, Enum):
    """Barn orderings the store must support."""
    CREATION_ASC = "creation_asc"
    CREATION_DESC = "creation_desc"
