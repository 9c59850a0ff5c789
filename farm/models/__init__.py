"""ORM Models — SQLAlchemy declarative models for animals and barns.

Invariants:
    - All models inherit from Base (db/base.py)
    - No Partition model: a partition is derived from rows sharing a color

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata is complete before create_all
      or an alembic autogenerate runs
"""

from farm.models.barn import Barn  # noqa: F401
from farm.models.animal import Animal  # noqa: F401
