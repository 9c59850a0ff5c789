"""Barn ORM — a capacity-bounded container for animals of one favorite color.

Invariants:
    - color is fixed at creation and matches every animal housed here
    - Created and deleted only by FarmService, never by callers
    - Ascending id is creation order (retire-newest relies on it)

Design Decisions:
    - Integer autoincrement id over UUID: gives a store-native creation order
    - name is for humans only; loads are grouped by id
"""

from datetime import datetime, timezone

from sqlalchemy import String, Integer, DateTime
from sqlalchemy.orm import Mapped, mapped_column

from farm.db.base import Base


class Barn(Base):
    """Barn entity."""
    __tablename__ = "barns"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    color: Mapped[str] = mapped_column(String(20), nullable=False, index=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    def __repr__(self) -> str:
        return f"Barn(id={self.id!r}, name={self.name!r})"
