"""Animal ORM — an item that must live in exactly one barn of its favorite color.

Invariants:
    - favorite_color is immutable after creation
    - barn_id is NULL only before the first placement and set exclusively by FarmService

Design Decisions:
    - Plain barn_id FK, no relationship(): async sessions cannot lazy-load,
      and balancing only needs the id
    - Ascending id is creation order, which fixes round-robin positions
"""

from datetime import datetime, timezone

from sqlalchemy import String, Integer, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column

from farm.db.base import Base


class Animal(Base):
    """Animal entity."""
    __tablename__ = "animals"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str | None] = mapped_column(String(100), nullable=True)
    favorite_color: Mapped[str] = mapped_column(
        String(20), nullable=False, index=True,
    )
    barn_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("barns.id"), nullable=True, index=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    def __repr__(self) -> str:
        return (
            f"Animal(id={self.id!r}, favorite_color={self.favorite_color!r}, "
            f"barn_id={self.barn_id!r})"
        )
