"""Initial schema — barns and animals.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-18

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "barns",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("color", sa.String(20), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_barns_color", "barns", ["color"])

    op.create_table(
        "animals",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(100), nullable=True),
        sa.Column("favorite_color", sa.String(20), nullable=False),
        sa.Column("barn_id", sa.Integer, sa.ForeignKey("barns.id"), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_animals_favorite_color", "animals", ["favorite_color"])
    op.create_index("ix_animals_barn_id", "animals", ["barn_id"])


def downgrade() -> None:
    op.drop_index("ix_animals_barn_id", table_name="animals")
    op.drop_index("ix_animals_favorite_color", table_name="animals")
    op.drop_table("animals")
    op.drop_index("ix_barns_color", table_name="barns")
    op.drop_table("barns")
