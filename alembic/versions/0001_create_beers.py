"""Create the beers table.

Revision ID: 0001
Revises:
Create Date: 2026-10-19
"""

from __future__ import annotations

from typing import Sequence, Union

import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

from alembic import op

revision: str = "0001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "beers",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("version", sa.Integer, nullable=False),
        sa.Column("created_date", sa.DateTime(timezone=False), nullable=False),
        sa.Column("last_modified_date", sa.DateTime(timezone=False), nullable=False),
        sa.Column("beer_name", sa.Text, nullable=False),
        sa.Column("beer_style", sa.Text, nullable=False),
        sa.Column("upc", sa.BigInteger, nullable=False),
        sa.Column("price", sa.Numeric(15, 2), nullable=False),
        sa.Column("quantity_to_brew", sa.Integer, nullable=True),
        sa.Column("quantity_on_hand", sa.Integer, nullable=True),
        sa.Column("min_on_hand", sa.Integer, nullable=True),
        sa.CheckConstraint(
            "created_date <= last_modified_date", name="ck_beers_modified_after_created"
        ),
    )
    op.create_index("ix_beers_created_date", "beers", ["created_date"])


def downgrade() -> None:
    op.drop_index("ix_beers_created_date", table_name="beers")
    op.drop_table("beers")
