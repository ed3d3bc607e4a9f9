"""Beer ORM model."""

from __future__ import annotations

import uuid
from datetime import datetime
from decimal import Decimal
from typing import Optional

from sqlalchemy import BigInteger, CheckConstraint, DateTime, Index, Integer, Numeric, Text
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.database import Base


class Beer(Base):
    """Stored beer row.

    version is 1 on insert and incremented by the repository on every update;
    it is not used as an optimistic lock.
    created_date / last_modified_date are naive UTC, written by the repository.
    beer_style is free text; the closed enumeration is enforced at the API edge.
    """

    __tablename__ = "beers"
    __table_args__ = (
        CheckConstraint(
            "created_date <= last_modified_date", name="ck_beers_modified_after_created"
        ),
        Index("ix_beers_created_date", "created_date"),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4
    )
    version: Mapped[int] = mapped_column(Integer, nullable=False)
    created_date: Mapped[datetime] = mapped_column(DateTime(timezone=False), nullable=False)
    last_modified_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=False), nullable=False
    )
    beer_name: Mapped[str] = mapped_column(Text, nullable=False)
    beer_style: Mapped[str] = mapped_column(Text, nullable=False)
    upc: Mapped[int] = mapped_column(BigInteger, nullable=False)
    price: Mapped[Decimal] = mapped_column(Numeric(15, 2), nullable=False)
    quantity_to_brew: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    quantity_on_hand: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    min_on_hand: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
