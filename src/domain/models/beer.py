"""Beer domain model.

This is a pure domain object with no ORM or persistence concerns.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, ConfigDict


class Beer(BaseModel):
    """The persisted representation of a beer.

    id, version, created_date and last_modified_date are owned by the store:
    they stay None on a beer that has never been saved and are assigned on
    insert.  version is bumped and last_modified_date refreshed on every
    update; id and created_date never change once assigned.

    Timestamps are naive UTC wall-clock values.
    beer_style is free text here; the wire layer narrows it to BeerStyle.
    """

    model_config = ConfigDict(frozen=True)

    id: UUID | None = None
    version: int | None = None
    created_date: datetime | None = None
    last_modified_date: datetime | None = None
    beer_name: str
    beer_style: str
    upc: int
    price: Decimal
    quantity_to_brew: int | None = None
    quantity_on_hand: int | None = None
    min_on_hand: int | None = None

    @property
    def is_new(self) -> bool:
        """True until the store has assigned an identity."""
        return self.id is None
