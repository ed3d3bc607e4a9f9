"""Data Transfer Objects: the wire-visible shape of a beer.

Field names are snake_case in Python and camelCase on the wire.
Timestamps are offset-aware; beerStyle is the closed BeerStyle enum.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Annotated
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer, field_validator
from pydantic.alias_generators import to_camel

from src.domain.models.enums import BeerStyle

# Exact Decimal in Python, a JSON number on the wire.  Fifteen significant
# digits always survive the float round trip; the column is Numeric(15, 2).
WirePrice = Annotated[
    Decimal,
    Field(gt=0, max_digits=15, decimal_places=2),
    PlainSerializer(float, return_type=float, when_used="json"),
]
# Bounds match the INTEGER and BIGINT columns.
INT32_MAX = 2**31 - 1
INT64_MAX = 2**63 - 1

Quantity = Annotated[int, Field(ge=0, le=INT32_MAX)]


class BeerDto(BaseModel):
    """A beer as sent and received over HTTP.

    id, version, createdDate and lastModifiedDate are read-only: they are
    filled in on responses and ignored on create and update.
    Unknown JSON keys are dropped.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: UUID | None = Field(default=None, description="Id of Beer")
    version: int | None = Field(default=None, description="Version number")
    created_date: datetime | None = Field(default=None, description="Date Created")
    last_modified_date: datetime | None = Field(default=None, description="Date Updated")
    beer_name: str = Field(min_length=1, description="Beer Name")
    beer_style: BeerStyle = Field(description="Beer Style")
    upc: int = Field(gt=0, le=INT64_MAX, description="UPC of Beer")
    price: WirePrice = Field(description="Price")
    quantity_on_hand: Quantity | None = Field(default=None, description="Quantity On Hand")
    quantity_to_brew: Quantity | None = Field(default=None, description="Quantity To Brew")
    min_on_hand: Quantity | None = Field(default=None, description="Minimum On Hand")

    @field_validator("beer_name")
    @classmethod
    def _beer_name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("beerName must not be blank")
        return value
