"""Beer entity <-> BeerDto mapping.

Fields copy across by name.  Two conversions are explicit:

  - timestamps: naive UTC on the entity, offset-aware on the DTO.  The
    instant is preserved in both directions.
  - beer_style: free text on the entity, BeerStyle on the DTO.  A stored
    value outside the enum raises UnmappableEnumError.
"""

from __future__ import annotations

from datetime import datetime, timezone

from src.domain.exceptions import UnmappableEnumError
from src.domain.models.beer import Beer
from src.domain.models.enums import BeerStyle

from .dto import BeerDto


def as_offset_datetime(value: datetime | None) -> datetime | None:
    """Attach UTC to a naive storage timestamp."""
    if value is None:
        return None
    return value.replace(tzinfo=timezone.utc)


def as_naive_utc(value: datetime | None) -> datetime | None:
    """Convert a wire timestamp to naive UTC; naive input is taken as UTC already."""
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


def as_beer_style(value: str) -> BeerStyle:
    try:
        return BeerStyle(value)
    except ValueError as exc:
        raise UnmappableEnumError(BeerStyle.__name__, value) from exc


class BeerMapper:
    """Stateless two-way transform between Beer and BeerDto."""

    @staticmethod
    def to_dto(entity: Beer) -> BeerDto:
        return BeerDto(
            id=entity.id,
            version=entity.version,
            created_date=as_offset_datetime(entity.created_date),
            last_modified_date=as_offset_datetime(entity.last_modified_date),
            beer_name=entity.beer_name,
            beer_style=as_beer_style(entity.beer_style),
            upc=entity.upc,
            price=entity.price,
            quantity_on_hand=entity.quantity_on_hand,
            quantity_to_brew=entity.quantity_to_brew,
            min_on_hand=entity.min_on_hand,
        )

    @staticmethod
    def to_entity(dto: BeerDto) -> Beer:
        return Beer(
            id=dto.id,
            version=dto.version,
            created_date=as_naive_utc(dto.created_date),
            last_modified_date=as_naive_utc(dto.last_modified_date),
            beer_name=dto.beer_name,
            beer_style=dto.beer_style.value,
            upc=dto.upc,
            price=dto.price,
            quantity_on_hand=dto.quantity_on_hand,
            quantity_to_brew=dto.quantity_to_brew,
            min_on_hand=dto.min_on_hand,
        )
