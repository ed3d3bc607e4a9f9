"""Tests for src/application/mappers.py."""

from datetime import datetime, timedelta, timezone
from decimal import Decimal
from uuid import uuid4

import pytest

from src.application.dto import BeerDto
from src.application.mappers import BeerMapper, as_naive_utc, as_offset_datetime
from src.domain.exceptions import UnmappableEnumError
from src.domain.models.beer import Beer
from src.domain.models.enums import BeerStyle


def _stored_beer(**overrides):
    defaults = dict(
        id=uuid4(),
        version=4,
        created_date=datetime(2026, 3, 1, 12, 0, 0, 123456),
        last_modified_date=datetime(2026, 3, 2, 8, 30, 0),
        beer_name="Galaxy Cat",
        beer_style="PALE_ALE",
        upc=337010000001,
        price=Decimal("12.95"),
        quantity_to_brew=200,
        quantity_on_hand=35,
        min_on_hand=12,
    )
    defaults.update(overrides)
    return Beer(**defaults)


# --- timestamp helpers ---

def test_as_offset_datetime_attaches_utc():
    result = as_offset_datetime(datetime(2026, 3, 1, 12, 0))
    assert result.utcoffset() == timedelta(0)


def test_as_offset_datetime_passes_none():
    assert as_offset_datetime(None) is None


def test_as_naive_utc_converts_offset_to_utc():
    plus_two = timezone(timedelta(hours=2))
    assert as_naive_utc(datetime(2026, 3, 1, 14, 0, tzinfo=plus_two)) == datetime(2026, 3, 1, 12, 0)


def test_as_naive_utc_leaves_naive_values_alone():
    value = datetime(2026, 3, 1, 12, 0)
    assert as_naive_utc(value) == value


# --- to_dto ---

def test_to_dto_maps_style_to_enum():
    assert BeerMapper.to_dto(_stored_beer()).beer_style is BeerStyle.PALE_ALE


def test_to_dto_timestamps_are_offset_aware():
    dto = BeerMapper.to_dto(_stored_beer())
    assert dto.created_date.tzinfo is not None
    assert dto.last_modified_date.tzinfo is not None


def test_to_dto_preserves_instant():
    beer = _stored_beer()
    dto = BeerMapper.to_dto(beer)
    assert dto.created_date == beer.created_date.replace(tzinfo=timezone.utc)


def test_to_dto_copies_every_plain_field():
    beer = _stored_beer()
    dto = BeerMapper.to_dto(beer)
    assert (dto.id, dto.version, dto.beer_name, dto.upc, dto.price) == (
        beer.id, beer.version, beer.beer_name, beer.upc, beer.price,
    )
    assert (dto.quantity_on_hand, dto.quantity_to_brew, dto.min_on_hand) == (35, 200, 12)


def test_to_dto_unknown_style_raises_unmappable_enum():
    with pytest.raises(UnmappableEnumError):
        BeerMapper.to_dto(_stored_beer(beer_style="KOLSCH"))


def test_to_dto_style_is_case_sensitive():
    with pytest.raises(UnmappableEnumError):
        BeerMapper.to_dto(_stored_beer(beer_style="ale"))


def test_to_dto_of_unsaved_beer_leaves_store_fields_empty():
    dto = BeerMapper.to_dto(Beer(beer_name="X", beer_style="IPA", upc=1, price=Decimal("1.00")))
    assert dto.id is None
    assert dto.created_date is None


# --- to_entity ---

def test_to_entity_stores_style_as_text():
    dto = BeerDto(beer_name="Wit", beer_style=BeerStyle.WHEAT, upc=5, price=Decimal("3.10"))
    assert BeerMapper.to_entity(dto).beer_style == "WHEAT"


def test_to_entity_converts_wire_offset_to_naive_utc():
    minus_five = timezone(timedelta(hours=-5))
    dto = BeerDto(
        beer_name="Wit",
        beer_style=BeerStyle.WHEAT,
        upc=5,
        price=Decimal("3.10"),
        created_date=datetime(2026, 3, 1, 7, 0, tzinfo=minus_five),
    )
    assert BeerMapper.to_entity(dto).created_date == datetime(2026, 3, 1, 12, 0)


# --- round trip ---

@pytest.mark.parametrize("style", [s.value for s in BeerStyle])
def test_round_trip_preserves_entity(style):
    beer = _stored_beer(beer_style=style)
    assert BeerMapper.to_entity(BeerMapper.to_dto(beer)) == beer


def test_round_trip_preserves_entity_without_optional_fields():
    beer = _stored_beer(quantity_to_brew=None, quantity_on_hand=None, min_on_hand=None)
    assert BeerMapper.to_entity(BeerMapper.to_dto(beer)) == beer
