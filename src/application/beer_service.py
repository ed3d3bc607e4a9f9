"""Application service for the beer resource.

Orchestrates repository access and entity/DTO mapping.  Holds no state
beyond its collaborators, so one instance may serve concurrent requests.
"""

from __future__ import annotations

import logging
from uuid import UUID

from src.domain.exceptions import BeerNotFoundError
from src.domain.repositories.beer import BeerRepository

from .dto import BeerDto
from .mappers import BeerMapper

logger = logging.getLogger(__name__)

# Assigned by the store; whatever the client sends for these is discarded.
_STORE_OWNED_FIELDS = ("id", "version", "created_date", "last_modified_date")

_MUTABLE_FIELDS = (
    "beer_name",
    "beer_style",
    "upc",
    "price",
    "quantity_on_hand",
    "quantity_to_brew",
    "min_on_hand",
)


class BeerService:

    def __init__(self, repository: BeerRepository) -> None:
        self._repository = repository

    async def get_by_id(self, beer_id: UUID) -> BeerDto:
        beer = await self._repository.get_by_id(beer_id)
        if beer is None:
            raise BeerNotFoundError(beer_id)
        return BeerMapper.to_dto(beer)

    async def create(self, dto: BeerDto) -> BeerDto:
        """Store a new beer and return it with its assigned id, version and timestamps."""
        beer = BeerMapper.to_entity(dto).model_copy(
            update=dict.fromkeys(_STORE_OWNED_FIELDS)
        )
        saved = await self._repository.save(beer)
        logger.info("Created beer %s (%s)", saved.id, saved.beer_name)
        return BeerMapper.to_dto(saved)

    async def update(self, beer_id: UUID, dto: BeerDto) -> None:
        """Overwrite the mutable fields of an existing beer.

        Never creates a beer: an unknown id raises BeerNotFoundError.
        """
        existing = await self._repository.get_by_id(beer_id)
        if existing is None:
            raise BeerNotFoundError(beer_id)

        incoming = BeerMapper.to_entity(dto)
        changes = {field: getattr(incoming, field) for field in _MUTABLE_FIELDS}
        saved = await self._repository.save(existing.model_copy(update=changes))
        logger.info("Updated beer %s to version %s", saved.id, saved.version)
