"""Beer repository interface."""

from __future__ import annotations

from abc import abstractmethod
from uuid import UUID

from src.domain.models.beer import Beer

from .base import Repository


class BeerRepository(Repository[Beer]):
    """Read/write interface for Beer entities.

    save() inserts when beer.id is None: the store assigns id, version and
    both audit timestamps.  Otherwise it replaces the stored row, refreshing
    last_modified_date and incrementing version; it raises BeerNotFoundError
    rather than creating a row for an unknown id.
    """

    @abstractmethod
    async def get_by_id(self, beer_id: UUID) -> Beer | None:
        """Return the beer with the given ID, or None."""

    @abstractmethod
    async def save(self, entity: Beer) -> Beer:
        """Persist a new beer or replace an existing one."""
