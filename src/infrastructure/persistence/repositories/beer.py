"""SQLAlchemy implementation of BeerRepository."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import datetime, timezone
from uuid import UUID, uuid4

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.exceptions import BeerNotFoundError, StorageUnavailableError
from src.domain.models.beer import Beer as DomainBeer
from src.domain.repositories.beer import BeerRepository
from src.infrastructure.persistence.models.beer import Beer as OrmBeer

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)


@contextmanager
def _storage_errors(operation: str) -> Iterator[None]:
    """Re-raise driver / ORM failures as StorageUnavailableError."""
    try:
        yield
    except SQLAlchemyError as exc:
        logger.error("Beer store failed during %s", operation, exc_info=True)
        raise StorageUnavailableError(f"beer store unavailable during {operation}") from exc


class SqlBeerRepository(BeerRepository):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    @staticmethod
    def _to_domain(row: OrmBeer) -> DomainBeer:
        return DomainBeer(
            id=row.id,
            version=row.version,
            created_date=row.created_date,
            last_modified_date=row.last_modified_date,
            beer_name=row.beer_name,
            beer_style=row.beer_style,
            upc=row.upc,
            price=row.price,
            quantity_to_brew=row.quantity_to_brew,
            quantity_on_hand=row.quantity_on_hand,
            min_on_hand=row.min_on_hand,
        )

    @staticmethod
    def _copy_mutable(entity: DomainBeer, row: OrmBeer) -> None:
        row.beer_name = entity.beer_name
        row.beer_style = entity.beer_style
        row.upc = entity.upc
        row.price = entity.price
        row.quantity_to_brew = entity.quantity_to_brew
        row.quantity_on_hand = entity.quantity_on_hand
        row.min_on_hand = entity.min_on_hand

    async def _fetch(self, beer_id: UUID, for_update: bool = False) -> OrmBeer | None:
        stmt = select(OrmBeer).where(OrmBeer.id == beer_id)
        if for_update:
            # Row lock serialises concurrent updates; populate_existing reloads
            # a row this session already holds so version is read after the lock.
            stmt = stmt.with_for_update().execution_options(populate_existing=True)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_id(self, beer_id: UUID) -> DomainBeer | None:
        with _storage_errors("get_by_id"):
            row = await self._fetch(beer_id)
        return self._to_domain(row) if row else None

    async def exists(self, id: UUID) -> bool:
        stmt = select(OrmBeer.id).where(OrmBeer.id == id)
        with _storage_errors("exists"):
            result = await self._session.execute(stmt)
            return result.scalar_one_or_none() is not None

    async def list(self, limit: int = 50, offset: int = 0) -> list[DomainBeer]:
        stmt = (
            select(OrmBeer)
            .order_by(OrmBeer.created_date.desc())
            .limit(limit)
            .offset(offset)
        )
        with _storage_errors("list"):
            result = await self._session.execute(stmt)
            rows = list(result.scalars())
        return [self._to_domain(row) for row in rows]

    async def save(self, entity: DomainBeer) -> DomainBeer:
        """Insert a new beer or replace an existing one.

        Store-owned fields on the incoming entity are ignored: a new row gets
        a fresh id and both timestamps set to now; an existing row keeps its
        id and created_date, gets last_modified_date refreshed and its
        version incremented.  The row is locked while it is rewritten, so
        concurrent updates apply one after the other.
        """
        now = _utcnow()
        with _storage_errors("save"):
            if entity.is_new:
                row = OrmBeer(id=uuid4(), version=1, created_date=now, last_modified_date=now)
                self._copy_mutable(entity, row)
                self._session.add(row)
            else:
                row = await self._fetch(entity.id, for_update=True)
                if row is None:
                    raise BeerNotFoundError(entity.id)
                self._copy_mutable(entity, row)
                row.last_modified_date = max(now, row.created_date, row.last_modified_date)
                row.version = row.version + 1
            await self._session.flush()
        return self._to_domain(row)
