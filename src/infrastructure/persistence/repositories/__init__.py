"""Concrete SQLAlchemy repository implementations.

Exports the SqlRepository classes and the get_repositories() factory function
for wiring at the application boundary.
"""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession

from .beer import SqlBeerRepository


@dataclass
class Repositories:
    """All repository instances bound to a single AsyncSession."""

    beers: SqlBeerRepository


def get_repositories(session: AsyncSession) -> Repositories:
    """Construct all repositories bound to the given session.

        async def provide(session: AsyncSession = Depends(get_session)) -> BeerService:
            return BeerService(get_repositories(session).beers)
    """
    return Repositories(
        beers=SqlBeerRepository(session),
    )


__all__ = [
    "SqlBeerRepository",
    "Repositories",
    "get_repositories",
]
