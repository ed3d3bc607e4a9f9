"""FastAPI application factory.

create_app() is the composition root: it receives the dependency that
builds a BeerService and hands it to the router.  The default provider
binds a SqlBeerRepository to the request's session.
"""

from __future__ import annotations

import logging

from fastapi import Depends, FastAPI
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.beer_service import BeerService
from src.infrastructure.database import get_session
from src.infrastructure.persistence.repositories import get_repositories

from .exception_handlers import register_exception_handlers
from .routes import ServiceProvider, build_beer_router

API_PREFIX = "/api/v1/beer"


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


async def sql_beer_service(session: AsyncSession = Depends(get_session)) -> BeerService:
    """Per-request BeerService backed by the SQL store."""
    return BeerService(get_repositories(session).beers)


def create_app(service_provider: ServiceProvider = sql_beer_service) -> FastAPI:
    app = FastAPI(
        title="Beer Service API",
        description="Create, read and update beers.",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )
    register_exception_handlers(app)
    app.include_router(build_beer_router(service_provider), prefix=API_PREFIX, tags=["beer"])
    return app
