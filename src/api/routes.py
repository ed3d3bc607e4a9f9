"""Beer resource routes.

build_beer_router() takes the dependency that yields a BeerService, so the
router never reaches for a global.  Each request resolves its own service.
"""

from collections.abc import Callable
from typing import Annotated, Any
from uuid import UUID

from fastapi import APIRouter, Depends, Path, Query, Request, Response, status

from src.application.beer_service import BeerService
from src.application.dto import BeerDto

ServiceProvider = Callable[..., Any]


def build_beer_router(service_provider: ServiceProvider) -> APIRouter:
    router = APIRouter()
    Service = Annotated[BeerService, Depends(service_provider)]
    BeerId = Annotated[UUID, Path(description="UUID of desired beer to get.")]

    @router.get("/{beer_id}", response_model=BeerDto, name="get_beer_by_id")
    async def get_beer_by_id(
        beer_id: BeerId,
        service: Service,
        # Accepted and ignored; kept so it shows up in the API docs.
        iscold: Annotated[str | None, Query(description="Is Beer Cold Query param")] = None,
    ) -> BeerDto:
        return await service.get_by_id(beer_id)

    @router.post(
        "/",
        status_code=status.HTTP_201_CREATED,
        response_class=Response,
        responses={status.HTTP_201_CREATED: {"description": "Beer created"}},
    )
    async def save_new_beer(request: Request, beer: BeerDto, service: Service) -> Response:
        saved = await service.create(beer)
        location = request.url_for("get_beer_by_id", beer_id=str(saved.id))
        return Response(
            status_code=status.HTTP_201_CREATED,
            headers={"Location": str(location)},
        )

    @router.put(
        "/{beer_id}",
        status_code=status.HTTP_204_NO_CONTENT,
        response_class=Response,
    )
    async def update_beer_by_id(beer_id: BeerId, beer: BeerDto, service: Service) -> Response:
        await service.update(beer_id, beer)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return router
