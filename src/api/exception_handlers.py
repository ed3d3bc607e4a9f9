"""Translate service outcomes into HTTP responses.

This is the only place where typed errors become status codes:

  BeerNotFoundError        -> 404
  BadInputError            -> 400  (includes UnmappableEnumError)
  RequestValidationError   -> 400  (malformed id, malformed JSON, bad field types)
  StorageUnavailableError  -> 503
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from src.domain.exceptions import (
    BadInputError,
    BeerNotFoundError,
    StorageUnavailableError,
)

logger = logging.getLogger(__name__)


async def not_found_handler(request: Request, exc: BeerNotFoundError) -> JSONResponse:
    logger.info("%s %s -> 404: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": str(exc)})


async def bad_input_handler(request: Request, exc: BadInputError) -> JSONResponse:
    logger.warning("%s %s -> 400: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": str(exc)})


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


async def storage_unavailable_handler(
    request: Request, exc: StorageUnavailableError
) -> JSONResponse:
    logger.error("%s %s -> 503: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"detail": "Storage unavailable"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(BeerNotFoundError, not_found_handler)
    app.add_exception_handler(BadInputError, bad_input_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StorageUnavailableError, storage_unavailable_handler)
