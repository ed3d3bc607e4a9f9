"""Domain-level exceptions.

Every outcome the service boundary can signal is a subclass of
BeerServiceError so the HTTP layer can translate them in one place.
"""

from __future__ import annotations

from uuid import UUID


class BeerServiceError(Exception):
    """Base class for all beer service errors."""


class BeerNotFoundError(BeerServiceError):
    """No beer exists at the requested identifier."""

    def __init__(self, beer_id: UUID) -> None:
        super().__init__(f"Beer {beer_id} not found")
        self.beer_id = beer_id


class BadInputError(BeerServiceError):
    """The caller supplied a value that cannot be accepted."""


class UnmappableEnumError(BadInputError):
    """A stored value has no counterpart in a closed wire enumeration."""

    def __init__(self, enum_name: str, value: object) -> None:
        super().__init__(f"Cannot map {value!r} to {enum_name}")
        self.enum_name = enum_name
        self.value = value


class StorageUnavailableError(BeerServiceError):
    """The persistence layer could not be reached or failed mid-operation."""
