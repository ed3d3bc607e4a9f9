"""Generic repository base interface.

Repository[T] is the root abstraction for all data-access interfaces in this
domain layer.  Concrete implementations live in src/infrastructure/persistence/
and are wired at the application boundary via explicit composition.

Design notes:
  - All methods are async to accommodate async database drivers (asyncpg / SQLAlchemy async).
  - T is the domain model type (never an ORM row or DTO).
  - save() covers both insert and replace; the store decides which from the
    entity's identity and owns every generated field (id, version, audit
    timestamps).
  - list() accepts only limit/offset; domain-specific filters are declared
    on each specialised interface.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar
from uuid import UUID

T = TypeVar("T")


class Repository(ABC, Generic[T]):
    """Abstract keyed-collection interface for a domain entity."""

    @abstractmethod
    async def get_by_id(self, id: UUID) -> T | None:
        """Return the entity with the given primary key, or None if not found."""

    @abstractmethod
    async def save(self, entity: T) -> T:
        """Insert or replace the entity and return it with store-generated fields populated."""

    @abstractmethod
    async def exists(self, id: UUID) -> bool:
        """Return True when an entity with the given primary key is stored."""

    @abstractmethod
    async def list(self, limit: int = 50, offset: int = 0) -> list[T]:
        """Return a page of entities ordered by creation time (newest first)."""
