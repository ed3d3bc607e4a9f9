"""Application layer: wire DTOs, the entity/DTO mapper and the beer service."""

from .beer_service import BeerService
from .dto import BeerDto
from .mappers import BeerMapper

__all__ = ["BeerDto", "BeerMapper", "BeerService"]
