"""Domain model package.

All domain objects are pure Python / Pydantic models with no ORM or
infrastructure dependencies.  Import from this package to avoid coupling
application code to individual module paths.
"""

from .beer import Beer
from .enums import BeerStyle

__all__ = [
    "Beer",
    "BeerStyle",
]
