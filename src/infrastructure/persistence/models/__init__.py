"""ORM model registry: imports every model module so each mapper class is
registered with Base.metadata before Alembic or SQLAlchemy runs.
"""

from src.infrastructure.persistence.models.beer import Beer

__all__ = [
    "Beer",
]
