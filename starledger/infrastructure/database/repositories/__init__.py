"""SQLAlchemy-backed repository implementations."""

from .handle_repository import SqlHandleRepository
from .star_repository import SqlStarRepository

__all__ = [
    "SqlHandleRepository",
    "SqlStarRepository",
]
