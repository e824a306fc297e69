"""Database layer - SQLAlchemy ORM models and repositories."""

from kanban_board.database.models.base import Base
from kanban_board.database.orm_manager import ORMManager

__all__ = [
    "ORMManager",
    "Base",
]
