"""Database models."""

from kanban_board.database.models.base import (
    Base,
    generate_id,
    get_current_timestamp,
    is_valid_id,
)
from kanban_board.database.models.project import Project
from kanban_board.database.models.task import Task

__all__ = [
    "Base",
    "generate_id",
    "get_current_timestamp",
    "is_valid_id",
    "Project",
    "Task",
]
