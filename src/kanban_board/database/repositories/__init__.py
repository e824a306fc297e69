"""Database repositories."""

from kanban_board.database.repositories.project_repository import ProjectRepository
from kanban_board.database.repositories.task_repository import TaskRepository

__all__ = [
    "ProjectRepository",
    "TaskRepository",
]
