"""Domain interfaces - Protocol-based repository contracts."""

from kanban_board.domain.interfaces.project_repository import IProjectRepository
from kanban_board.domain.interfaces.task_repository import ITaskRepository

__all__ = [
    "IProjectRepository",
    "ITaskRepository",
]
