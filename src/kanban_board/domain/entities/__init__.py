"""Domain entities - Data Transfer Objects."""

from kanban_board.domain.entities.project import ProjectDTO
from kanban_board.domain.entities.result_types import (
    DomainError,
    DomainErrorType,
    DomainResult,
    DomainSuccess,
)
from kanban_board.domain.entities.task import (
    DEFAULT_STAGE,
    AttachmentDTO,
    TaskDTO,
    TaskPlacement,
    TaskReassignment,
    initial_placement,
)

__all__ = [
    "DomainError",
    "DomainErrorType",
    "DomainResult",
    "DomainSuccess",
    "ProjectDTO",
    "TaskDTO",
    "AttachmentDTO",
    "TaskPlacement",
    "TaskReassignment",
    "DEFAULT_STAGE",
    "initial_placement",
]
