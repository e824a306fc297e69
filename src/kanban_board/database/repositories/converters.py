"""Conversions from ORM models to domain DTOs."""

from datetime import datetime, timezone
from typing import Optional

from kanban_board.database.models.project import Project
from kanban_board.database.models.task import Task
from kanban_board.domain.entities.project import ProjectDTO
from kanban_board.domain.entities.task import AttachmentDTO, TaskDTO


def _as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """SQLite hands back naive datetimes; every stored timestamp is UTC."""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def task_to_dto(task: Task) -> TaskDTO:
    """Convert Task model to TaskDTO."""
    return TaskDTO(
        id=task.id,
        project_id=task.project_id,
        title=task.title,
        description=task.description,
        stage=task.stage,
        order=task.order,
        index=task.index,
        attachments=[AttachmentDTO.from_dict(a) for a in task.get_attachments()],
        created_at=_as_utc(task.created_at),
        updated_at=_as_utc(task.updated_at),
    )


def project_to_dto(project: Project, include_tasks: bool = True) -> ProjectDTO:
    """Convert Project model to ProjectDTO.

    Must be called while the model is still bound to its session when
    ``include_tasks`` is set, since tasks are loaded lazily.
    """
    return ProjectDTO(
        id=project.id,
        title=project.title,
        description=project.description,
        tasks=[task_to_dto(t) for t in project.tasks] if include_tasks else [],
        created_at=_as_utc(project.created_at),
        updated_at=_as_utc(project.updated_at),
    )
