"""
Task Repository.

SQLAlchemy ORM-based repository for task operations. Tasks are always
addressed through their owning project: every lookup is keyed by the pair
(project id, task id).
"""

from typing import Any, Dict, List, Optional

from sqlalchemy import func, select, update
from sqlalchemy.orm import selectinload

from kanban_board.database.models.base import get_current_timestamp, is_valid_id
from kanban_board.database.models.project import Project
from kanban_board.database.models.task import Task
from kanban_board.database.orm_manager import ORMManager
from kanban_board.database.repositories.converters import project_to_dto, task_to_dto
from kanban_board.domain.entities.project import ProjectDTO
from kanban_board.domain.entities.result_types import (
    DomainError,
    DomainResult,
    DomainSuccess,
)
from kanban_board.domain.entities.task import (
    TaskDTO,
    TaskPlacement,
    TaskReassignment,
    initial_placement,
)

UPDATABLE_FIELDS = ("title", "description")


class TaskRepository:
    """
    Task repository using SQLAlchemy ORM.

    Provides CRUD operations for tasks nested in a project with proper error
    handling via DomainResult pattern.
    """

    def __init__(self, orm_manager: ORMManager):
        """
        Initialize repository with ORM manager.

        Args:
            orm_manager: ORM manager owning the database connection.
        """
        self.orm_manager = orm_manager

    def _find_task(self, session: Any, project_id: str, task_id: str) -> Optional[Task]:
        """Find a task by id within a project; malformed ids never match."""
        if not (is_valid_id(project_id) and is_valid_id(task_id)):
            return None
        return session.execute(
            select(Task).where(Task.project_id == project_id, Task.id == task_id)
        ).scalar_one_or_none()

    def _load_project(self, session: Any, project_id: str) -> Optional[Project]:
        if not is_valid_id(project_id):
            return None
        return session.execute(
            select(Project).options(selectinload(Project.tasks)).where(Project.id == project_id)
        ).scalar_one_or_none()

    def append(self, project_id: str, task_data: Dict[str, Any]) -> DomainResult[TaskDTO]:
        """
        Append a new task to a project.

        The project row is updated before the tasks are counted. That write
        takes the row lock (the database write lock on SQLite), so concurrent
        appends to one project run one after another and each sees the tasks
        committed before it. ``order``, ``index`` and the hidden ``position``
        therefore never repeat within a project.

        Args:
            project_id: Project UUID.
            task_data: Dictionary with ``title``, ``description`` and
                optionally ``attachments``.

        Returns:
            DomainResult with created task data.
        """
        if not is_valid_id(project_id):
            return DomainError.invalid_id("Project", project_id)

        try:
            with self.orm_manager.get_session() as session:
                touched = session.execute(
                    update(Project)
                    .where(Project.id == project_id)
                    .values(updated_at=get_current_timestamp())
                    .execution_options(synchronize_session=False)
                )

                if touched.rowcount == 0:
                    return DomainError.not_found("Project", project_id)

                existing = session.scalar(
                    select(func.count(Task.id)).where(Task.project_id == project_id)
                )
                last_position = session.scalar(
                    select(func.max(Task.position)).where(Task.project_id == project_id)
                )

                task = Task(
                    project_id=project_id,
                    title=task_data.get("title", ""),
                    description=task_data.get("description", ""),
                    position=0 if last_position is None else last_position + 1,
                    **initial_placement(existing or 0),
                )
                task.set_attachments(task_data.get("attachments") or [])

                session.add(task)
                session.flush()

                return DomainSuccess.create(data=task_to_dto(task))

        except Exception as e:
            return DomainError.operation_failed("add_task", str(e))

    def get(self, project_id: str, task_id: str) -> DomainResult[TaskDTO]:
        """
        Get a task of a project.

        Args:
            project_id: Project UUID.
            task_id: Task UUID.

        Returns:
            DomainResult with task data or not found error.
        """
        try:
            with self.orm_manager.get_session() as session:
                task = self._find_task(session, project_id, task_id)

                if not task:
                    return DomainError.not_found("Task", task_id)

                return DomainSuccess.create(data=task_to_dto(task))

        except Exception as e:
            return DomainError.operation_failed("get_task", str(e))

    def update(
        self, project_id: str, task_id: str, updates: Dict[str, Any]
    ) -> DomainResult[ProjectDTO]:
        """
        Update a task's title and/or description in place.

        Stage and ordering fields are left alone; they only change through
        ``reassign``.

        Args:
            project_id: Project UUID.
            task_id: Task UUID.
            updates: Dictionary of fields to update.

        Returns:
            DomainResult with the whole parent project after the update.
        """
        try:
            with self.orm_manager.get_session() as session:
                task = self._find_task(session, project_id, task_id)

                if not task:
                    return DomainError.not_found("Task", task_id)

                for field in UPDATABLE_FIELDS:
                    if field in updates:
                        setattr(task, field, updates[field])
                task.project.updated_at = get_current_timestamp()

                session.flush()
                return DomainSuccess.create(data=project_to_dto(task.project))

        except Exception as e:
            return DomainError.operation_failed("update_task", str(e))

    def delete(self, project_id: str, task_id: str) -> DomainResult[ProjectDTO]:
        """
        Remove a task from its project.

        Args:
            project_id: Project UUID.
            task_id: Task UUID.

        Returns:
            DomainResult with the parent project after the removal.
        """
        try:
            with self.orm_manager.get_session() as session:
                task = self._find_task(session, project_id, task_id)

                if not task:
                    return DomainError.not_found("Task", task_id)

                project = task.project
                project.tasks.remove(task)
                project.updated_at = get_current_timestamp()

                session.flush()
                return DomainSuccess.create(data=project_to_dto(project))

        except Exception as e:
            return DomainError.operation_failed("delete_task", str(e))

    def reassign(
        self, project_id: str, placements: List[TaskPlacement]
    ) -> DomainResult[List[TaskReassignment]]:
        """
        Apply a batch of stage/order placements in a single transaction.

        Placements are applied in the given order. A placement whose task does
        not belong to the project is reported as not updated. If anything
        fails, none of the placements are committed.

        Args:
            project_id: Project UUID.
            placements: Target stage and order per task.

        Returns:
            DomainResult with one outcome per placement, in input order.
        """
        outcomes: List[TaskReassignment] = []
        try:
            with self.orm_manager.get_session() as session:
                project = self._load_project(session, project_id)
                tasks_by_id = {t.id: t for t in project.tasks} if project else {}

                for placement in placements:
                    task = tasks_by_id.get(placement.task_id)
                    if task is None:
                        outcomes.append(
                            TaskReassignment(
                                task_id=placement.task_id,
                                stage=placement.stage,
                                order=placement.order,
                                updated=False,
                            )
                        )
                        continue

                    task.stage = placement.stage
                    task.order = placement.order
                    project.updated_at = get_current_timestamp()
                    session.flush()

                    outcomes.append(
                        TaskReassignment(
                            task_id=placement.task_id,
                            stage=placement.stage,
                            order=placement.order,
                            updated=True,
                            project=project_to_dto(project).to_dict(),
                        )
                    )

            return DomainSuccess.create(data=outcomes)

        except Exception as e:
            return DomainError.operation_failed("reassign_tasks", str(e))
