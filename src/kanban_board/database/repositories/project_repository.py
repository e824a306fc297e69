"""
Project Repository.

SQLAlchemy ORM-based repository for project operations.
"""

from typing import Any, Dict, List

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import selectinload

from kanban_board.database.models.base import is_valid_id
from kanban_board.database.models.project import Project
from kanban_board.database.orm_manager import ORMManager
from kanban_board.database.repositories.converters import project_to_dto
from kanban_board.domain.entities.project import ProjectDTO
from kanban_board.domain.entities.result_types import (
    DomainError,
    DomainResult,
    DomainSuccess,
)

UPDATABLE_FIELDS = ("title", "description")


class ProjectRepository:
    """
    Project repository using SQLAlchemy ORM.

    Provides CRUD operations for projects with proper error handling
    via DomainResult pattern. Title uniqueness is enforced by the database
    and reported as ``ALREADY_EXISTS``.
    """

    def __init__(self, orm_manager: ORMManager):
        """
        Initialize repository with ORM manager.

        Args:
            orm_manager: ORM manager owning the database connection.
        """
        self.orm_manager = orm_manager

    def _load(self, session: Any, project_id: str) -> Any:
        return session.execute(
            select(Project).options(selectinload(Project.tasks)).where(Project.id == project_id)
        ).scalar_one_or_none()

    def create(self, project_data: Dict[str, Any]) -> DomainResult[ProjectDTO]:
        """
        Create a new project.

        No existence check is made up front; a concurrent insert of the same
        title would slip past it. The unique index decides instead.

        Args:
            project_data: Dictionary with ``title`` and ``description``.

        Returns:
            DomainResult with created project data.
        """
        title = project_data.get("title", "")
        try:
            with self.orm_manager.get_session() as session:
                project = Project(
                    title=title,
                    description=project_data.get("description", ""),
                )
                session.add(project)
                session.flush()

                return DomainSuccess.create(data=project_to_dto(project))

        except IntegrityError:
            return DomainError.already_exists("Project", title)
        except Exception as e:
            return DomainError.operation_failed("create_project", str(e))

    def get(self, project_id: str) -> DomainResult[ProjectDTO]:
        """
        Get project by ID, including its tasks.

        Args:
            project_id: Project UUID.

        Returns:
            DomainResult with project data or not found error.
        """
        if not is_valid_id(project_id):
            return DomainError.invalid_id("Project", project_id)

        try:
            with self.orm_manager.get_session() as session:
                project = self._load(session, project_id)

                if not project:
                    return DomainError.not_found("Project", project_id)

                return DomainSuccess.create(data=project_to_dto(project))

        except Exception as e:
            return DomainError.operation_failed("get_project", str(e))

    def list_summaries(self) -> DomainResult[List[ProjectDTO]]:
        """
        List all projects in creation order, without their tasks.

        Returns:
            DomainResult with list of project DTOs whose ``tasks`` are empty.
        """
        try:
            with self.orm_manager.get_session() as session:
                projects = (
                    session.execute(select(Project).order_by(Project.created_at.asc()))
                    .scalars()
                    .all()
                )
                return DomainSuccess.create(
                    data=[project_to_dto(p, include_tasks=False) for p in projects]
                )

        except Exception as e:
            return DomainError.operation_failed("list_projects", str(e))

    def update(self, project_id: str, updates: Dict[str, Any]) -> DomainResult[ProjectDTO]:
        """
        Update a project's title and/or description.

        Args:
            project_id: Project UUID.
            updates: Dictionary of fields to update.

        Returns:
            DomainResult with updated project data.
        """
        if not is_valid_id(project_id):
            return DomainError.invalid_id("Project", project_id)

        try:
            with self.orm_manager.get_session() as session:
                project = self._load(session, project_id)

                if not project:
                    return DomainError.not_found("Project", project_id)

                for field in UPDATABLE_FIELDS:
                    if field in updates:
                        setattr(project, field, updates[field])

                session.flush()
                return DomainSuccess.create(data=project_to_dto(project))

        except IntegrityError:
            return DomainError.already_exists("Project", updates.get("title", ""))
        except Exception as e:
            return DomainError.operation_failed("update_project", str(e))

    def delete(self, project_id: str) -> DomainResult[ProjectDTO]:
        """
        Delete a project and all its tasks.

        Args:
            project_id: Project UUID.

        Returns:
            DomainResult with the project as it was before deletion.
        """
        if not is_valid_id(project_id):
            return DomainError.invalid_id("Project", project_id)

        try:
            with self.orm_manager.get_session() as session:
                project = self._load(session, project_id)

                if not project:
                    return DomainError.not_found("Project", project_id)

                deleted = project_to_dto(project)

                # Delete project (cascade deletes tasks)
                session.delete(project)
                session.flush()

                return DomainSuccess.create(data=deleted)

        except Exception as e:
            return DomainError.operation_failed("delete_project", str(e))
