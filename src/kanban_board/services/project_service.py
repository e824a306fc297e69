"""
Project Service - Business logic for project operations.

Provides high-level project operations with validation ahead of any
repository call.
"""

import logging
from typing import Any, Dict, List

from kanban_board.domain.entities.result_types import DomainResult, DomainSuccess
from kanban_board.domain.interfaces import IProjectRepository
from kanban_board.services.payload_validator import PayloadValidator

logger = logging.getLogger(__name__)


class ProjectService:
    """
    Service for project business logic.

    Orchestrates project CRUD. Deleting a project removes its tasks with it.
    """

    def __init__(self, project_repo: IProjectRepository):
        """Initialize service with the project repository."""
        self.project_repo = project_repo

    def create_project(self, title: str, description: str) -> DomainResult[Dict[str, Any]]:
        """
        Create a new project.

        Args:
            title: Project title (unique, 3-30 characters).
            description: Project description (required).

        Returns:
            DomainResult with created project data. Fails with
            ``ALREADY_EXISTS`` when another project has the same title.
        """
        validation = PayloadValidator({"title": title, "description": description}).validate()
        if validation.is_failure:
            return validation

        result = self.project_repo.create({"title": title, "description": description})
        if result.is_success and result.data:
            logger.info("Created project %s (%r)", result.data.id, title)
            return DomainSuccess.create(data=result.data.to_dict())
        return result

    def get_project(self, project_id: str) -> DomainResult[Dict[str, Any]]:
        """Get project by ID, including its tasks."""
        result = self.project_repo.get(project_id)
        if result.is_success and result.data:
            return DomainSuccess.create(data=result.data.to_dict())
        return result

    def list_projects(self) -> DomainResult[List[Dict[str, Any]]]:
        """List project summaries (no tasks)."""
        result = self.project_repo.list_summaries()
        if result.is_success:
            return DomainSuccess.create(data=[p.to_summary() for p in result.data or []])
        return result

    def update_project(
        self, project_id: str, title: str, description: str
    ) -> DomainResult[Dict[str, Any]]:
        """Replace a project's title and description. Tasks are untouched."""
        validation = PayloadValidator({"title": title, "description": description}).validate()
        if validation.is_failure:
            return validation

        result = self.project_repo.update(
            project_id, {"title": title, "description": description}
        )
        if result.is_success and result.data:
            return DomainSuccess.create(data=result.data.to_dict())
        return result

    def delete_project(self, project_id: str) -> DomainResult[Dict[str, Any]]:
        """Delete a project and all its tasks, returning what was deleted."""
        result = self.project_repo.delete(project_id)
        if result.is_success and result.data:
            logger.info(
                "Deleted project %s with %d task(s)", project_id, len(result.data.tasks)
            )
            return DomainSuccess.create(data=result.data.to_dict())
        return result
