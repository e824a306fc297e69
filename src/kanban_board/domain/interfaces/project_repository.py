"""Project Repository Interface."""

from typing import Any, Dict, List, Protocol

from kanban_board.domain.entities.project import ProjectDTO
from kanban_board.domain.entities.result_types import DomainResult


class IProjectRepository(Protocol):
    """Protocol for project repository operations."""

    def create(self, project_data: Dict[str, Any]) -> DomainResult[ProjectDTO]:
        """Create a new project."""
        ...

    def get(self, project_id: str) -> DomainResult[ProjectDTO]:
        """Get project by ID, including its tasks."""
        ...

    def list_summaries(self) -> DomainResult[List[ProjectDTO]]:
        """List all projects without loading their tasks."""
        ...

    def update(self, project_id: str, updates: Dict[str, Any]) -> DomainResult[ProjectDTO]:
        """Update a project."""
        ...

    def delete(self, project_id: str) -> DomainResult[ProjectDTO]:
        """Delete a project and all its tasks."""
        ...
