"""Task Repository Interface."""

from typing import Any, Dict, List, Protocol

from kanban_board.domain.entities.project import ProjectDTO
from kanban_board.domain.entities.result_types import DomainResult
from kanban_board.domain.entities.task import TaskDTO, TaskPlacement, TaskReassignment


class ITaskRepository(Protocol):
    """Protocol for task operations, always scoped to the owning project."""

    def append(self, project_id: str, task_data: Dict[str, Any]) -> DomainResult[TaskDTO]:
        """Append a new task to a project."""
        ...

    def get(self, project_id: str, task_id: str) -> DomainResult[TaskDTO]:
        """Get a task of a project."""
        ...

    def update(
        self, project_id: str, task_id: str, updates: Dict[str, Any]
    ) -> DomainResult[ProjectDTO]:
        """Update a task and return its parent project."""
        ...

    def delete(self, project_id: str, task_id: str) -> DomainResult[ProjectDTO]:
        """Remove a task and return its parent project."""
        ...

    def reassign(
        self, project_id: str, placements: List[TaskPlacement]
    ) -> DomainResult[List[TaskReassignment]]:
        """Set stage and order for many tasks in one transaction."""
        ...
