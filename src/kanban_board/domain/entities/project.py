"""
Project Domain Entity (DTO).

Data Transfer Object for Project entity, providing a clean interface between
the application layer and database layer.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional

from kanban_board.domain.entities.task import TaskDTO


@dataclass
class ProjectDTO:
    """
    Project Data Transfer Object.

    A project is a task board: a uniquely titled container that exclusively
    owns an ordered collection of tasks.

    Attributes:
        id: Unique project identifier (UUID)
        title: Project title (unique, 3-30 characters)
        description: Project description
        tasks: Tasks in insertion order
        created_at: Project creation timestamp
        updated_at: Last modification timestamp
    """

    id: str
    title: str
    description: str = ""
    tasks: List[TaskDTO] = field(default_factory=list)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def find_task(self, task_id: str) -> Optional[TaskDTO]:
        """Return the task with the given id, if this project owns it."""
        for task in self.tasks:
            if task.id == task_id:
                return task
        return None

    def to_dict(self) -> Dict[str, Any]:
        """Convert DTO to the JSON representation served over HTTP."""
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "tasks": [task.to_dict() for task in self.tasks],
            "createdAt": self.created_at.isoformat() if self.created_at else None,
            "updatedAt": self.updated_at.isoformat() if self.updated_at else None,
        }

    def to_summary(self) -> Dict[str, Any]:
        """Listing view: no tasks and no modification time."""
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
        }
