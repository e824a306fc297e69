"""
Task Domain Entity (DTO).

Data Transfer Objects for tasks and the outcome of a board reassignment,
providing a clean interface between the application layer and database layer.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional

DEFAULT_STAGE = "Requested"


def _isoformat(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value else None


@dataclass
class AttachmentDTO:
    """A link attached to a task, e.g. a design file or a ticket."""

    kind: str
    url: str

    def to_dict(self) -> Dict[str, Any]:
        """Convert DTO to dictionary representation."""
        return {"kind": self.kind, "url": self.url}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AttachmentDTO":
        """Create DTO from dictionary representation."""
        return cls(kind=data.get("kind", ""), url=data.get("url", ""))


@dataclass
class TaskDTO:
    """
    Task Data Transfer Object.

    Represents a task entity in the domain layer, providing a clean
    interface for task data without ORM dependencies.

    Attributes:
        id: Unique task identifier (UUID), assigned once at creation
        project_id: Identifier of the owning project
        title: Task title (3-30 characters)
        description: Detailed task description
        stage: Board lane the task sits in ('Requested', 'In Progress', ...)
        order: Display position within the current stage
        index: Position of the task in its project at creation time
        attachments: Ordered list of attached links
        created_at: Task creation timestamp
        updated_at: Last modification timestamp
    """

    id: str
    project_id: str
    title: str
    description: str = ""
    stage: str = DEFAULT_STAGE
    order: int = 0
    index: int = 0
    attachments: List[AttachmentDTO] = field(default_factory=list)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert DTO to the JSON representation served over HTTP."""
        return {
            "id": self.id,
            "projectId": self.project_id,
            "title": self.title,
            "description": self.description,
            "stage": self.stage,
            "order": self.order,
            "index": self.index,
            "attachments": [a.to_dict() for a in self.attachments],
            "createdAt": _isoformat(self.created_at),
            "updatedAt": _isoformat(self.updated_at),
        }


@dataclass
class TaskReassignment:
    """
    Outcome of moving a single task during a board reassignment.

    Attributes:
        task_id: Identifier the client asked to move
        stage: Stage label the task was assigned to
        order: Position within the stage the task was assigned to
        updated: False when no task with that id exists in the project
        project: Snapshot of the project right after this update
    """

    task_id: str
    stage: str
    order: int
    updated: bool
    project: Optional[Dict[str, Any]] = None

    @property
    def status(self) -> str:
        return "updated" if self.updated else "skipped"

    def to_dict(self) -> Dict[str, Any]:
        """Convert outcome to dictionary representation."""
        return {
            "taskId": self.task_id,
            "stage": self.stage,
            "order": self.order,
            "status": self.status,
            "project": self.project,
        }


@dataclass(frozen=True)
class TaskPlacement:
    """Target stage and position for one task in a board reassignment."""

    task_id: str
    stage: str
    order: int


def initial_placement(existing_count: int) -> Dict[str, Any]:
    """Stage and ordering fields for a task appended after ``existing_count`` tasks.

    ``order`` is 1-based while ``index`` is 0-based. Existing board clients
    rely on this offset.
    """
    return {"stage": DEFAULT_STAGE, "order": existing_count + 1, "index": existing_count}
