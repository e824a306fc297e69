"""
Task SQLAlchemy Model.

Represents a task - a card on a project's board.
"""

import json
from datetime import datetime
from typing import Any, Dict, List, Optional

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import relationship

from kanban_board.database.models.base import Base, generate_id, get_current_timestamp


class Task(Base):
    """
    Task model representing a single card on a board.

    ``position`` keeps the project's task collection in insertion order and is
    never exposed. ``order`` and ``index`` are the client-visible ordering
    fields.
    """

    __tablename__ = "tasks"
    __table_args__ = (UniqueConstraint("project_id", "position", name="uq_task_project_position"),)

    id: str = Column(String(36), primary_key=True, default=generate_id)
    project_id: str = Column(
        String(36), ForeignKey("projects.id", ondelete="CASCADE"), nullable=False, index=True
    )
    title: str = Column(String(30), nullable=False)
    description: str = Column(Text, nullable=False, default="")
    stage: str = Column(String(100), nullable=False, default="Requested")
    order: int = Column("sort_order", Integer, nullable=False, default=0)
    index: int = Column("creation_index", Integer, nullable=False, default=0)
    position: int = Column(Integer, nullable=False, default=0)
    attachments_json: Optional[str] = Column("attachments", Text, nullable=True)
    created_at: datetime = Column(DateTime, nullable=False, default=get_current_timestamp)
    updated_at: datetime = Column(
        DateTime, nullable=False, default=get_current_timestamp, onupdate=get_current_timestamp
    )

    # Relationships
    project = relationship("Project", back_populates="tasks")

    def get_attachments(self) -> List[Dict[str, Any]]:
        """Get attachments as list."""
        if not self.attachments_json:
            return []
        try:
            return json.loads(self.attachments_json)
        except (json.JSONDecodeError, TypeError):
            return []

    def set_attachments(self, attachments: List[Dict[str, Any]]) -> None:
        """Set attachments from list."""
        self.attachments_json = json.dumps(attachments) if attachments else None

    def __repr__(self) -> str:
        return f"<Task(id={self.id!r}, title={self.title!r}, stage={self.stage!r})>"
