"""
Project SQLAlchemy Model.

Represents a project - a task board owning an ordered collection of tasks.
"""

from datetime import datetime

from sqlalchemy import Column, DateTime, String, Text
from sqlalchemy.orm import relationship

from kanban_board.database.models.base import Base, generate_id, get_current_timestamp


class Project(Base):
    """
    Project model representing a kanban board.

    Titles are unique across all projects. Tasks are owned exclusively by
    their project and are removed with it.
    """

    __tablename__ = "projects"

    id: str = Column(String(36), primary_key=True, default=generate_id)
    title: str = Column(String(30), nullable=False, unique=True, index=True)
    description: str = Column(Text, nullable=False, default="")
    created_at: datetime = Column(DateTime, nullable=False, default=get_current_timestamp)
    updated_at: datetime = Column(
        DateTime, nullable=False, default=get_current_timestamp, onupdate=get_current_timestamp
    )

    # Relationships
    tasks = relationship(
        "Task",
        back_populates="project",
        cascade="all, delete-orphan",
        order_by="Task.position",
    )

    def __repr__(self) -> str:
        return f"<Project(id={self.id!r}, title={self.title!r})>"
