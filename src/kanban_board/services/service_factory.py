"""
Service Factory - Dependency injection for services.

Creates service instances that share one ORM manager and one set of
repositories. The factory is built from an explicit ``ORMManager``; there
is no process-wide instance.
"""

import threading
from typing import Optional

from kanban_board.database.orm_manager import ORMManager
from kanban_board.database.repositories import ProjectRepository, TaskRepository
from kanban_board.services.project_service import ProjectService
from kanban_board.services.task_service import TaskService


class ServiceFactory:
    """
    Factory for creating service instances with dependency injection.

    Creates and caches service instances, ensuring they share the same
    ORM manager and repositories.
    """

    def __init__(self, orm_manager: ORMManager):
        """
        Initialize the service factory.

        Args:
            orm_manager: ORM manager owning the database connection.
        """
        self._orm_manager = orm_manager
        self._lock = threading.RLock()  # RLock allows reentrant locking

        # Repository cache
        self._project_repo: Optional[ProjectRepository] = None
        self._task_repo: Optional[TaskRepository] = None

        # Service cache
        self._project_service: Optional[ProjectService] = None
        self._task_service: Optional[TaskService] = None

    @property
    def orm_manager(self) -> ORMManager:
        """Get the ORM manager."""
        return self._orm_manager

    # Repository getters
    def get_project_repository(self) -> ProjectRepository:
        """Get or create the project repository."""
        with self._lock:
            if self._project_repo is None:
                self._project_repo = ProjectRepository(self._orm_manager)
            return self._project_repo

    def get_task_repository(self) -> TaskRepository:
        """Get or create the task repository."""
        with self._lock:
            if self._task_repo is None:
                self._task_repo = TaskRepository(self._orm_manager)
            return self._task_repo

    # Service getters
    def get_project_service(self) -> ProjectService:
        """Get or create the project service."""
        with self._lock:
            if self._project_service is None:
                self._project_service = ProjectService(
                    project_repo=self.get_project_repository(),
                )
            return self._project_service

    def get_task_service(self) -> TaskService:
        """Get or create the task service."""
        with self._lock:
            if self._task_service is None:
                self._task_service = TaskService(
                    task_repo=self.get_task_repository(),
                )
            return self._task_service
