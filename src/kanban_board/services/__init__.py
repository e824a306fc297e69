"""Service layer - Business logic orchestration."""

from kanban_board.services.project_service import ProjectService
from kanban_board.services.service_factory import ServiceFactory
from kanban_board.services.task_service import TaskService, plan_reassignment

__all__ = [
    "ProjectService",
    "TaskService",
    "ServiceFactory",
    "plan_reassignment",
]
