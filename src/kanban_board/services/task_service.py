"""
Task Service - Business logic for tasks on a project board.

Tasks only exist inside a project, so every operation takes the owning
project's id alongside the task id.
"""

import logging
from typing import Any, Dict, List, Mapping, Optional, Sequence

from kanban_board.domain.entities.result_types import DomainResult, DomainSuccess
from kanban_board.domain.entities.task import TaskPlacement
from kanban_board.domain.interfaces import ITaskRepository
from kanban_board.services.payload_validator import PayloadValidator, validate_stage_groups

logger = logging.getLogger(__name__)


def plan_reassignment(stage_groups: Mapping[str, Sequence[str]]) -> List[TaskPlacement]:
    """
    Turn a desired board state into per-task placements.

    Stages are visited in mapping order and tasks in list order; a task's
    ``order`` is its 0-based position in its stage's list. The result order
    is the order in which placements are applied and reported.

    Args:
        stage_groups: Stage label to task ids in display order.

    Returns:
        One placement per task reference.
    """
    return [
        TaskPlacement(task_id=task_id, stage=stage, order=position)
        for stage, task_ids in stage_groups.items()
        for position, task_id in enumerate(task_ids)
    ]


class TaskService:
    """
    Service for task business logic.

    Handles task CRUD within a project and bulk reassignment of tasks
    across stages.
    """

    def __init__(self, task_repo: ITaskRepository):
        """Initialize service with the task repository."""
        self.task_repo = task_repo

    def add_task(
        self,
        project_id: str,
        title: str,
        description: str,
        attachments: Optional[List[Dict[str, str]]] = None,
    ) -> DomainResult[Dict[str, Any]]:
        """
        Append a new task to a project.

        New tasks start in the ``Requested`` stage, with ``order`` set to the
        previous task count plus one and ``index`` set to the previous count.

        Args:
            project_id: Owning project UUID.
            title: Task title (3-30 characters).
            description: Task description (required).
            attachments: Optional list of ``{"kind", "url"}`` links.

        Returns:
            DomainResult with created task data.
        """
        payload: Dict[str, Any] = {"title": title, "description": description}
        if attachments is not None:
            payload["attachments"] = attachments

        validation = PayloadValidator(payload).validate()
        if validation.is_failure:
            return validation

        result = self.task_repo.append(project_id, payload)
        if result.is_success and result.data:
            logger.info("Added task %s to project %s", result.data.id, project_id)
            return DomainSuccess.create(data=result.data.to_dict())
        return result

    def get_task(self, project_id: str, task_id: str) -> DomainResult[Dict[str, Any]]:
        """Get a task of a project."""
        result = self.task_repo.get(project_id, task_id)
        if result.is_success and result.data:
            return DomainSuccess.create(data=result.data.to_dict())
        return result

    def update_task(
        self, project_id: str, task_id: str, title: str, description: str
    ) -> DomainResult[Dict[str, Any]]:
        """
        Update a task's title and description.

        Returns:
            DomainResult with the whole parent project, not just the task.
        """
        validation = PayloadValidator({"title": title, "description": description}).validate()
        if validation.is_failure:
            return validation

        result = self.task_repo.update(
            project_id, task_id, {"title": title, "description": description}
        )
        if result.is_success and result.data:
            return DomainSuccess.create(data=result.data.to_dict())
        return result

    def delete_task(self, project_id: str, task_id: str) -> DomainResult[Dict[str, Any]]:
        """Remove a task, returning the updated parent project."""
        result = self.task_repo.delete(project_id, task_id)
        if result.is_success and result.data:
            logger.info("Deleted task %s from project %s", task_id, project_id)
            return DomainSuccess.create(data=result.data.to_dict())
        return result

    def reassign_tasks(
        self, project_id: str, stage_groups: Mapping[str, Sequence[str]]
    ) -> DomainResult[List[Dict[str, Any]]]:
        """
        Move tasks between stages to match a rearranged board.

        Every referenced task gets ``stage`` set to its group's label and
        ``order`` set to its position in the group. All moves are applied
        in one transaction. Ids that do not match a task of the project are
        reported with status ``skipped`` rather than failing the batch.

        Args:
            project_id: Owning project UUID.
            stage_groups: Stage label to task ids in display order.

        Returns:
            DomainResult with one outcome per task reference.
        """
        validation = validate_stage_groups(stage_groups)
        if validation.is_failure:
            return validation

        placements = plan_reassignment(validation.data or {})
        result = self.task_repo.reassign(project_id, placements)
        if result.is_failure:
            return result

        outcomes = result.data or []
        skipped = sum(1 for o in outcomes if not o.updated)
        logger.info(
            "Reassigned %d task(s) in project %s (%d skipped)",
            len(outcomes) - skipped,
            project_id,
            skipped,
        )
        if skipped:
            logger.warning(
                "Reassignment for project %s referenced unknown task(s): %s",
                project_id,
                ", ".join(o.task_id for o in outcomes if not o.updated),
            )
        return DomainSuccess.create(data=[o.to_dict() for o in outcomes])
