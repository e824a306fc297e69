"""Tests for task service."""

import uuid
from concurrent.futures import ThreadPoolExecutor

import pytest

from kanban_board.domain.entities.result_types import DomainErrorType
from kanban_board.domain.entities.task import TaskPlacement
from kanban_board.services import plan_reassignment


@pytest.fixture
def add_tasks(task_service, project):
    """Add tasks with the given titles to the project, returning their data."""

    def _add(*titles):
        return [task_service.add_task(project["id"], title, "desc").data for title in titles]

    return _add


def stored_task(task_service, project_id, task_id):
    result = task_service.get_task(project_id, task_id)
    assert result.is_success
    return result.data


class TestPlanReassignment:
    """Tests for turning a board state into placements."""

    def test_positions_are_zero_based_per_stage(self):
        placements = plan_reassignment({"Done": ["a", "b"], "In Progress": ["c"]})

        assert placements == [
            TaskPlacement("a", "Done", 0),
            TaskPlacement("b", "Done", 1),
            TaskPlacement("c", "In Progress", 0),
        ]

    def test_empty_stage_produces_nothing(self):
        assert plan_reassignment({"Requested": []}) == []


class TestTaskService:
    """Tests for TaskService CRUD."""

    def test_add_task(self, task_service, project):
        """Test adding the first task to a project."""
        result = task_service.add_task(project["id"], "Design API", "y")

        assert result.is_success
        assert result.data["title"] == "Design API"
        assert result.data["stage"] == "Requested"
        assert result.data["order"] == 1
        assert result.data["index"] == 0
        assert result.data["projectId"] == project["id"]
        assert result.data["attachments"] == []

    def test_add_task_index_is_previous_count(
        self, task_service, project_service, project, add_tasks
    ):
        add_tasks("Task one", "Task two", "Task three")

        result = task_service.add_task(project["id"], "Task four", "d")

        assert result.data["index"] == 3
        assert result.data["order"] == 4
        assert len(project_service.get_project(project["id"]).data["tasks"]) == 4

    def test_add_task_with_attachments(self, task_service, project):
        attachments = [{"kind": "figma", "url": "https://example.com/design"}]

        result = task_service.add_task(project["id"], "Design API", "y", attachments)

        assert result.data["attachments"] == attachments
        stored = stored_task(task_service, project["id"], result.data["id"])
        assert stored["attachments"] == attachments

    def test_add_task_validates(self, task_service, project):
        result = task_service.add_task(project["id"], "x", "y")
        assert result.error_type == DomainErrorType.VALIDATION_ERROR

    def test_add_task_to_missing_project(self, task_service):
        result = task_service.add_task(str(uuid.uuid4()), "Design API", "y")

        assert result.error_type == DomainErrorType.NOT_FOUND
        assert result.error_details["resource"] == "Project"

    def test_tasks_keep_insertion_order(self, project_service, project, add_tasks):
        created = add_tasks("Task one", "Task two", "Task three")

        tasks = project_service.get_project(project["id"]).data["tasks"]

        assert [t["id"] for t in tasks] == [t["id"] for t in created]

    def test_get_task(self, task_service, project, add_tasks):
        (task,) = add_tasks("Design API")

        result = task_service.get_task(project["id"], task["id"])

        assert result.is_success
        assert result.data == task

    def test_get_task_from_other_project(self, task_service, project_service, add_tasks):
        (task,) = add_tasks("Design API")
        other = project_service.create_project("Other board", "x").data

        result = task_service.get_task(other["id"], task["id"])

        assert result.error_type == DomainErrorType.NOT_FOUND
        assert result.error_details["resource"] == "Task"

    def test_update_task_returns_project(self, task_service, project, add_tasks):
        """Only title and description change; the parent project is returned."""
        first, second = add_tasks("Design API", "Write docs")

        result = task_service.update_task(project["id"], second["id"], "Write guides", "z")

        assert result.is_success
        assert result.data["id"] == project["id"]
        updated = next(t for t in result.data["tasks"] if t["id"] == second["id"])
        assert updated["title"] == "Write guides"
        assert updated["description"] == "z"
        assert (updated["stage"], updated["order"], updated["index"]) == ("Requested", 2, 1)

    def test_update_missing_task(self, task_service, project):
        result = task_service.update_task(project["id"], str(uuid.uuid4()), "Title", "d")
        assert result.error_type == DomainErrorType.NOT_FOUND

    def test_delete_task(self, task_service, project, add_tasks):
        """Test deleting a task, then looking it up."""
        first, second = add_tasks("Design API", "Write docs")

        result = task_service.delete_task(project["id"], first["id"])

        assert result.is_success
        assert [t["id"] for t in result.data["tasks"]] == [second["id"]]
        get_result = task_service.get_task(project["id"], first["id"])
        assert get_result.error_type == DomainErrorType.NOT_FOUND

    def test_delete_missing_task(self, task_service, project):
        result = task_service.delete_task(project["id"], str(uuid.uuid4()))
        assert result.error_type == DomainErrorType.NOT_FOUND

    def test_add_after_delete_uses_current_count(self, task_service, project, add_tasks):
        first, _ = add_tasks("Design API", "Write docs")
        task_service.delete_task(project["id"], first["id"])

        result = task_service.add_task(project["id"], "Ship it", "d")

        assert result.data["index"] == 1
        assert result.data["order"] == 2


class TestReassignTasks:
    """Tests for moving tasks across stages."""

    def test_moves_tasks_into_stage(self, task_service, project, add_tasks):
        t1, t2 = add_tasks("Design API", "Write docs")

        result = task_service.reassign_tasks(project["id"], {"Done": [t1["id"], t2["id"]]})

        assert result.is_success
        first = stored_task(task_service, project["id"], t1["id"])
        second = stored_task(task_service, project["id"], t2["id"])
        assert (first["stage"], first["order"]) == ("Done", 0)
        assert (second["stage"], second["order"]) == ("Done", 1)

    def test_prior_stage_does_not_matter(self, task_service, project, add_tasks):
        t1, t2 = add_tasks("Design API", "Write docs")
        task_service.reassign_tasks(project["id"], {"In Progress": [t2["id"]], "Done": [t1["id"]]})

        task_service.reassign_tasks(project["id"], {"Done": [t2["id"], t1["id"]]})

        assert stored_task(task_service, project["id"], t2["id"])["order"] == 0
        assert stored_task(task_service, project["id"], t1["id"])["order"] == 1

    def test_outcomes_follow_processing_order(self, task_service, project, add_tasks):
        t1, t2, t3 = add_tasks("Design API", "Write docs", "Ship it")

        result = task_service.reassign_tasks(
            project["id"],
            {"In Progress": [t3["id"]], "Done": [t2["id"], t1["id"]]},
        )

        assert [(o["taskId"], o["stage"], o["order"]) for o in result.data] == [
            (t3["id"], "In Progress", 0),
            (t2["id"], "Done", 0),
            (t1["id"], "Done", 1),
        ]
        assert all(o["status"] == "updated" for o in result.data)

    def test_snapshots_reflect_each_step(self, task_service, project, add_tasks):
        t1, t2 = add_tasks("Design API", "Write docs")

        result = task_service.reassign_tasks(project["id"], {"Done": [t1["id"], t2["id"]]})

        first_snapshot, second_snapshot = (o["project"] for o in result.data)
        stages_after_first = {t["id"]: t["stage"] for t in first_snapshot["tasks"]}
        stages_after_second = {t["id"]: t["stage"] for t in second_snapshot["tasks"]}
        assert stages_after_first == {t1["id"]: "Done", t2["id"]: "Requested"}
        assert stages_after_second == {t1["id"]: "Done", t2["id"]: "Done"}

    def test_unknown_task_is_reported_as_skipped(self, task_service, project, add_tasks):
        (t1,) = add_tasks("Design API")
        unknown = str(uuid.uuid4())

        result = task_service.reassign_tasks(project["id"], {"Done": [unknown, t1["id"]]})

        assert result.is_success
        skipped, updated = result.data
        assert (skipped["taskId"], skipped["status"], skipped["project"]) == (
            unknown,
            "skipped",
            None,
        )
        assert updated["status"] == "updated"
        assert stored_task(task_service, project["id"], t1["id"])["order"] == 1

    def test_malformed_ids_are_skipped(self, task_service, project):
        result = task_service.reassign_tasks(project["id"], {"Done": ["not-an-id"]})

        assert result.is_success
        assert result.data[0]["status"] == "skipped"

    def test_unknown_project_skips_everything(self, task_service, project, add_tasks):
        (t1,) = add_tasks("Design API")

        result = task_service.reassign_tasks(str(uuid.uuid4()), {"Done": [t1["id"]]})

        assert result.is_success
        assert [o["status"] for o in result.data] == ["skipped"]
        assert stored_task(task_service, project["id"], t1["id"])["stage"] == "Requested"

    def test_does_not_touch_title_or_index(self, task_service, project, add_tasks):
        (t1,) = add_tasks("Design API")

        task_service.reassign_tasks(project["id"], {"Done": [t1["id"]]})

        stored = stored_task(task_service, project["id"], t1["id"])
        assert (stored["title"], stored["index"]) == ("Design API", 0)

    def test_invalid_groups_are_rejected(self, task_service, project):
        result = task_service.reassign_tasks(project["id"], {"Done": "abc"})
        assert result.error_type == DomainErrorType.VALIDATION_ERROR


class TestConcurrentAppends:
    """Tests for appends racing on one project."""

    def test_indexes_stay_unique_and_contiguous(self, task_service, project_service, project):
        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(
                pool.map(
                    lambda n: task_service.add_task(project["id"], f"Task {n:02d}", "d"),
                    range(40),
                )
            )

        assert all(r.is_success for r in results)
        assert sorted(r.data["index"] for r in results) == list(range(40))
        assert sorted(r.data["order"] for r in results) == list(range(1, 41))
        tasks = project_service.get_project(project["id"]).data["tasks"]
        assert [t["index"] for t in tasks] == list(range(40))
