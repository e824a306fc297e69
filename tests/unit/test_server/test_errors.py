"""Tests for HTTP error mapping."""

import json

from kanban_board.domain.entities.result_types import DomainError, DomainSuccess
from kanban_board.server.errors import (
    error_body,
    failure_message,
    result_response,
    sanitize_error_message,
)


def body_of(response):
    return json.loads(response.body)


class TestSanitizeErrorMessage:
    def test_redacts_database_url(self):
        message = sanitize_error_message("could not open sqlite:///var/db/board.db")
        assert "board.db" not in message
        assert "[REDACTED_DB_URL]" in message

    def test_redacts_credentials(self):
        message = sanitize_error_message("login failed password=hunter2")
        assert "hunter2" not in message

    def test_redacts_paths(self):
        assert sanitize_error_message("missing /srv/app/data") == "missing [REDACTED_PATH]"

    def test_leaves_plain_text(self):
        assert sanitize_error_message("Task not found") == "Task not found"


class TestResultResponse:
    def test_success_returns_data(self):
        response = result_response(DomainSuccess.create(data={"id": "p1"}))

        assert response.status_code == 200
        assert body_of(response) == {"id": "p1"}

    def test_not_found_names_resource(self):
        response = result_response(DomainError.not_found("Project", "p1"))

        assert response.status_code == 404
        assert body_of(response) == {"error": True, "message": "Project not found"}

    def test_invalid_id_is_not_found(self):
        response = result_response(DomainError.invalid_id("Project", "abc"))

        assert response.status_code == 404
        assert body_of(response)["message"] == "Project not found"

    def test_duplicate_title(self):
        response = result_response(DomainError.already_exists("Project", "Sprint 1"))

        assert response.status_code == 422
        assert body_of(response)["message"] == "Title must be unique"

    def test_validation_error_keeps_message(self):
        result = DomainError.validation_error('"title" is required')

        response = result_response(result)

        assert response.status_code == 422
        assert body_of(response) == error_body('"title" is required')

    def test_operation_failure_is_generic(self, caplog):
        result = DomainError.operation_failed("get_project", "sqlite:///tmp/x.db is locked")

        response = result_response(result)

        assert response.status_code == 500
        assert body_of(response)["message"] == "Server error"
        assert "x.db" not in caplog.text
        assert "Operation 'get_project' failed" in caplog.text

    def test_failure_message_defaults(self):
        assert failure_message(DomainError.validation_error("")) == "Invalid request"
