"""
Payload Validator - Shape and length checks for incoming payloads.

Runs before any repository call so that malformed input never reaches the
database. Messages name the offending field the same way across
endpoints, e.g. ``"title" length must be at least 3 characters long``.
"""

from typing import Any, Dict, List, Mapping, Sequence

from kanban_board.domain.entities.result_types import (
    DomainError,
    DomainResult,
    DomainSuccess,
)

TITLE_MIN_LENGTH = 3
TITLE_MAX_LENGTH = 30


class PayloadValidator:
    """
    Validates project and task payloads.

    Both projects and tasks carry a ``title`` (3-30 characters) and a
    required, non-empty ``description``. Tasks may also carry
    ``attachments``.
    """

    def __init__(self, payload: Mapping[str, Any]):
        """
        Initialize validator with the payload to check.

        Args:
            payload: Field name to value mapping.
        """
        self.payload = payload

    def _required_string(self, field: str) -> List[str]:
        if field not in self.payload or self.payload[field] is None:
            return [f'"{field}" is required']
        if not isinstance(self.payload[field], str):
            return [f'"{field}" must be a string']
        if not self.payload[field]:
            return [f'"{field}" is not allowed to be empty']
        return []

    def validate_title(self) -> List[str]:
        """
        Validate presence and length of the title.

        Returns:
            List of error messages.
        """
        errors = self._required_string("title")
        if errors:
            return errors

        length = len(self.payload["title"])
        if length < TITLE_MIN_LENGTH:
            errors.append(f'"title" length must be at least {TITLE_MIN_LENGTH} characters long')
        elif length > TITLE_MAX_LENGTH:
            errors.append(
                f'"title" length must be less than or equal to {TITLE_MAX_LENGTH} characters long'
            )
        return errors

    def validate_description(self) -> List[str]:
        """
        Validate presence of the description.

        Returns:
            List of error messages.
        """
        return self._required_string("description")

    def validate_attachments(self) -> List[str]:
        """
        Validate the optional attachment list.

        Returns:
            List of error messages.
        """
        attachments = self.payload.get("attachments")
        if attachments is None:
            return []
        if not isinstance(attachments, Sequence) or isinstance(attachments, str):
            return ['"attachments" must be an array']

        errors = []
        for i, attachment in enumerate(attachments):
            if not isinstance(attachment, Mapping):
                errors.append(f'"attachments[{i}]" must be an object')
                continue
            for key in ("kind", "url"):
                if not isinstance(attachment.get(key), str) or not attachment.get(key):
                    errors.append(f'"attachments[{i}].{key}" is required')
        return errors

    def validate(self) -> DomainResult[Dict[str, Any]]:
        """
        Run all validations.

        Returns:
            DomainResult with the validated payload, or a validation error
            whose message is the first problem found.
        """
        errors = self.validate_title() + self.validate_description() + self.validate_attachments()
        if errors:
            return DomainError.validation_error(errors[0], details={"errors": errors})
        return DomainSuccess.create(data=dict(self.payload))


def validate_stage_groups(stage_groups: Mapping[str, Any]) -> DomainResult[Dict[str, List[str]]]:
    """
    Validate a board reassignment request.

    Args:
        stage_groups: Stage label to ordered list of task ids.

    Returns:
        DomainResult with the groups as plain lists, or a validation error.
    """
    if not isinstance(stage_groups, Mapping):
        return DomainError.validation_error('"stages" must be an object')

    normalized: Dict[str, List[str]] = {}
    for stage, task_ids in stage_groups.items():
        if not isinstance(stage, str) or not stage:
            return DomainError.validation_error("Stage labels must be non-empty strings")
        if isinstance(task_ids, str) or not isinstance(task_ids, Sequence):
            return DomainError.validation_error(f'"{stage}" must be an array of task ids')
        for position, task_id in enumerate(task_ids):
            if not isinstance(task_id, str) or not task_id:
                return DomainError.validation_error(f'"{stage}[{position}]" must be a task id')
        normalized[stage] = list(task_ids)

    return DomainSuccess.create(data=normalized)
