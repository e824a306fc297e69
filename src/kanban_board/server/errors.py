"""
HTTP error mapping.

Translates failed domain results into ``{"error": true, "message": ...}``
responses. Unexpected failures are logged with sensitive values redacted and
answered with a generic message.
"""

import logging
import re
from typing import Any, Dict

from fastapi.responses import JSONResponse

from kanban_board.domain.entities.result_types import DomainErrorType, DomainResult

logger = logging.getLogger(__name__)

SERVER_ERROR_MESSAGE = "Server error"
DUPLICATE_TITLE_MESSAGE = "Title must be unique"

STATUS_BY_ERROR_TYPE = {
    DomainErrorType.VALIDATION_ERROR: 422,
    DomainErrorType.ALREADY_EXISTS: 422,
    DomainErrorType.NOT_FOUND: 404,
    DomainErrorType.INVALID_ID: 404,
    DomainErrorType.OPERATION_FAILED: 500,
}

# Regex patterns for sensitive data in log output
REDACTIONS = (
    (r"(sqlite|postgresql|postgres|mysql|mongodb)(\+\w+)?://[^\s\"']+", "[REDACTED_DB_URL]"),
    (r"(password|secret|token|api[_-]?key)[=:]\s*['\"]?[^\s\"']+['\"]?", "[REDACTED_CREDENTIAL]"),
    (r"/[\w\-.]+(/[\w\-.]+)+", "[REDACTED_PATH]"),
)


def sanitize_error_message(message: str) -> str:
    """Remove database URLs, credentials and file paths from a message."""
    sanitized = message
    for pattern, replacement in REDACTIONS:
        sanitized = re.sub(pattern, replacement, sanitized, flags=re.IGNORECASE)
    return sanitized


def error_body(message: str) -> Dict[str, Any]:
    """Build the JSON body shared by all error responses."""
    return {"error": True, "message": message}


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=error_body(message))


def failure_message(result: DomainResult[Any]) -> str:
    """Client-facing message for a failed result."""
    error_type = result.error_type
    if error_type in (DomainErrorType.NOT_FOUND, DomainErrorType.INVALID_ID):
        return f"{result.error_details.get('resource', 'Resource')} not found"
    if error_type == DomainErrorType.ALREADY_EXISTS:
        return DUPLICATE_TITLE_MESSAGE
    if error_type == DomainErrorType.VALIDATION_ERROR:
        return result.error_message or "Invalid request"
    return SERVER_ERROR_MESSAGE


def result_response(result: DomainResult[Any]) -> JSONResponse:
    """
    Convert a domain result into an HTTP response.

    Args:
        result: Outcome of a service call.

    Returns:
        200 with the result data, or the mapped error status and body.
    """
    if result.is_success:
        return JSONResponse(content=result.data)

    status_code = STATUS_BY_ERROR_TYPE.get(result.error_type, 500)  # type: ignore[arg-type]
    if status_code >= 500:
        logger.error(
            "Request failed: %s", sanitize_error_message(result.error_message or "unknown error")
        )
    return error_response(status_code, failure_message(result))
