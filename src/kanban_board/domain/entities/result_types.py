"""
Domain Result Types - Pure Business Logic Results.

These types represent the outcome of domain operations without any
infrastructure or presentation concerns.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Generic, List, Optional, TypeVar


class DomainErrorType(Enum):
    """Types of domain errors."""

    VALIDATION_ERROR = "validation_error"
    NOT_FOUND = "not_found"
    INVALID_ID = "invalid_id"
    ALREADY_EXISTS = "already_exists"
    OPERATION_FAILED = "operation_failed"


T = TypeVar("T")


@dataclass
class DomainResult(Generic[T]):
    """
    Base result type for domain operations.

    Represents either success with data or failure with error information.
    This is a pure domain type with no infrastructure dependencies.
    """

    success: bool
    data: Optional[T] = None
    error_type: Optional[DomainErrorType] = None
    error_message: Optional[str] = None
    error_details: Dict[str, Any] = field(default_factory=dict)
    suggestions: List[str] = field(default_factory=list)

    @property
    def is_success(self) -> bool:
        """Check if result is successful."""
        return self.success

    @property
    def is_failure(self) -> bool:
        """Check if result is a failure."""
        return not self.success


@dataclass
class DomainSuccess(Generic[T]):
    """
    Factory for creating successful domain results.

    Usage:
        result = DomainSuccess.create(data=project)
    """

    @staticmethod
    def create(
        data: Optional[T] = None, suggestions: Optional[List[str]] = None
    ) -> DomainResult[T]:
        """Create a successful domain result."""
        return DomainResult(success=True, data=data, suggestions=suggestions or [])


@dataclass
class DomainError:
    """
    Factory for creating failed domain results.

    Usage:
        result = DomainError.validation_error("Invalid input", details={"field": "title"})
    """

    @staticmethod
    def create(
        error_type: DomainErrorType,
        message: str,
        details: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
    ) -> DomainResult[Any]:
        """Create a failed domain result."""
        return DomainResult(
            success=False,
            error_type=error_type,
            error_message=message,
            error_details=details or {},
            suggestions=suggestions or [],
        )

    @staticmethod
    def validation_error(
        message: str,
        details: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
    ) -> DomainResult[Any]:
        """Create a validation error result."""
        return DomainError.create(
            DomainErrorType.VALIDATION_ERROR,
            message,
            details,
            suggestions or ["Check input format and try again"],
        )

    @staticmethod
    def not_found(
        resource: str, resource_id: str, suggestions: Optional[List[str]] = None
    ) -> DomainResult[Any]:
        """Create a not found error result."""
        return DomainError.create(
            DomainErrorType.NOT_FOUND,
            f"{resource} '{resource_id}' not found",
            {"resource": resource, "id": resource_id},
            suggestions or [f"Verify the {resource.lower()} ID and try again"],
        )

    @staticmethod
    def invalid_id(resource: str, resource_id: str) -> DomainResult[Any]:
        """Create an invalid identifier error result.

        Malformed identifiers can never match a stored record, so callers at
        the HTTP boundary treat this the same as not found.
        """
        return DomainError.create(
            DomainErrorType.INVALID_ID,
            f"'{resource_id}' is not a valid {resource.lower()} ID",
            {"resource": resource, "id": resource_id},
            ["Identifiers are UUID strings"],
        )

    @staticmethod
    def already_exists(
        resource: str, identifier: str, suggestions: Optional[List[str]] = None
    ) -> DomainResult[Any]:
        """Create an already exists error result."""
        return DomainError.create(
            DomainErrorType.ALREADY_EXISTS,
            f"{resource} '{identifier}' already exists",
            {"resource": resource, "identifier": identifier},
            suggestions or [f"Use a different {resource.lower()} title"],
        )

    @staticmethod
    def operation_failed(
        operation: str,
        reason: str,
        details: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
    ) -> DomainResult[Any]:
        """Create an operation failed error result."""
        return DomainError.create(
            DomainErrorType.OPERATION_FAILED,
            f"Operation '{operation}' failed: {reason}",
            {**(details or {}), "operation": operation},
            suggestions,
        )
