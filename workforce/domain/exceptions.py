"""Domain exceptions for the workforce task service.

Defines domain-level exceptions that represent business rule violations.
These exceptions are independent of infrastructure concerns. A presentation
layer maps them to transport responses using to_dict() and error_code.
"""

from typing import Any


class WorkforceException(Exception):
    """Base exception for all workforce application errors.

    All custom exceptions should inherit from this class to allow
    consistent error handling and logging.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. field, resource_id).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Return a serializable payload (error, message, details)."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(WorkforceException):
    """Raised when input validation fails (e.g. invalid format or range)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message and optional field name.

        Args:
            message: Description of the validation failure.
            field: Optional field or attribute that failed validation.
        """
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class ResourceNotFoundException(WorkforceException):
    """Raised when a requested resource is not found."""

    def __init__(self, resource_type: str, resource_id: Any) -> None:
        """Initialize with resource type and id.

        Args:
            resource_type: Type of resource (e.g. 'task').
            resource_id: The ID that was not found.
        """
        super().__init__(
            f"{resource_type} not found: {resource_id}",
            "RESOURCE_NOT_FOUND",
            {"resource_type": resource_type, "resource_id": resource_id},
        )


class TaskNotFoundException(ResourceNotFoundException):
    """Raised when a task id does not resolve to a stored task."""

    def __init__(self, task_id: int) -> None:
        super().__init__("task", task_id)


class TransitionValidationException(WorkforceException):
    """Raised when a status change is not allowed by the task lifecycle."""

    def __init__(self, task_id: int | None, from_status: str, to_status: str) -> None:
        """Initialize with the task and the rejected transition.

        Args:
            task_id: Task whose status change was rejected.
            from_status: Current status value.
            to_status: Requested status value.
        """
        super().__init__(
            f"Task status cannot change from {from_status} to {to_status}",
            "TRANSITION_VIOLATION",
            {"task_id": task_id, "from_status": from_status, "to_status": to_status},
        )
