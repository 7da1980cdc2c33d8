"""
Standard Exception Hierarchy for task-tracker

All exceptions inherit from ServiceError. The core raises them; the CLI is
the only place they are caught, where to_exit_code() maps each kind to the
process exit status.
"""
from typing import Any


# ============================================================================
# Base Exception Class
# ============================================================================

class ServiceError(Exception):
    """Base exception for all task-tracker errors.

    Attributes:
        message: Human-readable error message
        context: Dictionary of additional context
        original_error: Optional original exception that caused this error
    """

    def __init__(
        self,
        message: str,
        *,
        context: dict[str, Any] | None = None,
        original_error: Exception | None = None
    ):
        super().__init__(message)
        self.message = message
        self.context = context or {}
        self.original_error = original_error

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for serialization.

        Returns:
            Dictionary representation of the exception
        """
        result = {
            "error_type": self.__class__.__name__,
            "message": self.message,
        }
        if self.context:
            result["context"] = self.context
        if self.original_error:
            result["original_error"] = {
                "type": type(self.original_error).__name__,
                "message": str(self.original_error)
            }
        return result


# ============================================================================
# Common Exception Types
# ============================================================================

class ValidationError(ServiceError):
    """Raised when command input fails validation.

    Attributes:
        field: Optional field name that failed validation
        value: Optional value that failed validation
    """

    def __init__(
        self,
        message: str,
        *,
        field: str | None = None,
        value: Any = None,
        context: dict[str, Any] | None = None
    ):
        super().__init__(message, context=context)
        self.field = field
        self.value = value
        if field is not None:
            self.context.setdefault("field", field)
        if value is not None:
            self.context.setdefault("value", str(value))


class NotFoundError(ServiceError):
    """Raised when a requested resource is not found.

    Attributes:
        resource_type: Type of resource (e.g., "Task")
        resource_id: ID of the resource that was not found
    """

    def __init__(
        self,
        resource_type: str,
        resource_id: str | int,
        *,
        message: str | None = None,
        context: dict[str, Any] | None = None
    ):
        if message is None:
            message = f"{resource_type} with ID '{resource_id}' not found"

        super().__init__(message, context=context)
        self.resource_type = resource_type
        self.resource_id = str(resource_id)
        self.context.setdefault("resource_type", resource_type)
        self.context.setdefault("resource_id", str(resource_id))


class CorruptDataError(ServiceError):
    """Raised when the task document exists but cannot be parsed or validated.

    Attributes:
        path: Path of the offending document
    """

    def __init__(
        self,
        message: str,
        *,
        path: str | None = None,
        original_error: Exception | None = None,
        context: dict[str, Any] | None = None
    ):
        super().__init__(message, context=context, original_error=original_error)
        self.path = path
        if path is not None:
            self.context.setdefault("path", path)


class StorageError(ServiceError):
    """Raised when the task document could not be read from or written to disk.

    Attributes:
        path: Path of the document
    """

    def __init__(
        self,
        message: str,
        *,
        path: str | None = None,
        original_error: Exception | None = None,
        context: dict[str, Any] | None = None
    ):
        super().__init__(message, context=context, original_error=original_error)
        self.path = path
        if path is not None:
            self.context.setdefault("path", path)


# ============================================================================
# Service-Specific Exceptions
# ============================================================================

class TaskNotFoundError(NotFoundError):
    """Raised when a task is not found."""

    def __init__(self, task_id: str | int, **kwargs):
        super().__init__("Task", task_id, **kwargs)
        self.task_id = task_id  # Convenience attribute


# ============================================================================
# Helper Functions for CLI Integration
# ============================================================================

def to_exit_code(exc: ServiceError, *, default_exit_code: int = 1) -> int:
    """Map a ServiceError to a process exit code.

    Args:
        exc: Service error to convert
        default_exit_code: Exit code if no mapping matches

    Returns:
        Non-zero exit code for the error kind
    """
    exit_code_map = {
        ValidationError: 2,
        NotFoundError: 3,
        CorruptDataError: 4,
    }

    for exc_type, exit_code in exit_code_map.items():
        if isinstance(exc, exc_type):
            return exit_code
    return default_exit_code


# ============================================================================
# Exports
# ============================================================================

__all__ = [
    "ServiceError",
    "ValidationError",
    "NotFoundError",
    "CorruptDataError",
    "StorageError",
    "TaskNotFoundError",
    "to_exit_code",
]
