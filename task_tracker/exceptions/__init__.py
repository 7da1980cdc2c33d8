"""
Standard exceptions for the application.
"""
from task_tracker.exceptions.errors import (
    ServiceError,
    ValidationError,
    NotFoundError,
    CorruptDataError,
    StorageError,
    TaskNotFoundError,
    to_exit_code,
)

__all__ = [
    "ServiceError",
    "ValidationError",
    "NotFoundError",
    "CorruptDataError",
    "StorageError",
    "TaskNotFoundError",
    "to_exit_code",
]
