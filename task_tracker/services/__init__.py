"""
Service layer for business logic.
Services contain pure business logic without CLI framework dependencies.
"""

from task_tracker.services.task_registry import TaskRegistry

__all__ = ["TaskRegistry"]
