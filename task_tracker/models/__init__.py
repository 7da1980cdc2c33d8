"""
Data models for tasks and the persisted task document.
"""
from task_tracker.models.task_models import (
    TIMESTAMP_FORMAT,
    Task,
    TaskCollection,
    TaskStatus,
    now_local,
)

__all__ = ["TIMESTAMP_FORMAT", "Task", "TaskCollection", "TaskStatus", "now_local"]
