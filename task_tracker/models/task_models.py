"""
Task models.

Tasks are persisted as a single JSON document:

    {"next_id": 3, "tasks": [{"id": 1, "description": "...", "status": "todo",
      "created_at": "2026-10-17T09:00:00", "updated_at": null}, ...]}

Timestamps are local naive datetimes with whole-second precision, written
in TIMESTAMP_FORMAT so that documents round-trip exactly.
"""
from __future__ import annotations

from datetime import datetime
from enum import StrEnum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator, model_validator

TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%S"


def now_local() -> datetime:
    """Current local time truncated to whole seconds."""
    return datetime.now().replace(microsecond=0)


def parse_timestamp(value: Any) -> Any:
    """Accept TIMESTAMP_FORMAT strings or naive datetimes; None passes through."""
    if value is None:
        return None
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            raise ValueError("timestamps must not carry a timezone")
        return value.replace(microsecond=0)
    if isinstance(value, str):
        return datetime.strptime(value, TIMESTAMP_FORMAT)
    raise ValueError(f"timestamp must be a string in {TIMESTAMP_FORMAT} format")


def format_timestamp(value: Optional[datetime]) -> Optional[str]:
    if value is None:
        return None
    return value.strftime(TIMESTAMP_FORMAT)


class TaskStatus(StrEnum):
    """Task lifecycle status. Any status may follow any other."""

    TODO = "todo"
    IN_PROGRESS = "in-progress"
    DONE = "done"

    @classmethod
    def choices(cls) -> list[str]:
        return [status.value for status in cls]


class Task(BaseModel):
    """A single tracked unit of work."""

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    id: int = Field(gt=0, strict=True)
    description: str
    status: TaskStatus = TaskStatus.TODO
    created_at: datetime
    updated_at: Optional[datetime] = None

    @field_validator("description")
    @classmethod
    def description_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("description must not be empty")
        return v

    @field_validator("created_at", "updated_at", mode="before")
    @classmethod
    def parse_timestamps(cls, v: Any) -> Any:
        return parse_timestamp(v)

    @model_validator(mode="after")
    def updated_not_before_created(self) -> Task:
        if self.updated_at is not None and self.updated_at < self.created_at:
            raise ValueError("updated_at is earlier than created_at")
        return self

    @field_serializer("created_at", "updated_at")
    def serialize_timestamps(self, value: Optional[datetime]) -> Optional[str]:
        return format_timestamp(value)

    def touch(self, now: datetime) -> None:
        """Record a mutation at `now` (never earlier than created_at)."""
        self.updated_at = max(now.replace(microsecond=0), self.created_at)


class TaskCollection(BaseModel):
    """The persisted task document.

    next_id is the id the next created task receives. It only ever grows,
    so ids of deleted tasks are never handed out again.
    """

    model_config = ConfigDict(extra="forbid")

    next_id: Optional[int] = Field(default=None, gt=0, strict=True)
    tasks: list[Task] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_ids(self) -> TaskCollection:
        ids = [task.id for task in self.tasks]
        if len(ids) != len(set(ids)):
            raise ValueError("duplicate task ids")
        highest = max(ids, default=0)
        if self.next_id is None:
            self.next_id = highest + 1
        elif self.next_id <= highest:
            raise ValueError(f"next_id {self.next_id} must be greater than highest task id {highest}")
        return self

    def find(self, task_id: int) -> Optional[Task]:
        for task in self.tasks:
            if task.id == task_id:
                return task
        return None
