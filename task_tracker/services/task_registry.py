"""
Task registry - business logic for task operations.
This layer contains no CLI framework dependencies.

Every mutating operation validates its input first, applies the change to a
copy of the collection, saves the copy through the store and only then
adopts it. A failed operation therefore leaves both the in-memory
collection and the task document unchanged.
"""
import logging
from datetime import datetime
from typing import Callable, List, Optional, Union

from task_tracker.exceptions import TaskNotFoundError, ValidationError
from task_tracker.models import Task, TaskCollection, TaskStatus, now_local
from task_tracker.storage import TaskStore

logger = logging.getLogger(__name__)


def _clean_description(description: Optional[str]) -> str:
    cleaned = (description or "").strip()
    if not cleaned:
        raise ValidationError("Task description must not be empty", field="description")
    return cleaned


def _parse_status(status: Union[TaskStatus, str]) -> TaskStatus:
    if isinstance(status, TaskStatus):
        return status
    try:
        return TaskStatus(status)
    except ValueError:
        raise ValidationError(
            f"Invalid status '{status}'. Expected one of: {', '.join(TaskStatus.choices())}",
            field="status",
            value=status,
        )


class TaskRegistry:
    """In-memory task collection backed by a TaskStore."""

    def __init__(
        self,
        store: TaskStore,
        collection: Optional[TaskCollection] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        """
        Initialize the registry.

        Args:
            store: Store that receives the collection after each mutation
            collection: Already loaded collection (empty if None)
            clock: Returns the current time; defaults to local time
        """
        self.store = store
        self._collection = collection if collection is not None else TaskCollection()
        self._clock = clock or now_local

    @classmethod
    def from_store(cls, store: TaskStore, clock: Optional[Callable[[], datetime]] = None) -> "TaskRegistry":
        """Build a registry from the store's current contents."""
        return cls(store, store.load(), clock=clock)

    def _commit(self, collection: TaskCollection) -> None:
        self.store.save(collection)
        self._collection = collection

    def _working_copy(self) -> TaskCollection:
        return self._collection.model_copy(deep=True)

    @staticmethod
    def _require(collection: TaskCollection, task_id: int) -> Task:
        task = collection.find(task_id)
        if task is None:
            raise TaskNotFoundError(task_id)
        return task

    def add(self, description: str) -> int:
        """
        Create a task.

        Args:
            description: Task description (surrounding whitespace is trimmed)

        Returns:
            The new task's id

        Raises:
            ValidationError: If description is empty after trimming
        """
        description = _clean_description(description)

        collection = self._working_copy()
        task_id = collection.next_id
        collection.tasks.append(Task(id=task_id, description=description, created_at=self._clock()))
        collection.next_id = task_id + 1
        self._commit(collection)

        logger.info(f"Added task {task_id}")
        return task_id

    def update(self, task_id: int, description: str) -> Task:
        """
        Replace a task's description.

        Raises:
            TaskNotFoundError: If no task has task_id
            ValidationError: If description is empty after trimming
        """
        self._require(self._collection, task_id)
        description = _clean_description(description)

        collection = self._working_copy()
        task = self._require(collection, task_id)
        task.description = description
        task.touch(self._clock())
        self._commit(collection)

        logger.info(f"Updated task {task_id}")
        return task.model_copy()

    def delete(self, task_id: int) -> None:
        """
        Remove a task. Remaining ids are not renumbered.

        Raises:
            TaskNotFoundError: If no task has task_id
        """
        self._require(self._collection, task_id)

        collection = self._working_copy()
        collection.tasks = [task for task in collection.tasks if task.id != task_id]
        self._commit(collection)

        logger.info(f"Deleted task {task_id}")

    def set_status(self, task_id: int, status: Union[TaskStatus, str]) -> Task:
        """
        Set a task's status.

        updated_at is stamped even when the status does not change.

        Raises:
            TaskNotFoundError: If no task has task_id
            ValidationError: If status is not a known status value
        """
        self._require(self._collection, task_id)
        status = _parse_status(status)

        collection = self._working_copy()
        task = self._require(collection, task_id)
        task.status = status
        task.touch(self._clock())
        self._commit(collection)

        logger.info(f"Marked task {task_id} as {status.value}")
        return task.model_copy()

    def get(self, task_id: int) -> Task:
        """
        Get a single task.

        Raises:
            TaskNotFoundError: If no task has task_id
        """
        return self._require(self._collection, task_id).model_copy()

    def list(self, status: Optional[Union[TaskStatus, str]] = None) -> List[Task]:
        """
        List tasks in ascending id order, optionally filtered by status.

        Raises:
            ValidationError: If status is not a known status value
        """
        wanted = _parse_status(status) if status is not None else None
        tasks = sorted(self._collection.tasks, key=lambda task: task.id)
        return [task.model_copy() for task in tasks if wanted is None or task.status == wanted]
