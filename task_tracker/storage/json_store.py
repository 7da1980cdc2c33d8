"""
JSON file store for the task document.

The whole collection is read and written as one document. Writes go to a
temporary file in the target directory which replaces the document only
once it is fully written, so an interrupted save never leaves a truncated
document behind.
"""
import contextlib
import json
import logging
import os
import tempfile
from pathlib import Path
from typing import IO, Iterator, Union

from pydantic import ValidationError as PydanticValidationError

from task_tracker.exceptions import CorruptDataError, StorageError
from task_tracker.models import TaskCollection

logger = logging.getLogger(__name__)


@contextlib.contextmanager
def atomic_write(path: Path) -> Iterator[IO[str]]:
    """
    Open a temporary file next to `path` for writing.

    On a clean exit the temporary file is flushed, synced and moved over
    `path`. On any exception it is removed and `path` is left untouched.
    """
    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            yield f
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp_name, path)
    except BaseException:
        with contextlib.suppress(FileNotFoundError):
            os.unlink(tmp_name)
        raise


class TaskStore:
    """Loads and saves the task collection at a single path."""

    def __init__(self, path: Union[str, Path]):
        """
        Initialize the store.

        Args:
            path: Location of the task document. Nothing is created until
                the first save.
        """
        self.path = Path(path)

    def exists(self) -> bool:
        return self.path.exists()

    def load(self) -> TaskCollection:
        """
        Load the task collection.

        Returns:
            The parsed collection, or an empty one if no document exists yet

        Raises:
            CorruptDataError: If the document cannot be parsed or validated
            StorageError: If the document exists but cannot be read
        """
        if not self.path.exists():
            logger.debug(f"No task document at {self.path}, starting empty")
            return TaskCollection()

        try:
            raw = self.path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise CorruptDataError(
                f"Task file {self.path} is not valid UTF-8",
                path=str(self.path),
                original_error=e,
            ) from e
        except OSError as e:
            raise StorageError(
                f"Could not read task file {self.path}: {e.strerror or e}",
                path=str(self.path),
                original_error=e,
            ) from e

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise CorruptDataError(
                f"Task file {self.path} is not valid JSON: {e.msg} (line {e.lineno})",
                path=str(self.path),
                original_error=e,
            ) from e

        if not isinstance(data, dict):
            raise CorruptDataError(
                f"Task file {self.path} must contain a JSON object, got {type(data).__name__}",
                path=str(self.path),
            )

        try:
            collection = TaskCollection.model_validate(data)
        except PydanticValidationError as e:
            raise CorruptDataError(
                f"Task file {self.path} does not match the task schema "
                f"({e.error_count()} error(s))",
                path=str(self.path),
                original_error=e,
            ) from e

        logger.debug(f"Loaded {len(collection.tasks)} task(s) from {self.path}")
        return collection

    def save(self, collection: TaskCollection) -> None:
        """
        Replace the task document with `collection`.

        Raises:
            StorageError: If the document could not be written; the
                previous document is left intact
        """
        payload = json.dumps(collection.model_dump(mode="json"), indent=2, ensure_ascii=False) + "\n"

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with atomic_write(self.path) as f:
                f.write(payload)
        except OSError as e:
            raise StorageError(
                f"Could not write task file {self.path}: {e.strerror or e}",
                path=str(self.path),
                original_error=e,
            ) from e

        logger.debug(f"Saved {len(collection.tasks)} task(s) to {self.path}")
