"""Task storage using a single JSON file for persistence."""

import json
import logging
from pathlib import Path
from typing import List, Optional, Sequence

from pydantic import TypeAdapter, ValidationError

from tasklist.tasks.models import Task
from .errors import (
    TaskStorageError,
    TaskEncodingError,
    TaskDecodingError,
    TaskWriteError,
)

logger = logging.getLogger(__name__)

TASKS_FILENAME = "tasks.json"

_task_list_adapter = TypeAdapter(List[Task])


class TaskStorage:
    """Reads and writes the whole task list as one JSON array.

    Features:
    - ISO-8601 dates, ``isCompleted`` key as stored by earlier releases
    - Write to a temp file, then rename over ``tasks.json``
    - Failures are logged and reported through return values, never raised
    """

    def __init__(self, storage_dir: str = "./data"):
        """Initialize task storage.

        Args:
            storage_dir: Directory holding ``tasks.json``. Created on first save.
        """
        self.storage_dir = Path(storage_dir).expanduser()
        self.last_error: Optional[TaskStorageError] = None

    @property
    def file_path(self) -> Path:
        return self.storage_dir / TASKS_FILENAME

    def exists(self) -> bool:
        return self.file_path.exists()

    # ---- low-level helpers ----

    @staticmethod
    def _encode(tasks: Sequence[Task]) -> str:
        try:
            return json.dumps([task.to_json_dict() for task in tasks], indent=2, ensure_ascii=False)
        except (TypeError, ValueError) as e:
            raise TaskEncodingError(f"Could not encode tasks: {e}") from e

    @staticmethod
    def _decode(raw: str) -> List[Task]:
        try:
            return _task_list_adapter.validate_json(raw)
        except ValidationError as e:
            raise TaskDecodingError(f"Invalid task file: {e.error_count()} error(s), first: {e.errors()[0]['msg']}") from e

    def _write(self, payload: str) -> None:
        temp_file = self.file_path.with_suffix(".tmp")
        try:
            self.storage_dir.mkdir(parents=True, exist_ok=True)
            with open(temp_file, "w", encoding="utf-8") as f:
                f.write(payload)
            temp_file.replace(self.file_path)
        except OSError as e:
            raise TaskWriteError(f"Could not write {self.file_path}: {e}") from e

    def _read(self) -> str:
        try:
            with open(self.file_path, "r", encoding="utf-8") as f:
                return f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise TaskDecodingError(f"Could not read {self.file_path}: {e}") from e

    # ---- public API ----

    def save(self, tasks: Sequence[Task]) -> bool:
        """Overwrite the task file with the given tasks.

        Args:
            tasks: Full task list in display order

        Returns:
            True if successful. On failure the error is logged and kept in
            ``last_error``; the caller's in-memory tasks are left untouched.
        """
        try:
            self._write(self._encode(tasks))
        except TaskStorageError as e:
            self.last_error = e
            logger.error(f"Failed to save tasks: {e}")
            return False

        self.last_error = None
        logger.info(f"Saved {len(tasks)} tasks to {self.file_path}")
        return True

    def load(self) -> Optional[List[Task]]:
        """Load the task list.

        Returns:
            The stored tasks, an empty list when no file exists yet, or None
            when the file could not be read or decoded.
        """
        if not self.exists():
            self.last_error = None
            logger.info(f"Task file {self.file_path} not found, starting empty")
            return []

        try:
            tasks = self._decode(self._read())
        except TaskStorageError as e:
            self.last_error = e
            logger.error(f"Failed to load tasks: {e}")
            return None

        self.last_error = None
        logger.info(f"Loaded {len(tasks)} tasks from {self.file_path}")
        return tasks
