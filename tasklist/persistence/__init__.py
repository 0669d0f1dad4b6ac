"""Persistence of the task list to local JSON storage."""

from .task_storage import TaskStorage, TASKS_FILENAME
from .errors import (
    TaskStorageError,
    TaskEncodingError,
    TaskDecodingError,
    TaskWriteError,
)

__all__ = [
    "TaskStorage",
    "TASKS_FILENAME",
    "TaskStorageError",
    "TaskEncodingError",
    "TaskDecodingError",
    "TaskWriteError",
]
