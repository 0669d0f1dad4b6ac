"""Errors raised while reading or writing the task file."""


class TaskStorageError(Exception):
    """Base class for task persistence failures."""


class TaskEncodingError(TaskStorageError):
    """Tasks could not be serialized to JSON."""


class TaskDecodingError(TaskStorageError):
    """The task file could not be read back into tasks."""


class TaskWriteError(TaskStorageError):
    """The task file could not be written."""
