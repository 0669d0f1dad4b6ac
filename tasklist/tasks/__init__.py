"""Task entity and in-memory task store."""

from .models import Task
from .store import TaskStore

__all__ = [
    "Task",
    "TaskStore",
]
