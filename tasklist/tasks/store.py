"""In-memory ordered task collection."""

import logging
from datetime import datetime
from typing import Iterable, Iterator, List, Optional

from .models import Task

logger = logging.getLogger(__name__)


class TaskStore:
    """Ordered sequence of tasks for the current session.

    Order is insertion order. Deletion and editing address tasks by their
    position in that order, not by id.
    """

    def __init__(self, tasks: Optional[Iterable[Task]] = None):
        self._tasks: List[Task] = list(tasks) if tasks else []

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(list(self._tasks))

    def __getitem__(self, offset: int) -> Task:
        return self._tasks[offset]

    def all(self) -> List[Task]:
        """Return a copy of the tasks in insertion order."""
        return list(self._tasks)

    def replace(self, tasks: Iterable[Task]) -> None:
        """Replace the whole collection, e.g. after loading from disk."""
        self._tasks = list(tasks)
        logger.debug(f"Store replaced with {len(self._tasks)} tasks")

    def add(self, name: str, description: str, date: datetime) -> Task:
        """Create a task from the given fields and append it."""
        task = Task(name=name, description=description, date=date)
        self._tasks.append(task)
        logger.debug(f"Added task {task.id} at position {len(self._tasks) - 1}")
        return task

    def delete_at(self, offsets: Iterable[int]) -> List[Task]:
        """Remove the tasks at the given positions.

        Offsets outside ``0 <= offset < len(self)`` are ignored. Returns the
        removed tasks in display order.
        """
        wanted = {o for o in offsets if 0 <= o < len(self._tasks)}
        if not wanted:
            return []

        removed = [t for i, t in enumerate(self._tasks) if i in wanted]
        self._tasks = [t for i, t in enumerate(self._tasks) if i not in wanted]
        logger.debug(f"Deleted {len(removed)} tasks at offsets {sorted(wanted)}")
        return removed

    def edit_at(self, offset: int, *,
                name: Optional[str] = None,
                description: Optional[str] = None,
                date: Optional[datetime] = None) -> Optional[Task]:
        """Update fields of the task at ``offset`` in place.

        Returns the updated task, or None when the offset is out of range.
        The task id and completion flag are kept.
        """
        if not 0 <= offset < len(self._tasks):
            return None

        changes = {}
        if name is not None:
            changes["name"] = name
        if description is not None:
            changes["description"] = description
        if date is not None:
            changes["date"] = date

        current = self._tasks[offset]
        # Revalidate so naive dates get normalized like on creation
        updated = Task.model_validate({**current.model_dump(), **changes})
        self._tasks[offset] = updated
        return updated
