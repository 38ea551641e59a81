"""
In-memory task repository.
Keeps tasks in a list for the lifetime of the process.
"""

import threading
from typing import List

from core.logger import logger
from domain.entities import Task
from repositories.interfaces import ITaskRepository


class InMemoryTaskRepository(ITaskRepository):
    """Repository storing tasks in insertion order in process memory."""

    def __init__(self):
        """Initialize an empty repository."""
        self._tasks: List[Task] = []
        self._lock = threading.Lock()
        logger.debug("InMemoryTaskRepository initialized")

    def add_task(self, task: Task) -> None:
        """
        Append a task to the collection.

        Args:
            task: Task to store. Stored as given, duplicates included.
        """
        with self._lock:
            self._tasks.append(task)
            total = len(self._tasks)
        logger.debug(f"Task stored: description={task.description!r}, total={total}")

    def get_all_tasks(self) -> List[Task]:
        """
        Get all tasks in insertion order.

        Returns a new list on every call, so callers can reorder or trim it
        without touching the repository. The Task objects are shared.

        Returns:
            List[Task]: Stored tasks
        """
        with self._lock:
            return list(self._tasks)

    def __len__(self) -> int:
        with self._lock:
            return len(self._tasks)
