# src/tasklist/tasks/task_store.py

from __future__ import annotations

import logging
from collections.abc import Iterator

from .task_models import Task

logger = logging.getLogger(__name__)


class TaskNotFoundError(LookupError):
    """No task in the store has the requested id."""

    def __init__(self, task_id: int) -> None:
        super().__init__("Task not found")
        self.task_id = task_id


class TaskStore:
    """
    In-memory ordered task list.

    Insertion order is display order. Ids handed out by add_task are positional
    (count + 1); there is no delete, so they stay unique within one file.
    """

    def __init__(self) -> None:
        self._tasks: list[Task] = []

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    # ---- public API ----

    def count_tasks(self) -> int:
        return len(self._tasks)

    def add_task(self, description: str) -> Task:
        task = Task(id=len(self._tasks) + 1, description=description)
        self._tasks.append(task)
        logger.debug("Task added id=%s", task.id)
        return task

    def restore_task(self, task: Task) -> None:
        """Append a task read back from storage, keeping its id and flag."""
        self._tasks.append(task)

    def get_task(self, task_id: int) -> Task | None:
        for task in self._tasks:
            if task.id == task_id:
                return task
        return None

    def complete_task(self, task_id: int) -> Task:
        """
        Mark the first task with this id as completed.

        Completing an already completed task is not an error.
        Raises TaskNotFoundError if no task matches.
        """
        task = self.get_task(task_id)
        if task is None:
            raise TaskNotFoundError(task_id)
        task.complete()
        logger.debug("Task completed id=%s", task_id)
        return task

    def list_tasks(self) -> list[Task]:
        return list(self._tasks)

    def render_tasks(self) -> list[str]:
        return [str(t) for t in self._tasks]
