# src/tasklist/core/session.py

"""
One open -> mutate -> close cycle over a TaskStore.

The session owns the store and is handed its persistence backend, so the
data file path never lives in module-level state:
- open() loads; a missing or unreadable file means "no tasks yet"
- close() flushes; save errors propagate to the caller
"""

from __future__ import annotations

import logging
from types import TracebackType

from ..tasks.task_models import Task
from ..tasks.task_store import TaskStore
from .ports import TaskPersistence

logger = logging.getLogger(__name__)


class TaskSession:
    def __init__(self, persistence: TaskPersistence, store: TaskStore | None = None) -> None:
        self.persistence = persistence
        self.store = store if store is not None else TaskStore()
        self._opened = False
        self._closed = False

    @property
    def is_open(self) -> bool:
        return self._opened and not self._closed

    # ---- lifecycle ----

    def open(self) -> TaskSession:
        if self._opened:
            raise RuntimeError("TaskSession is already open")
        self._opened = True

        loaded = 0
        try:
            for task in self.persistence.iter_tasks():
                self.store.restore_task(task)
                loaded += 1
        except (OSError, UnicodeDecodeError) as e:
            # Keep what was read so far; an unreadable file is not fatal.
            logger.warning("Failed to load tasks (kept %d): %s", loaded, e)

        logger.debug("Session opened with %d tasks", loaded)
        return self

    def close(self) -> None:
        """Save the store. Raises whatever the backend raises (OSError for files)."""
        if self._closed:
            return
        if not self._opened:
            raise RuntimeError("TaskSession was never opened")
        self._closed = True
        self.persistence.save(self.store.list_tasks())
        logger.debug("Session closed tasks=%d", self.store.count_tasks())

    def __enter__(self) -> TaskSession:
        return self.open()

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        # Do not persist a half-applied command.
        if exc_type is None:
            self.close()

    # ---- operations ----

    def _require_open(self) -> None:
        if not self.is_open:
            raise RuntimeError("TaskSession is not open")

    def add(self, description: str) -> Task:
        self._require_open()
        return self.store.add_task(description)

    def complete(self, task_id: int) -> Task:
        """Raises TaskNotFoundError when no task has this id."""
        self._require_open()
        return self.store.complete_task(task_id)

    def list_tasks(self) -> list[Task]:
        self._require_open()
        return self.store.list_tasks()

    def render_tasks(self) -> list[str]:
        self._require_open()
        return self.store.render_tasks()
