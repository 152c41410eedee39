# src/tasklist/core/ports.py

"""
Ports (interfaces) used by the core.

The session depends on a Protocol instead of the concrete file backend,
so tests can swap in an in-memory implementation.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Protocol

from ..tasks.task_models import Task


class TaskPersistence(Protocol):
    """Durable round-trip of an ordered task list."""

    def iter_tasks(self) -> Iterator[Task]: ...
    def save(self, tasks: Iterable[Task]) -> None: ...
