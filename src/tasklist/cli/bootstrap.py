# src/tasklist/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root": it turns settings into a concrete
TaskFile backend and hands it to a fresh TaskSession.
"""

from __future__ import annotations

import logging

from ..config import Settings, get_settings
from ..core.session import TaskSession
from ..tasks.task_file import TaskFile

logger = logging.getLogger(__name__)


def create_session(*, settings: Settings | None = None) -> TaskSession:
    """
    Create an unopened TaskSession from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    backend = TaskFile(settings.tasks_path, strict=settings.strict_load)
    logger.debug("Task file=%s strict=%s", backend.path, settings.strict_load)
    return TaskSession(backend)
