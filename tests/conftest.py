# tests/conftest.py

from __future__ import annotations

import logging
from pathlib import Path
from types import SimpleNamespace

import pytest

from tasklist.core.session import TaskSession
from tasklist.tasks.task_models import Task

from .fakes import FakeTaskPersistence


@pytest.fixture(autouse=True)
def _restore_root_logging():
    """main() reconfigures the root logger; undo it so tests stay independent."""
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    yield
    for h in list(root.handlers):
        if h not in saved_handlers:
            root.removeHandler(h)
            h.close()
    for h in saved_handlers:
        if h not in root.handlers:
            root.addHandler(h)
    root.setLevel(saved_level)
    logging.captureWarnings(False)


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with bootstrap and main.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the developer's environment.
    """
    return SimpleNamespace(
        app_name="tasklist-test",
        log_level="WARNING",
        log_to_file=False,
        tasks_path=tmp_path / "tasks.txt",
        strict_load=False,
        data_dir=tmp_path / "data",
    )


@pytest.fixture()
def persistence() -> FakeTaskPersistence:
    return FakeTaskPersistence(
        [
            Task(id=1, description="Buy milk", completed=True),
            Task(id=2, description="Write report", completed=False),
        ]
    )


@pytest.fixture()
def session(persistence: FakeTaskPersistence) -> TaskSession:
    """Opened session over two tasks (first complete, second open)."""
    return TaskSession(persistence).open()
