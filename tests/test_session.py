# tests/test_session.py

from __future__ import annotations

import pytest

from tasklist.core.session import TaskSession
from tasklist.tasks.task_file import TaskFile
from tasklist.tasks.task_models import Task
from tasklist.tasks.task_store import TaskNotFoundError

from .fakes import FailingSavePersistence, FakeTaskPersistence


def test_open_loads_tasks_in_order(session: TaskSession) -> None:
    assert session.render_tasks() == [
        "[✓] Task 1: Buy milk",
        "[ ] Task 2: Write report",
    ]


def test_close_saves_mutations(session: TaskSession, persistence: FakeTaskPersistence) -> None:
    session.add("Call mom")
    session.complete(2)
    session.close()

    assert persistence.saves == [
        [
            Task(id=1, description="Buy milk", completed=True),
            Task(id=2, description="Write report", completed=True),
            Task(id=3, description="Call mom", completed=False),
        ]
    ]
    assert session.is_open is False


def test_close_twice_saves_once(session: TaskSession, persistence: FakeTaskPersistence) -> None:
    session.close()
    session.close()
    assert len(persistence.saves) == 1


def test_complete_unknown_id_raises(session: TaskSession) -> None:
    with pytest.raises(TaskNotFoundError):
        session.complete(99)


def test_operations_require_open_session() -> None:
    s = TaskSession(FakeTaskPersistence())
    with pytest.raises(RuntimeError):
        s.add("x")
    with pytest.raises(RuntimeError):
        s.close()

    s.open()
    with pytest.raises(RuntimeError):
        s.open()

    s.close()
    with pytest.raises(RuntimeError):
        s.list_tasks()


def test_load_failure_is_suppressed_and_keeps_partial_read() -> None:
    backend = FakeTaskPersistence(
        [Task(id=1, description="a"), Task(id=2, description="b")],
        fail_after=1,
    )

    s = TaskSession(backend).open()

    assert [t.description for t in s.list_tasks()] == ["a"]
    assert s.add("c").id == 2


def test_save_failure_propagates() -> None:
    s = TaskSession(FailingSavePersistence([Task(id=1, description="a")])).open()
    s.add("b")
    with pytest.raises(OSError):
        s.close()


def test_context_manager_flushes_on_success() -> None:
    backend = FakeTaskPersistence()
    with TaskSession(backend) as s:
        s.add("Buy milk")

    assert backend.tasks == [Task(id=1, description="Buy milk", completed=False)]


def test_context_manager_skips_flush_on_error() -> None:
    backend = FakeTaskPersistence()
    with pytest.raises(ValueError):
        with TaskSession(backend) as s:
            s.add("Buy milk")
            raise ValueError("boom")

    assert backend.saves == []


def test_undecodable_line_keeps_earlier_tasks_from_file(tmp_path) -> None:
    path = tmp_path / "tasks.txt"
    path.write_bytes(b"1|Buy milk|false\n2|Call mom|true\n3|bad \xff byte|false\n")

    s = TaskSession(TaskFile(path)).open()

    assert [t.id for t in s.list_tasks()] == [1, 2]
    s.close()
    assert path.read_bytes() == b"1|Buy milk|false\n2|Call mom|true\n"
