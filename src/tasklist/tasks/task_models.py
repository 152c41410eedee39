# src/tasklist/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass

DONE_MARK = "✓"
OPEN_MARK = " "


@dataclass(slots=True)
class Task:
    id: int
    description: str
    completed: bool = False

    def complete(self) -> None:
        self.completed = True

    def __str__(self) -> str:
        mark = DONE_MARK if self.completed else OPEN_MARK
        return f"[{mark}] Task {self.id}: {self.description}"


def parse_task_id(raw: str) -> int | None:
    """Parse a non-negative decimal id; None when the text is not one."""
    raw = raw[1:] if raw.startswith("+") else raw
    if not raw or not (raw.isascii() and raw.isdigit()):
        return None
    return int(raw)
