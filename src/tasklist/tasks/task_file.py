# src/tasklist/tasks/task_file.py

from __future__ import annotations

import logging
import os
from collections.abc import Iterable, Iterator
from pathlib import Path

from .task_models import Task, parse_task_id

logger = logging.getLogger(__name__)

FIELD_SEP = "|"
TRUE_TEXT = "true"
FALSE_TEXT = "false"


def format_task_line(task: Task) -> str:
    """
    Encode one task as `id|description|completed`.

    The separator is not escaped: a description containing `|` will not read back.
    """
    flag = TRUE_TEXT if task.completed else FALSE_TEXT
    return f"{task.id}{FIELD_SEP}{task.description}{FIELD_SEP}{flag}"


def _parse_flag(raw: str) -> bool | None:
    if raw == TRUE_TEXT:
        return True
    if raw == FALSE_TEXT:
        return False
    return None


def parse_task_line(line: str, *, strict: bool = False) -> Task | None:
    """
    Decode one record line. Returns None for lines that are not records.

    Lenient mode (default) keeps a record with 3 fields even when the id or the
    flag does not parse: id falls back to 0, flag to False.
    Strict mode skips such lines instead.
    """
    parts = line.split(FIELD_SEP)
    if len(parts) != 3:
        return None

    raw_id, description, raw_flag = parts
    task_id = parse_task_id(raw_id)
    completed = _parse_flag(raw_flag)

    if strict and (task_id is None or completed is None):
        return None

    return Task(
        id=task_id if task_id is not None else 0,
        description=description,
        completed=bool(completed),
    )


class TaskFile:
    """
    Pipe-delimited text file backend, one task per line, UTF-8.

    No locking: two processes writing the same file race, last writer wins.
    """

    def __init__(self, path: str | Path = "tasks.txt", *, strict: bool = False) -> None:
        self._path = Path(path)
        self._strict = strict

    @property
    def path(self) -> Path:
        return self._path

    def iter_tasks(self) -> Iterator[Task]:
        """
        Yield tasks in file order. A missing file yields nothing.

        Read errors other than a missing file propagate to the caller after the
        tasks read so far have been yielded.
        """
        if not self._path.exists():
            logger.debug("Task file %s does not exist; starting empty.", self._path)
            return

        # Decode per line: a bad byte only stops the read at its own line.
        with self._path.open("rb") as f:
            for lineno, raw in enumerate(f, start=1):
                line = raw.decode("utf-8").removesuffix("\n").removesuffix("\r")
                task = parse_task_line(line, strict=self._strict)
                if task is None:
                    logger.debug("Skipping malformed line %d in %s: %r", lineno, self._path, line)
                    continue
                yield task

    def load(self) -> list[Task]:
        return list(self.iter_tasks())

    def save(self, tasks: Iterable[Task]) -> None:
        """
        Overwrite the file with the given tasks.

        Written to a sibling temp file first and moved into place with
        os.replace, so readers see either the old or the new content.
        """
        body = "".join(format_task_line(t) + "\n" for t in tasks)

        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self._path.with_name(self._path.name + ".tmp")
        try:
            with tmp.open("w", encoding="utf-8", newline="") as f:
                f.write(body)
            os.replace(tmp, self._path)
        except OSError:
            tmp.unlink(missing_ok=True)
            raise
        logger.debug("Saved %d bytes to %s", len(body), self._path)
