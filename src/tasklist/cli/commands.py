# src/tasklist/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..core.session import TaskSession
from ..tasks.task_models import parse_task_id
from ..tasks.task_store import TaskNotFoundError

CommandHandler = Callable[[TaskSession, list[str]], str]

logger = logging.getLogger(__name__)

INVALID_COMMAND = "Invalid command. Use 'add', 'complete', or 'list'."


class CommandRegistry:
    """Subcommand registry: argv[0] selects a handler, the rest are its args."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._usage: dict[str, tuple[str, str]] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        usage: str | None = None,
        aliases: list[str] | None = None,
        listed: bool = True,
    ) -> None:
        aliases = aliases or []
        self._handlers[name] = handler
        if listed:
            self._usage[name] = (usage or name, help_text)
        for alias in aliases:
            self._handlers[alias] = handler

    def handle(self, session: TaskSession, argv: list[str]) -> str:
        """
        Run the command named by argv[0].
        Returns the text to print (may be empty or span several lines).
        """
        if not argv:
            return self.build_help()

        name, args = argv[0], argv[1:]
        handler = self._handlers.get(name)
        if handler is None:
            logger.debug("Unknown command %r", name)
            return INVALID_COMMAND

        return handler(session, args)

    def build_help(self) -> str:
        width = max((len(u) for u, _ in self._usage.values()), default=0)
        lines = ["Usage: <command> [arguments]", "Commands:"]
        for usage, help_text in self._usage.values():
            lines.append(f"  {usage.ljust(width)}  - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def cmd_add(session: TaskSession, args: list[str]) -> str:
    if not args:
        return "Usage: add <task description>"
    task = session.add(" ".join(args))
    logger.info("Added task id=%s", task.id)
    return ""


def cmd_complete(session: TaskSession, args: list[str]) -> str:
    """
    complete <id>   -> mark task as completed
    A non-numeric id is treated as 0, which never matches an added task.
    """
    if not args:
        return "Usage: complete <task id>"

    task_id = parse_task_id(args[0])
    if task_id is None:
        task_id = 0

    try:
        session.complete(task_id)
    except TaskNotFoundError as e:
        logger.info("complete: no task with id=%s", task_id)
        return f"Error: {e}"
    return ""


def cmd_list(session: TaskSession, args: list[str]) -> str:
    return "\n".join(session.render_tasks())


def cmd_help(session: TaskSession, args: list[str]) -> str:
    return registry.build_help()


registry.register("add", cmd_add, help_text="Add a new task", usage="add <task description>")
registry.register(
    "complete", cmd_complete, help_text="Mark a task as completed", usage="complete <task id>"
)
registry.register("list", cmd_list, help_text="List all tasks")
registry.register(
    "help", cmd_help, help_text="Show this help", aliases=["-h", "--help"], listed=False
)
