# src/tasklist/cli/main.py

"""
CLI entrypoint.

Initializes logging, opens a session on the task file, runs one command,
then flushes. Only a failed save changes the exit status.
"""

from __future__ import annotations

import logging
import sys

from ..cli.bootstrap import create_session
from ..cli.commands import registry as command_registry
from ..config import Settings, get_settings
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None, *, settings: Settings | None = None) -> int:
    if settings is None:
        settings = get_settings()
    if argv is None:
        argv = sys.argv[1:]

    level_name = str(settings.log_level).upper()
    console_level = getattr(logging, level_name, logging.WARNING)
    if not isinstance(console_level, int):
        console_level = logging.WARNING
    setup_logging(
        log_dir=settings.data_dir,
        console_level=console_level,
        log_to_file=settings.log_to_file,
    )

    logger.debug("Starting %s argv=%s", settings.app_name, argv)

    session = create_session(settings=settings)
    session.open()

    save_error: OSError | None = None
    try:
        output = command_registry.handle(session, argv)
        if output:
            print(output)
    finally:
        # Save even when printing fails (e.g. stdout cannot encode the checkmark).
        try:
            session.close()
        except OSError as e:
            logger.debug("Failed to save tasks to %s", settings.tasks_path, exc_info=True)
            print(f"Error: failed to save tasks to {settings.tasks_path}: {e}", file=sys.stderr)
            save_error = e

    return 1 if save_error is not None else 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
