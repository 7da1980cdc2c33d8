#!/usr/bin/env python3
"""
task-tracker - Main entry point

Configures logging from settings and hands over to the click CLI.
"""
import logging
import sys
from typing import Optional

from task_tracker.config import get_settings


def setup_logging(level: Optional[str] = None, fmt: Optional[str] = None) -> None:
    """
    Configure logging to stderr.

    Args:
        level: Log level name; defaults to the configured log_level
        fmt: Log format; defaults to the configured log_format
    """
    settings = get_settings()
    level = (level or settings.log_level).upper()
    logging.basicConfig(
        level=level,
        format=fmt or settings.log_format,
        stream=sys.stderr,
    )
    logging.getLogger("task_tracker").setLevel(level)


def main(argv: Optional[list] = None) -> int:
    """Main entry point for the task-tracker package."""
    setup_logging()

    from task_tracker.cli import cli

    # Click always finishes with SystemExit in standalone mode
    try:
        cli.main(args=argv, prog_name="task-tracker")
    except SystemExit as e:
        if e.code is None:
            return 0
        return e.code if isinstance(e.code, int) else 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
