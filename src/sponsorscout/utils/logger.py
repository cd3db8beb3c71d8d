"""Loguru setup for scripts and the API server."""

import sys
from pathlib import Path

from loguru import logger

CONSOLE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | <level>{level: <7}</level> | {name} | <level>{message}</level>"
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {name}:{line} | {message}"


def setup_logger(level: str = "INFO", log_file: Path | None = None) -> None:
    """
    Configure loguru sinks.

    Replaces the default handler with a console sink at ``level`` and, when
    ``log_file`` is given, adds a DEBUG file sink next to it.

    Args:
        level: Console log level name
        log_file: Optional path for a detailed log file
    """
    logger.remove()
    logger.add(sys.stderr, format=CONSOLE_FORMAT, level=level.upper(), colorize=True)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        logger.add(log_file, format=FILE_FORMAT, level="DEBUG", rotation="10 MB")
