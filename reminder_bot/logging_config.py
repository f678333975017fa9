"""Loguru logging setup for the bot and CLI."""

import os
import sys
from pathlib import Path

from loguru import logger

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level:<8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level:<8} | {name}:{function}:{line} - {message}"


def setup_logging(level: str | None = None, log_file: str | Path | None = None) -> None:
    """
    Route loguru output to stderr and, optionally, a rotating log file.

    Args:
        level: Minimum level. Falls back to LOG_LEVEL, then INFO.
        log_file: Optional path of a log file, rotated at 10 MB.
    """
    level = (level or os.environ.get("LOG_LEVEL") or "INFO").upper()

    logger.remove()
    logger.add(sys.stderr, format=CONSOLE_FORMAT, level=level, colorize=True)

    if log_file:
        path = Path(log_file).expanduser()
        path.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            path,
            format=FILE_FORMAT,
            level=level,
            rotation="10 MB",
            retention="14 days",
            encoding="utf-8",
        )
