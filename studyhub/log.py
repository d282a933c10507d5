"""Logging configuration for StudyHub.

Uses loguru: a coloured stderr sink plus a daily-rotated file sink.
"""

from __future__ import annotations

import sys
from pathlib import Path

from loguru import logger

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} - {message}"


def setup_logging(level: str = "INFO", log_dir: Path | None = None) -> None:
    """Replace loguru's default handler with StudyHub's sinks.

    Args:
        level: Minimum level for the console sink.
        log_dir: Where to write log files.  No file sink when ``None``.
    """
    logger.remove()
    logger.add(
        sys.stderr,
        format=CONSOLE_FORMAT,
        level=level,
        colorize=True,
        backtrace=True,
        diagnose=False,
    )

    if log_dir is not None:
        log_dir.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_dir / "studyhub_{time:YYYY-MM-DD}.log",
            format=FILE_FORMAT,
            level="DEBUG",
            rotation="00:00",
            retention="7 days",
            backtrace=True,
            diagnose=False,
        )

    logger.info("StudyHub logging initialized")


__all__ = ["logger", "setup_logging"]
