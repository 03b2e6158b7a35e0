"""
Logging setup for applications that host the player.

Library modules only do ``from loguru import logger`` and never touch sinks.
An application calls :func:`setup_logging` once at startup (``main.py`` does)
to get the console sink, the rotating log file and the crash hook.
"""

from __future__ import annotations

import os
import sys
import tempfile
from pathlib import Path

from loguru import logger

from .paths import APP_NAME, log_dir as default_log_dir

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)


def _ensure_log_dir(path: Path) -> Path:
    try:
        path.mkdir(parents=True, exist_ok=True)
        return path
    except OSError:
        # No permission to create it: degrade to the temp directory
        fallback = Path(tempfile.gettempdir()) / f"{APP_NAME}_logs"
        fallback.mkdir(parents=True, exist_ok=True)
        return fallback


def handle_exception(exc_type, exc_value, exc_traceback):
    if issubclass(exc_type, KeyboardInterrupt):
        sys.__excepthook__(exc_type, exc_value, exc_traceback)
        return
    logger.opt(exception=(exc_type, exc_value, exc_traceback)).critical("Uncaught exception")


def setup_logging(
    log_dir: str | os.PathLike | None = None,
    console_level: str = "INFO",
    install_excepthook: bool = True,
) -> list[int]:
    """Replace loguru's sinks with the player's console and file sinks.

    Returns the ids of the added sinks.
    """
    directory = _ensure_log_dir(Path(log_dir) if log_dir is not None else default_log_dir())

    logger.remove()
    handler_ids: list[int] = []

    console_sink = getattr(sys, "__stderr__", None) or sys.stderr
    if console_sink is not None:
        handler_ids.append(logger.add(console_sink, level=console_level, format=CONSOLE_FORMAT))

    # rotation="00:00": new file every midnight
    # retention="7 days": keep a week of logs
    # compression="zip": old logs are zipped
    handler_ids.append(
        logger.add(
            os.path.join(directory, "player_{time:YYYY-MM-DD}.log"),
            level="DEBUG",
            rotation="00:00",
            retention="7 days",
            compression="zip",
            encoding="utf-8",
            enqueue=True,  # write from a background thread, never block the UI
            backtrace=True,
            diagnose=True,
        )
    )

    if install_excepthook:
        sys.excepthook = handle_exception
    return handler_ids
