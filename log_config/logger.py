"""Centralized logging configuration using loguru."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

_CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)
_FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} - {message}"

_console_sink_id: Optional[int] = None


def configure_console_logging(level: str = "INFO") -> None:
    """(Re)attach the stderr sink at the given level."""
    global _console_sink_id
    if _console_sink_id is None:
        logger.remove()
    else:
        logger.remove(_console_sink_id)
    _console_sink_id = logger.add(sys.stderr, level=level, format=_CONSOLE_FORMAT, colorize=True)


configure_console_logging()


def configure_file_logging(logs_dir: Path = Path("logs")) -> Path:
    """Attach rotating file sinks under logs_dir.

    Nothing writes log files unless an entry point (the CLI's --log-dir)
    asks for it.

    Args:
        logs_dir: Directory for log files (created if missing)

    Returns:
        The logs directory
    """
    logs_dir = Path(logs_dir)
    logs_dir.mkdir(parents=True, exist_ok=True)

    logger.add(
        logs_dir / "pitchcommand_{time}.log",
        rotation="50 MB",
        retention="10 days",
        level="DEBUG",
        format=_FILE_FORMAT,
        enqueue=True,
    )
    # errors also go to their own, longer-lived file
    logger.add(
        logs_dir / "errors_{time}.log",
        rotation="10 MB",
        retention="30 days",
        level="ERROR",
        format=_FILE_FORMAT,
        enqueue=True,
    )
    return logs_dir


def get_logger(name: Optional[str] = None):
    """Logger bound to a module name (pass __name__)."""
    return logger.bind(name=name) if name else logger


def log_performance(operation: str, duration_ms: float, threshold_ms: float = 100.0) -> None:
    """Debug-log a timing, escalating to a warning above threshold_ms.

    Args:
        operation: What was timed, e.g. "command analytics for 80 pitches"
        duration_ms: Elapsed time in milliseconds
        threshold_ms: Budget before the timing is reported as slow
    """
    if duration_ms <= threshold_ms:
        logger.debug(f"{operation} took {duration_ms:.2f}ms")
        return
    logger.warning(f"Slow: {operation} took {duration_ms:.2f}ms (over {threshold_ms:.0f}ms)")


__all__ = [
    "logger",
    "get_logger",
    "log_performance",
    "configure_console_logging",
    "configure_file_logging",
]
