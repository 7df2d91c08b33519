"""Logging setup shared by analytics entry points."""

from .logger import (
    configure_console_logging,
    configure_file_logging,
    get_logger,
    log_performance,
    logger,
)

__all__ = [
    "logger",
    "get_logger",
    "log_performance",
    "configure_console_logging",
    "configure_file_logging",
]
