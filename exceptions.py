"""Custom exception classes for pitch command analytics."""

from __future__ import annotations

from typing import Optional


class PitchCommandError(Exception):
    """Base exception for all pitch command analytics errors."""

    pass


class ConfigError(PitchCommandError):
    """Base exception for configuration errors."""

    pass


class InvalidConfigError(ConfigError):
    """Raised when configuration file is invalid or corrupted."""

    pass


class ConfigValidationError(ConfigError):
    """Raised when configuration fails schema validation."""

    def __init__(self, message: str, validation_errors: Optional[list] = None):
        self.validation_errors = validation_errors or []
        super().__init__(message)


class RecordError(PitchCommandError):
    """Base exception for pitch/session record loading errors."""

    pass


class RecordParseError(RecordError):
    """Raised when a raw pitch or session record cannot be converted."""

    def __init__(self, message: str, field: Optional[str] = None, index: Optional[int] = None):
        self.field = field
        self.index = index
        super().__init__(message)


class RecordFileError(RecordError):
    """Raised when a record file is missing or not valid JSON."""

    pass
