"""Errors raised while loading client settings."""

from pathlib import Path
from typing import Any


class ConfigurationError(Exception):
    """Settings could not be loaded or are not usable."""


class ConfigurationFileError(ConfigurationError):
    """A settings file is missing, unreadable, or not a YAML mapping.

    ``file_path`` is None when discovery found no file to read.
    """

    def __init__(self, message: str, file_path: str | Path | None = None):
        super().__init__(message)
        self.file_path = str(file_path) if file_path is not None else None


class ConfigurationValidationError(ConfigurationError):
    """Settings were read but rejected by the pydantic models.

    ``validation_errors`` holds the entries of ``ValidationError.errors()``.
    """

    def __init__(self, message: str, validation_errors: list[dict[str, Any]]):
        super().__init__(message)
        self.validation_errors = validation_errors
