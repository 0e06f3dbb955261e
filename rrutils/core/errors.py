from pathlib import Path
from typing import Optional


class RRUtilsError(Exception):
    """Base class for errors raised by rrutils."""


class DirectoryNotFoundError(RRUtilsError, FileNotFoundError):
    """The configuration directory is missing or cannot be listed."""

    def __init__(self, path: Path, reason: Optional[str] = None):
        self.path = path
        message = f"config directory not found: {path}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class ConfigLoadError(RRUtilsError):
    """A single config file could not be loaded; the whole aggregation is aborted."""

    def __init__(self, path: Path, cause: BaseException):
        self.path = path
        self.cause = cause
        super().__init__(f"failed to load config from {path}: {cause}")


class InvalidInputError(RRUtilsError, ValueError):
    pass
