import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv


load_dotenv()

logger = logging.getLogger(__name__)

LOG_LEVELS = {
    "critical": logging.CRITICAL,
    "error": logging.ERROR,
    "warning": logging.WARNING,
    "warn": logging.WARNING,
    "info": logging.INFO,
    "http": logging.INFO,
    "verbose": logging.DEBUG,
    "debug": logging.DEBUG,
    "silly": logging.DEBUG,
}


@dataclass(frozen=True)
class Config:
    """Package settings loaded from environment variables.

    Relative paths are resolved against the ``rrutils`` package directory.
    """

    DEBUG: bool = bool(os.getenv("DEBUG"))
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "info")

    CONFIG_DIR: str = os.getenv("RRUTILS_CONFIG_DIR", "../config")
    PACKAGE_FILE: str = os.getenv("RRUTILS_PACKAGE_FILE", "../pyproject.toml")

    HTTP_TIMEOUT_SECONDS: float = float(os.getenv("RRUTILS_HTTP_TIMEOUT", "60"))

    @classmethod
    def log_level(cls) -> int:
        if cls.DEBUG:
            return logging.DEBUG
        level = LOG_LEVELS.get(cls.LOG_LEVEL.lower())
        if level is None:
            logger.warning(f"Unknown LOG_LEVEL {cls.LOG_LEVEL!r}, using info")
            return logging.INFO
        return level

    @classmethod
    def validate(cls) -> None:
        if cls.LOG_LEVEL.lower() not in LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {cls.LOG_LEVEL!r}")
        if cls.HTTP_TIMEOUT_SECONDS <= 0:
            raise ValueError("RRUTILS_HTTP_TIMEOUT must be a positive number of seconds")
        if not cls.CONFIG_DIR:
            raise ValueError("RRUTILS_CONFIG_DIR must not be empty")
