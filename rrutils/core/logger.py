import logging
import traceback
from typing import Callable

from .config import Config


LOG_FORMAT = '%(asctime)s - %(name)s - [%(service)s] %(levelname)s - %(message)s'


class ServiceFilter(logging.Filter):
    """Stamps records that did not come through the adapter, e.g. from child loggers."""

    def __init__(self, service: str):
        super().__init__()
        self.service = service

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, 'service'):
            record.service = self.service
        return True


def make_logger(service: str) -> logging.LoggerAdapter:
    """Console logger for ``service``; every record carries ``service``.

    Level is DEBUG when ``Config.DEBUG`` is set, otherwise ``Config.LOG_LEVEL``.
    Calling it twice for the same service does not add a second handler.
    """
    logger = logging.getLogger(service)
    logger.setLevel(Config.log_level())
    if not any(isinstance(f, ServiceFilter) for h in logger.handlers for f in h.filters):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler.addFilter(ServiceFilter(service))
        logger.addHandler(handler)
    return logging.LoggerAdapter(logger, {'service': service})


def trace(output: Callable[[str], object]) -> None:
    """Send the current call stack to ``output``."""
    stack = ''.join(traceback.format_stack()[:-1])
    output(f"--trace: {stack}")
