"""
Logging helpers.

Every module obtains its logger through ``get_logger(__name__)``.
"""
import json
import logging
import sys
from typing import Optional

from skincheck.config import settings

_ROOT_LOGGER = "skincheck"
_configured = False


class _JsonFormatter(logging.Formatter):
    """One JSON object per line; message text is escaped by json.dumps."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload)


def _resolve_level(level: Optional[str]) -> int:
    resolved = (level or settings.log_level).upper()
    if settings.debug and level is None:
        resolved = "DEBUG"
    return getattr(logging, resolved, logging.INFO)


def setup_logging(level: Optional[str] = None) -> logging.Logger:
    """
    Configure the package root logger.

    The handler is installed once. The level is taken from settings on
    first setup; later calls only change it when ``level`` is given.
    """
    global _configured

    logger = logging.getLogger(_ROOT_LOGGER)

    if not _configured:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(_JsonFormatter())
        logger.addHandler(handler)
        logger.setLevel(_resolve_level(level))
        _configured = True
    elif level is not None:
        logger.setLevel(_resolve_level(level))

    return logger


def get_logger(name: str) -> logging.Logger:
    """Return a module logger under the package root; never changes levels."""
    if not _configured:
        setup_logging()
    return logging.getLogger(name)
