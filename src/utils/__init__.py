"""Utility modules for groupieTracker.

- **errors** -- Exception hierarchy rooted at GroupieTrackerError; upstream
  failures and query failures each get their own subclass.
- **concurrency** -- asyncio reader/writer lock guarding the artist snapshot.
- **logging** -- structlog setup: coloured console output in development,
  structured JSON in production.
"""

from src.utils.concurrency import ReadWriteLock
from src.utils.errors import (
    ConfigurationError,
    DecodeError,
    FetchError,
    GroupieTrackerError,
    InvalidArgumentError,
    NotFoundError,
    TransportError,
)
from src.utils.logging import configure_logging, get_logger

__all__ = [
    "ConfigurationError",
    "DecodeError",
    "FetchError",
    "GroupieTrackerError",
    "InvalidArgumentError",
    "NotFoundError",
    "ReadWriteLock",
    "TransportError",
    "configure_logging",
    "get_logger",
]
