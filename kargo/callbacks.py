"""Callback system for human-directed output.

The orchestration verbs report progress through an ``OutputCallback`` rather
than printing, so the same code can run under the CLI, in tests, or with plain
logging.
"""

import logging
from typing import Protocol


class OutputCallback(Protocol):
    """Protocol for handling output."""

    def progress(self, message: str) -> None:
        """Display a progress or informational message."""
        ...

    def success(self, message: str) -> None:
        """Display a success message."""
        ...

    def warning(self, message: str) -> None:
        """Display a warning message."""
        ...

    def error(self, message: str) -> None:
        """Display an error message."""
        ...


class SilentCallback:
    """Callback that produces no output."""

    def progress(self, message: str) -> None:
        pass

    def success(self, message: str) -> None:
        pass

    def warning(self, message: str) -> None:
        pass

    def error(self, message: str) -> None:
        pass


class LoggingCallback:
    """Callback that uses Python's logging system."""

    def __init__(self, logger: logging.Logger = None):
        """Initialize with optional logger. If None, uses this module's logger."""
        self.logger = logger or logging.getLogger(__name__)

    def progress(self, message: str) -> None:
        self.logger.info(message)

    def success(self, message: str) -> None:
        self.logger.info(message)

    def warning(self, message: str) -> None:
        self.logger.warning(message)

    def error(self, message: str) -> None:
        self.logger.error(message)
