"""Logging error reporter adapter.

Implements ErrorReporterPort by emitting each message as a log record,
leaving formatting and destination to the application's logging setup.
"""

import logging

from userdetails.core.ports import ErrorReporterPort


class LoggingErrorReporter(ErrorReporterPort):
    """Emits denial messages through a named logger."""

    def __init__(
        self,
        logger_name: str = "userdetails.errors",
        level: int = logging.WARNING,
    ):
        """Initialize logging error reporter.

        Args:
            logger_name: Name of the logger that receives the messages.
            level: Log level used for every message.
        """
        self.logger = logging.getLogger(logger_name)
        self.level = level

    def report(self, message: str) -> None:
        """Log the message at the configured level."""
        self.logger.log(self.level, message)
