"""User-facing notification sinks.

Discovery reports its outcome through a Notifier instead of printing or
raising, so the same locator works from the CLI, a GUI, or a test.
"""

import logging
from typing import Literal, Protocol

import click

logger = logging.getLogger(__name__)

Severity = Literal["information", "warning", "error"]

_LOG_LEVELS = {
    "information": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


class Notifier(Protocol):
    """Anything that can show a message to the user."""

    def notify(self, message: str, severity: Severity = "information") -> None:
        ...


class LoggingNotifier:
    """Send notifications to the log only."""

    def __init__(self, logger_instance: logging.Logger | None = None):
        self.logger = logger_instance or logger

    def notify(self, message: str, severity: Severity = "information") -> None:
        self.logger.log(_LOG_LEVELS.get(severity, logging.INFO), message.replace("\n", " "))


class ConsoleNotifier(LoggingNotifier):
    """Echo notifications to the terminal (errors on stderr) and log them."""

    def notify(self, message: str, severity: Severity = "information") -> None:
        super().notify(message, severity)
        if severity == "error":
            click.secho(message, fg="red", err=True)
        elif severity == "warning":
            click.secho(message, fg="yellow", err=True)
        else:
            click.echo(message)
