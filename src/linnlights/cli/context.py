"""Shared state for CLI commands."""

import asyncio
import logging
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import click

from linnlights.midi import DeviceLocator, MidoTransport, OutputDevice, SendResult
from linnlights.models import AppConfig
from linnlights.notifications import ConsoleNotifier, Notifier

logger = logging.getLogger(__name__)


@dataclass
class CliContext:
    """Configuration plus per-invocation overrides from global options."""

    config: AppConfig
    config_path: Optional[Path] = None
    device_name: Optional[str] = None
    timeout: Optional[float] = None
    notifier: Notifier = field(default_factory=ConsoleNotifier)

    @property
    def effective_device_name(self) -> str:
        return self.device_name or self.config.device_name

    @property
    def effective_timeout(self) -> Optional[float]:
        return self.timeout if self.timeout is not None else self.config.discovery_timeout

    def make_locator(self) -> DeviceLocator:
        return DeviceLocator(MidoTransport(self.config.midi_backend), self.notifier)

    @contextmanager
    def open_device(self) -> Iterator[OutputDevice]:
        """
        Locate the LinnStrument for the duration of a command.

        Exits with status 1 when the device cannot be located; the reason
        has already been shown by the notifier.
        """
        locator = self.make_locator()
        device = asyncio.run(locator.find(self.effective_device_name, self.effective_timeout))
        if device is None:
            raise click.exceptions.Exit(1)
        with device:
            yield device


def report_result(result: SendResult, success_message: str) -> None:
    """Echo success or exit with status 1 showing the send failure."""
    if result:
        click.echo(success_message)
        return
    if result.error is not None:
        click.secho(result.error.get_full_message(), fg="red", err=True)
    raise click.exceptions.Exit(1)


pass_cli_context = click.make_pass_decorator(CliContext)
