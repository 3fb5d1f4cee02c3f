"""MIDI command implementations."""

import logging

import click

from linnlights.cli.context import CliContext, pass_cli_context
from linnlights.exceptions import format_error_for_display, wrap_midi_error
from linnlights.midi import MidoTransport

logger = logging.getLogger(__name__)


@click.group(name="midi")
def midi_group():
    """MIDI device commands."""
    pass


@midi_group.command(name="list")
@pass_cli_context
def list_midi(ctx: CliContext):
    """List available MIDI output ports."""
    transport = MidoTransport(ctx.config.midi_backend)
    try:
        transport.request_access()
        outputs = transport.enumerate_outputs()
    except Exception as e:
        logger.exception("Failed to list MIDI outputs")
        message, hint = format_error_for_display(wrap_midi_error(e))
        click.secho(message, fg="red", err=True)
        if hint:
            click.echo(hint, err=True)
        raise click.exceptions.Exit(1)

    click.echo("MIDI Output Ports:\n")
    if not outputs:
        click.echo("  No MIDI output ports found.")
        return

    expected = ctx.effective_device_name
    for i, port in enumerate(outputs):
        marker = "  <- LinnStrument" if port == expected else ""
        click.echo(f"  [{i}] {port}{marker}")
