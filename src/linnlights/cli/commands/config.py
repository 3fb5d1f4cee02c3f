"""Configuration commands.

Commands:
    - config show                  # Display configuration
    - config set --option VALUE    # Update configuration
    - config reset                 # Reset to defaults
"""

import click
from pydantic import ValidationError

from linnlights.cli.context import CliContext, pass_cli_context
from linnlights.cli.params import MEMORY
from linnlights.exceptions import wrap_pydantic_error
from linnlights.models import AppConfig


@click.group(name="config")
def config():
    """Configure linnlights settings."""
    pass


@config.command(name="show")
@pass_cli_context
def show(ctx: CliContext):
    """Display the current configuration."""
    click.echo(f"Config file: {ctx.config_path or AppConfig.default_path()}\n")
    for field_name, value in ctx.config.model_dump(mode="json").items():
        click.echo(f"  {field_name}: {value}")


@config.command(name="set")
@click.option("--device-name", default=None, help="Exact MIDI output name of the LinnStrument")
@click.option("--backend", default=None, help="mido backend module, e.g. mido.backends.rtmidi")
@click.option("--timeout", type=click.FloatRange(min=0, min_open=True), default=None,
              help="Discovery timeout in seconds")
@click.option("--no-timeout", is_flag=True, help="Wait for MIDI access without a time limit")
@click.option("--memory", type=MEMORY, default=None, help="Default memory (A, A#, B)")
@pass_cli_context
def set_values(ctx: CliContext, device_name, backend, timeout, no_timeout: bool, memory):
    """Update configuration values and save them."""
    if timeout is not None and no_timeout:
        raise click.UsageError("--timeout and --no-timeout cannot be used together")

    updates = {
        "device_name": device_name,
        "midi_backend": backend,
        "discovery_timeout": timeout,
        "default_memory": memory,
    }
    updates = {key: value for key, value in updates.items() if value is not None}
    if no_timeout:
        updates["discovery_timeout"] = None
    if not updates:
        raise click.UsageError("Nothing to set; pass at least one option")

    path = ctx.config_path or AppConfig.default_path()
    try:
        new_config = AppConfig.model_validate({**ctx.config.model_dump(), **updates})
    except ValidationError as e:
        raise wrap_pydantic_error(e, str(path)) from e

    new_config.save(path)
    ctx.config = new_config
    for key, value in updates.items():
        click.echo(f"[OK] {key} = {value}")


@config.command(name="reset")
@click.confirmation_option(prompt="Reset configuration to defaults?")
@pass_cli_context
def reset(ctx: CliContext):
    """Reset configuration to defaults."""
    ctx.config = AppConfig()
    ctx.config.save(ctx.config_path)
    click.echo("Configuration reset to defaults")
