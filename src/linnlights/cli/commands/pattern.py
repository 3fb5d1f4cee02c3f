"""Light pattern file commands."""

from pathlib import Path

import click

from linnlights import lights
from linnlights.cli.context import CliContext, pass_cli_context, report_result
from linnlights.cli.params import COLOR, MEMORY
from linnlights.models import LightPattern, LinnColor


@click.group(name="pattern")
def pattern_group():
    """Create and send light pattern files."""
    pass


@pattern_group.command(name="new")
@click.argument("path", type=click.Path(dir_okay=False, path_type=Path))
@click.option("--name", "-n", default=None, help="Pattern name (default: file name)")
@click.option("--fill", "fill_color", type=COLOR, default=LinnColor.DEFAULT.name.lower(),
              show_default=True, help="Initial color for every pad")
@click.option("--force", is_flag=True, help="Overwrite an existing file")
def new_pattern(path: Path, name, fill_color, force: bool):
    """Write a new pattern file to PATH for editing."""
    if path.exists() and not force:
        raise click.ClickException(f"{path} already exists (use --force to overwrite)")

    pattern = LightPattern.filled(fill_color, name=name or path.stem)
    pattern.save(path)
    click.echo(f"Created pattern {pattern.name!r} at {path}")


@pattern_group.command(name="send")
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--save", "save_to", type=MEMORY, default=None,
              help="Save the pattern to memory A, A# or B after sending")
@pass_cli_context
def send_pattern(ctx: CliContext, path: Path, save_to):
    """Send the pattern in PATH to the LinnStrument."""
    pattern = LightPattern.load(path)
    with ctx.open_device() as device:
        result = lights.send_pattern(device, pattern, save_to=save_to)

    message = f"Sent pattern {pattern.name!r}"
    if save_to is not None:
        message += f" and saved it to memory {save_to.label}"
    report_result(result, message)
