"""Commands that change pad colors and light pattern memories."""

import click

from linnlights import lights
from linnlights.cli.context import CliContext, pass_cli_context, report_result
from linnlights.cli.params import COLOR, MEMORY
from linnlights.models import NUM_COLUMNS, NUM_ROWS


@click.command(name="color")
@click.argument("row", type=click.IntRange(0, NUM_ROWS - 1))
@click.argument("column", type=click.IntRange(0, NUM_COLUMNS - 1))
@click.argument("color", type=COLOR)
@pass_cli_context
def color_cmd(ctx: CliContext, row: int, column: int, color):
    """
    Set the color of one pad.

    ROW is 0-7 from the bottom, COLUMN is 0-24 from the left play column,
    COLOR is a name (red, lime, off, ...) or a code 0-11.

    \b
    Examples:
      linnlights color 0 0 red
      linnlights color 7 24 9
    """
    with ctx.open_device() as device:
        result = lights.send_color(device, row, column, color)
    report_result(result, f"Pad ({row}, {column}) set to {color.name.lower()}")


@click.command(name="fill")
@click.argument("color", type=COLOR)
@pass_cli_context
def fill_cmd(ctx: CliContext, color):
    """Set every play pad to COLOR."""
    with ctx.open_device() as device:
        result = lights.fill(device, color)
    report_result(result, f"All pads set to {color.name.lower()}")


@click.command(name="save")
@click.argument("memory", type=MEMORY, required=False)
@pass_cli_context
def save_cmd(ctx: CliContext, memory):
    """
    Save the pattern shown on the LinnStrument to MEMORY (A, A# or B).

    Uses the configured default memory when MEMORY is omitted.
    """
    memory = memory if memory is not None else ctx.config.default_memory
    with ctx.open_device() as device:
        result = lights.save_colors(device, memory)
    report_result(result, f"Light pattern saved to memory {memory.label}")


@click.command(name="clear")
@click.argument("memory", type=MEMORY, required=False)
@pass_cli_context
def clear_cmd(ctx: CliContext, memory):
    """Clear the custom light pattern stored in MEMORY (A, A# or B)."""
    memory = memory if memory is not None else ctx.config.default_memory
    with ctx.open_device() as device:
        result = lights.clear_colors(device, memory)
    report_result(result, f"Light pattern cleared from memory {memory.label}")
