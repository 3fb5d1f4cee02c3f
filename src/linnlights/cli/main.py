"""Main CLI entry point."""

import logging
import logging.handlers
from pathlib import Path
from typing import Optional

import click

from linnlights import __version__
from linnlights.exceptions import LinnLightsError, format_error_for_display
from linnlights.models import AppConfig
from linnlights.models.config import default_config_dir

from .commands import clear_cmd, color_cmd, config, fill_cmd, midi_group, pattern_group, save_cmd
from .context import CliContext

logger = logging.getLogger(__name__)


def resolve_log_path(debug: bool, log_file: Optional[Path]) -> Path:
    """Where log output goes for the given flags."""
    if log_file:
        return log_file
    if debug:
        return Path.cwd() / "linnlights-debug.log"
    return default_config_dir() / "logs" / "linnlights.log"


def setup_logging(verbose: int, debug: bool, log_file: Optional[Path], log_level: str) -> None:
    """
    Configure logging for the application.

    Args:
        verbose: Verbosity count (0 = WARNING, 1 = INFO, 2+ = DEBUG)
        debug: If True, log DEBUG to ./linnlights-debug.log
        log_file: Custom log file path (optional)
        log_level: Log level used with --log-file (DEBUG/INFO/WARNING/ERROR)
    """
    if debug or verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    if log_file:
        level = getattr(logging, log_level.upper())

    log_path = resolve_log_path(debug, log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    # Rotating file handler (keeps last 5 files, max 10MB each)
    file_handler = logging.handlers.RotatingFileHandler(
        log_path,
        maxBytes=10 * 1024 * 1024,
        backupCount=5
    )
    file_handler.setLevel(level)
    file_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.addHandler(file_handler)

    logger.info(f"Logging configured: level={logging.getLevelName(level)}, file={log_path}")


class LinnLightsGroup(click.Group):
    """Command group that shows LinnLightsError messages without a traceback."""

    def invoke(self, ctx: click.Context):
        try:
            return super().invoke(ctx)
        except LinnLightsError as e:
            logger.error(f"Command failed: {e.technical_message}")
            user_message, recovery_hint = format_error_for_display(e)
            click.secho(f"ERROR: {user_message}", fg="red", err=True)
            if recovery_hint:
                click.echo(f"\n{recovery_hint}", err=True)
            ctx.exit(1)


@click.group(cls=LinnLightsGroup)
@click.pass_context
@click.version_option(version=__version__, prog_name="linnlights")
@click.option(
    '--device',
    '-D',
    'device_name',
    type=str,
    default=None,
    help='Exact MIDI output name of the LinnStrument (default: from config)'
)
@click.option(
    '--timeout',
    '-t',
    type=click.FloatRange(min=0, min_open=True),
    default=None,
    help='Seconds to wait for MIDI access (default: from config)'
)
@click.option(
    '--config-file',
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help='Config file path (default: ~/.linnlights/config.json)'
)
@click.option(
    '-v', '--verbose',
    count=True,
    help='Increase verbosity (-v: INFO, -vv: DEBUG)'
)
@click.option(
    '--debug',
    is_flag=True,
    help='Enable debug mode (DEBUG level, logs to ./linnlights-debug.log)'
)
@click.option(
    '--log-file',
    type=click.Path(path_type=Path),
    default=None,
    help='Custom log file path'
)
@click.option(
    '--log-level',
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
    default='INFO',
    help='Log level for file logging (default: INFO)'
)
def cli(
    ctx,
    device_name: Optional[str],
    timeout: Optional[float],
    config_file: Optional[Path],
    verbose: int,
    debug: bool,
    log_file: Optional[Path],
    log_level: str
):
    """
    linnlights - program LinnStrument pad lights over MIDI.

    Colors are given by name or code: default (0), red, yellow, green, cyan,
    blue, magenta, off, white, orange, lime, pink (11).

    \b
    Examples:
      # Light the bottom-left pad red
      linnlights color 0 0 red

      # Send a pattern file and keep it in memory A#
      linnlights pattern send stars.json --save A#

      # Clear the custom pattern in memory B
      linnlights clear B

      # List MIDI outputs
      linnlights midi list
    """
    setup_logging(verbose, debug, log_file, log_level)

    config_obj = AppConfig.load_or_default(config_file)
    ctx.obj = CliContext(
        config=config_obj,
        config_path=config_file,
        device_name=device_name,
        timeout=timeout,
    )


cli.add_command(color_cmd)
cli.add_command(fill_cmd)
cli.add_command(save_cmd)
cli.add_command(clear_cmd)
cli.add_command(pattern_group)
cli.add_command(midi_group)
cli.add_command(config)


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
