"""Main CLI entry point."""

import logging
import logging.handlers
from pathlib import Path
from typing import Optional

import click

from ledsectional import __version__

from .commands import codes, config, render, run, url

logger = logging.getLogger(__name__)


def setup_logging(verbose: int, debug: bool, log_file: Optional[Path], log_level: str) -> None:
    """
    Configure logging for the application.

    Args:
        verbose: Verbosity count (0 = WARNING, 1 = INFO, 2+ = DEBUG)
        debug: If True, enable debug mode with file logging
        log_file: Custom log file path (optional)
        log_level: Log level for file logging (DEBUG/INFO/WARNING/ERROR)
    """
    if debug:
        level = logging.DEBUG
    elif verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    # Override with explicit log level if provided
    if log_file:
        level = getattr(logging, log_level.upper())

    if debug and not log_file:
        log_path = Path.cwd() / "ledsectional-debug.log"
    elif log_file:
        log_path = log_file
    else:
        config_dir = Path.home() / ".ledsectional" / "logs"
        config_dir.mkdir(parents=True, exist_ok=True)
        log_path = config_dir / "ledsectional.log"

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


@click.group()
@click.version_option(version=__version__, prog_name="ledsectional")
@click.option(
    '-v', '--verbose',
    count=True,
    help='Increase verbosity (-v: INFO, -vv: DEBUG)'
)
@click.option(
    '--debug',
    is_flag=True,
    help='Enable debug mode (DEBUG level, logs to ./ledsectional-debug.log)'
)
@click.option(
    '--log-file',
    type=click.Path(dir_okay=False, path_type=Path),
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
    verbose: int,
    debug: bool,
    log_file: Optional[Path],
    log_level: str
):
    """
    LED Sectional - live flight categories on an addressable LED strip.

    Each LED is an airport colored by its METAR flight category, or a
    legend slot from the configuration.

    \b
    Examples:
      # Drive the strip (console preview) with ~/.ledsectional/cfg.toml
      ledsectional run

      # Check a config file
      ledsectional config validate --config ./cfg.toml

      # Map a saved payload without network access
      ledsectional render metars.json

      # Verbose logging
      ledsectional -vv run --once
    """
    setup_logging(verbose, debug, log_file, log_level)


cli.add_command(run)
cli.add_command(codes)
cli.add_command(url)
cli.add_command(render)
cli.add_command(config)

if __name__ == "__main__":
    cli()
