"""Helpers shared by CLI commands."""

import logging
import sys
from pathlib import Path
from typing import NoReturn, Optional

import click

from ledsectional.exceptions import LedSectionalError, format_error_for_display
from ledsectional.models import SectionalConfig
from ledsectional.models.config import DEFAULT_CONFIG_PATH

logger = logging.getLogger(__name__)

config_option = click.option(
    '--config',
    '-c',
    'config_path',
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help=f'Path to cfg.toml (default: {DEFAULT_CONFIG_PATH}, built-in layout if missing)'
)


def load_config(config_path: Optional[Path]) -> SectionalConfig:
    """Load an explicit config file, or the default path with built-in fallback."""
    if config_path is not None:
        return SectionalConfig.load(config_path)
    return SectionalConfig.load_or_default()


def fail(error: Exception) -> NoReturn:
    """Show a clean error message with recovery hint and exit with code 1."""
    if isinstance(error, LedSectionalError):
        logger.error(f"Command failed: {error.log_line()}")
    else:
        logger.error(f"Command failed: {error}", exc_info=not isinstance(error, click.ClickException))

    user_message, recovery_hint = format_error_for_display(error)
    click.echo(f"ERROR: {user_message}", err=True)
    if recovery_hint:
        click.echo(f"\n{recovery_hint}", err=True)
    sys.exit(1)
