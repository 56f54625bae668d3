"""Show what will be requested from the weather source."""

import click

from ledsectional.exceptions import LedSectionalError
from ledsectional.models import build_metar_url, build_request_codes

from ._common import config_option, fail, load_config


@click.command(name="codes")
@config_option
def codes(config_path):
    """Print the comma-separated station list sent to the weather source."""
    try:
        config_obj = load_config(config_path)
    except LedSectionalError as e:
        fail(e)

    click.echo(build_request_codes(config_obj.metar_codes()))


@click.command(name="url")
@config_option
def url(config_path):
    """Print the METAR request URL for the configured stations."""
    try:
        config_obj = load_config(config_path)
    except LedSectionalError as e:
        fail(e)

    station_codes = config_obj.metar_codes()
    if not station_codes:
        click.echo("No stations configured; nothing would be fetched.", err=True)
        return
    click.echo(build_metar_url(station_codes))
