"""Inspect and validate the sectional configuration."""

import click

from ledsectional.exceptions import LedSectionalError
from ledsectional.models import SectionalConfig
from ledsectional.models.config import DEFAULT_CONFIG_TOML

from ._common import config_option, fail, load_config


@click.group(name="config")
def config():
    """Show or validate the sectional configuration."""
    pass


@config.command(name="show")
@config_option
def show(config_path):
    """Display the effective settings and airport layout (after clamping)."""
    try:
        config_obj = load_config(config_path)
    except LedSectionalError as e:
        fail(e)

    settings = config_obj.settings
    click.echo("Settings:")
    click.echo(f"  brightness:            {settings.brightness}")
    click.echo(f"  request_interval_secs: {settings.request_interval_secs}")
    click.echo(f"  wind_threshold_kt:     {settings.wind_threshold_kt}")
    click.echo(f"  do_lightning:          {settings.do_lightning}")
    click.echo(f"  do_winds:              {settings.do_winds}")
    click.echo(f"  data_pin:              {settings.data_pin}")

    if config_obj.wifi.ssid is not None:
        click.echo(f"\nWiFi fallback: {config_obj.wifi.ssid}")

    click.echo(f"\nAirports ({config_obj.num_leds} LEDs):")
    for index, airport in enumerate(config_obj.airports):
        kind = "special" if airport.special is not None else "station"
        click.echo(f"  [{index:3d}] {airport.code:<5} {kind}")


@config.command(name="validate")
@config_option
def validate(config_path):
    """Parse the config file and report [OK] or the first problem found."""
    try:
        config_obj = load_config(config_path)
    except LedSectionalError as e:
        click.echo("[FAIL] Configuration is invalid", err=True)
        fail(e)

    click.echo(
        f"[OK] {config_obj.num_leds} LEDs, "
        f"{len(config_obj.metar_codes())} stations"
    )


@config.command(name="example")
def example():
    """Print the built-in default configuration as a starting point."""
    # Parse first so a broken built-in never gets printed
    SectionalConfig.from_toml(DEFAULT_CONFIG_TOML)
    click.echo(DEFAULT_CONFIG_TOML, nl=False)
