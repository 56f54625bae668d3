"""Render a saved METAR payload without touching the network."""

from pathlib import Path

import click

from ledsectional.core import DisplayState
from ledsectional.devices import ConsoleStrip
from ledsectional.exceptions import LedSectionalError
from ledsectional.models import metars_by_station, parse_metars
from ledsectional.orchestration import update

from ._common import config_option, fail, load_config


@click.command(name="render")
@click.argument(
    'payload',
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@config_option
@click.option(
    '--scaled/--unscaled',
    default=False,
    help='Apply the configured brightness to the printed colors (default: unscaled)'
)
@click.option(
    '--preview',
    is_flag=True,
    help='Also print a one-line colored preview of the strip'
)
def render(payload: Path, config_path, scaled: bool, preview: bool):
    """
    Map a saved METAR JSON payload onto the configured LEDs.

    \b
    Examples:
      # Save a payload, then render it
      curl -o metars.json "$(ledsectional url)"
      ledsectional render metars.json

      # Show the colors as the strip would receive them
      ledsectional render metars.json --scaled --preview
    """
    try:
        config_obj = load_config(config_path)
        reports = parse_metars(payload.read_text(encoding="utf-8"))
    except LedSectionalError as e:
        fail(e)

    result = update(config_obj, reports)
    state = DisplayState(config_obj.num_leds, config_obj.settings.brightness)
    state.apply(result)
    colors = state.scaled_buffer() if scaled else list(state.buffer)

    by_station = metars_by_station(reports)
    lightning = set(result.lightning_indices)
    for index, (airport, color) in enumerate(zip(config_obj.airports, colors)):
        report = by_station.get(airport.code)
        if airport.special is not None:
            detail = "special"
        elif report is None:
            detail = "no report"
        else:
            detail = f"{report.flight_category.value} wind {report.max_wind()}kt"
        marker = " ⚡" if index in lightning else ""
        click.echo(f"[{index:3d}] {airport.code:<5} {color.to_hex()}  {detail}{marker}")

    if preview:
        ConsoleStrip().show(colors)
