"""Run the sectional loop."""

import logging

import click

from ledsectional.devices import ConsoleStrip, MemoryStrip
from ledsectional.exceptions import LedSectionalError
from ledsectional.orchestration import SectionalOrchestrator

from ._common import config_option, fail, load_config

logger = logging.getLogger(__name__)

STRIPS = {
    "console": ConsoleStrip,
    "memory": MemoryStrip,
}


@click.command(name="run")
@config_option
@click.option(
    '--strip',
    type=click.Choice(sorted(STRIPS), case_sensitive=False),
    default='console',
    help='LED output to drive (default: console preview)'
)
@click.option(
    '--once',
    is_flag=True,
    help='Fetch and display a single cycle, then exit'
)
def run(config_path, strip: str, once: bool):
    """
    Fetch METARs on the configured interval and drive the LED strip.

    \b
    Examples:
      # Preview in the terminal with the default config
      ledsectional run

      # One fetch with a specific config file
      ledsectional run --config ./cfg.toml --once
    """
    try:
        config_obj = load_config(config_path)
    except LedSectionalError as e:
        fail(e)

    orchestrator = SectionalOrchestrator(config_obj, STRIPS[strip.lower()]())
    try:
        if once:
            orchestrator.start()
            if not orchestrator.run_cycle():
                fail(orchestrator.last_error)
        else:
            orchestrator.run()
    except KeyboardInterrupt:
        logger.info("Sectional interrupted by user")
        click.echo("\nShutting down...", err=True)
    finally:
        orchestrator.shutdown()
