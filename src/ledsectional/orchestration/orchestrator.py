"""
Run loop for the LED sectional.

Coordinates the METAR client, the mapping step, the display state and the
LED strip. All blocking (HTTP, sleeps, strip writes) happens here; the
mapping and display state it drives are pure.

Architecture:
    SectionalOrchestrator (this class)
    ├── MetarClient: fetches reports every request interval
    ├── update(): maps config + reports to a buffer and lightning set
    ├── DisplayState: holds the buffer, flashes lightning
    └── LedStrip: receives brightness-scaled frames
"""

import logging
import time
from collections.abc import Callable
from typing import Optional

from ledsectional.colors import COLORS
from ledsectional.core import DisplayState
from ledsectional.devices import LedStrip
from ledsectional.exceptions import WeatherDataError
from ledsectional.models import Color, SectionalConfig
from ledsectional.services import MetarClient

from .mapping import MappingResult, update

logger = logging.getLogger(__name__)

RETRY_INTERVAL_SECS = 60.0
LIGHTNING_FLASH_SECS = 0.025
TICK_INTERVAL_SECS = 5.0


class SectionalOrchestrator:
    """
    Drives the strip: fetch on a cadence, map, display, animate lightning.

    A failed fetch never touches the mapped buffer. Instead the whole strip
    shows the fetch-error color as an overlay until the next successful
    cycle, which is retried sooner than the normal interval.
    """

    def __init__(
        self,
        config: SectionalConfig,
        strip: LedStrip,
        client: Optional[MetarClient] = None,
        sleep: Callable[[float], None] = time.sleep,
        clock: Callable[[], float] = time.monotonic,
    ):
        """
        Initialize the orchestrator.

        Args:
            config: Sectional configuration (fixed for the session)
            strip: LED strip to write frames to
            client: METAR client (a default one is created if None)
            sleep: Sleep function, injectable for tests
            clock: Monotonic clock, injectable for tests
        """
        self.config = config
        self.strip = strip
        self.client = client or MetarClient()
        self.state = DisplayState(config.num_leds, config.settings.brightness)

        self._sleep = sleep
        self._clock = clock
        self._codes = config.metar_codes()
        self._fetch_interval = float(config.settings.request_interval_secs)
        self._next_fetch_at: Optional[float] = None
        self._status: Optional[Color] = None

        self.last_result: Optional[MappingResult] = None
        self.last_error: Optional[WeatherDataError] = None
        self.cycle_count = 0

    @property
    def status_color(self) -> Optional[Color]:
        """Whole-strip status overlay in effect, or None when showing weather."""
        return self._status

    @property
    def next_fetch_at(self) -> Optional[float]:
        """Clock time of the next fetch; None means immediately."""
        return self._next_fetch_at

    def start(self, network_ready: bool = True) -> None:
        """
        Show boot status on the strip.

        Args:
            network_ready: Go/no-go from whatever brought the network up
        """
        logger.info(
            f"Starting sectional: {self.config.num_leds} LEDs, "
            f"{len(self._codes)} stations, fetch every {self._fetch_interval:.0f}s"
        )
        self.show_status(COLORS.CONNECTING)
        self.show_status(COLORS.CONNECTED if network_ready else COLORS.FETCH_ERROR)

    def show_status(self, color: Color) -> None:
        """Overlay one status color on every LED without touching the buffer."""
        self._status = color
        self.write()

    def fetch_due(self) -> bool:
        """Check whether the next fetch cycle should run now."""
        return self._next_fetch_at is None or self._clock() >= self._next_fetch_at

    def run_cycle(self) -> bool:
        """
        Fetch reports, map them and display the result.

        Returns:
            True if the display was updated, False if the fetch failed
        """
        self.cycle_count += 1
        try:
            reports = self.client.fetch(self._codes)
        except WeatherDataError as e:
            logger.error(f"METAR cycle failed: {e.log_line()}")
            self.last_error = e
            self._next_fetch_at = self._clock() + min(RETRY_INTERVAL_SECS, self._fetch_interval)
            self.show_status(getattr(COLORS, e.fault_status))
            return False

        result = update(self.config, reports)
        self.state.apply(result)
        self.last_result = result
        self.last_error = None
        self._status = None
        self._next_fetch_at = self._clock() + self._fetch_interval
        self.write()
        return True

    def tick(self) -> bool:
        """
        Run one lightning flash if enabled and anything is flashing.

        Returns:
            True if a flash was shown
        """
        if not self.config.settings.do_lightning or self._status is not None:
            return False
        if not self.state.apply_flash():
            return False

        self.write()
        self._sleep(LIGHTNING_FLASH_SECS)
        self.state.restore()
        self.write()
        return True

    def write(self) -> None:
        """Send the current frame, brightness-scaled, to the strip."""
        if self._status is not None:
            frame = [self._status.scaled(self.state.brightness)] * self.state.num_leds
        else:
            frame = self.state.scaled_buffer()
        self.strip.show(frame)

    def run(self, max_iterations: Optional[int] = None) -> None:
        """
        Main loop: fetch when due, animate lightning, sleep.

        Args:
            max_iterations: Stop after this many loop passes (None = forever)
        """
        self.start()
        iterations = 0
        logger.info("Entering main loop")
        while max_iterations is None or iterations < max_iterations:
            if self.fetch_due():
                self.run_cycle()
            self.tick()
            self._sleep(TICK_INTERVAL_SECS)
            iterations += 1

    def shutdown(self) -> None:
        """Blank the strip and release it; a strip that fails to blank is still closed."""
        logger.info("Shutting down sectional")
        try:
            self.strip.show([COLORS.UNKNOWN] * self.state.num_leds)
        except Exception:
            logger.exception("Failed to blank LED strip")
        self.strip.close()
        self.client.close()
