"""
Clock label handling for the screensaver.

The clock runs on its own cadence, unrelated to how fast photos rotate, and
stays hidden until the first photo is on screen.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Callable

from . import config
from .scheduler import Scheduler
from .state import RunnerState

logger = logging.getLogger(__name__)


def format_short_time(moment: datetime, show_time_mode: int) -> str:
    """
    Format ``moment`` as a short clock string.

    Args:
        moment: The time to format.
        show_time_mode: ``SHOW_TIME_12H`` for ``3:07``, anything else for ``15:07``.

    Returns:
        The hours and minutes, without seconds or an AM/PM marker.
    """
    if show_time_mode == config.SHOW_TIME_12H:
        hour = moment.hour % 12 or 12
        return f"{hour}:{moment.minute:02d}"
    return f"{moment.hour:02d}:{moment.minute:02d}"


class TimeAnnotator:
    """Publishes the clock label while the show is running."""

    def __init__(
        self,
        state: RunnerState,
        scheduler: Scheduler,
        show_time_mode: int,
        publish: Callable[[str], None],
        clock: Callable[[], datetime] = datetime.now,
        interval_ms: int = config.TIME_LABEL_INTERVAL_MS,
    ):
        self.state = state
        self.scheduler = scheduler
        self.show_time_mode = show_time_mode
        self.publish = publish
        self.clock = clock
        self.interval_ms = interval_ms
        self.timer_id: Any = None

    @property
    def enabled(self) -> bool:
        return self.show_time_mode != config.SHOW_TIME_OFF

    def initialize(self) -> None:
        """Register the periodic clock update when the time display is on."""
        self.stop()
        if self.show_time_mode > 0:
            self.timer_id = self.scheduler.call_later(self.interval_ms, self._run)
            logger.debug(f"Clock label enabled, updating every {self.interval_ms} ms.")

    def on_tick(self) -> None:
        """Publish the current label: the time once started, else empty."""
        if self.enabled and self.state.started:
            self.publish(format_short_time(self.clock(), self.show_time_mode))
        else:
            self.publish('')

    def stop(self) -> None:
        if self.timer_id is not None:
            self.scheduler.cancel(self.timer_id)
            self.timer_id = None

    def _run(self) -> None:
        try:
            self.on_tick()
        finally:
            self.timer_id = self.scheduler.call_later(self.interval_ms, self._run)
