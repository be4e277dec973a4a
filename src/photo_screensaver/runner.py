"""
Slideshow Runner.

This module drives the show: a tick fires every ``wait_time_ms``, asks the
finder for the next displayable slot, updates the selection pair and tells
the presentation sink to show it, then re-arms its own timer. A miss simply
waits for the next tick; only an explicit :meth:`SlideshowRunner.set_no_photos`
ends the loop.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Protocol

from . import config
from .finder import NOT_FOUND, PhotoFinder
from .scheduler import Scheduler
from .state import RunnerState
from .views import ViewPool

logger = logging.getLogger(__name__)


class PresentationSink(Protocol):
    """Receives "show slot K now" commands."""

    def render(self, slot_index: int) -> None:
        ...


class SlideshowRunner:
    """
    Owns the timed selection loop of one slideshow session.

    Hooks are plain callables, all optional:

    - ``on_started()``: the first photo was selected, refresh the clock.
    - ``on_miss()``: a tick found nothing to show.
    - ``on_no_photos()``: the session entered its terminal state.
    - ``on_pause_changed(paused)``: pause state toggled.
    """

    def __init__(
        self,
        pool: ViewPool,
        state: RunnerState,
        scheduler: Scheduler,
        sink: PresentationSink,
        finder: PhotoFinder | None = None,
        on_started: Callable[[], None] | None = None,
        on_miss: Callable[[], None] | None = None,
        on_no_photos: Callable[[], None] | None = None,
        on_pause_changed: Callable[[bool], None] | None = None,
    ):
        self.pool = pool
        self.state = state
        self.scheduler = scheduler
        self.sink = sink
        self.finder = finder if finder is not None else PhotoFinder(pool)
        self.on_started = on_started
        self.on_miss = on_miss
        self.on_no_photos = on_no_photos
        self.on_pause_changed = on_pause_changed
        self.timer_id: Any = None

    def start(self, initial_delay_ms: int = config.DEFAULT_START_DELAY_MS,
              transition_base_seconds: int | None = None) -> None:
        """
        Start the slideshow.

        Args:
            initial_delay_ms: Delay before the first tick, so the first
                              paint can settle.
            transition_base_seconds: Configured interval between photos. When
                                     given, it overrides the wait time.
        """
        if self.state.no_photos:
            logger.warning("Slideshow not started: no usable photos in this session.")
            return
        if transition_base_seconds:
            self.set_wait_time_ms(int(transition_base_seconds) * 1000)
        self._cancel_timer()
        self.timer_id = self.scheduler.call_later(initial_delay_ms, self.tick)
        logger.info(
            f"Slideshow starting in {initial_delay_ms} ms, "
            f"{len(self.pool)} slots, {self.state.wait_time_ms} ms per photo."
        )

    def tick(self) -> None:
        """Run one selection step and re-arm the timer."""
        self.timer_id = None
        if self.state.no_photos:
            return
        try:
            if self.state.paused:
                logger.debug("Slideshow paused, keeping current photo.")
            else:
                self._advance()
        finally:
            if not self.state.no_photos:
                self.timer_id = self.scheduler.call_later(self.state.wait_time_ms, self.tick)

    def _advance(self) -> None:
        state = self.state
        cur_idx = state.selected_index if state.started else 0
        prev_idx = self.pool.prev_index(cur_idx)
        next_idx = self.pool.next_index(cur_idx)

        if not state.started:
            # The first photo is selected in place so its entry animation runs.
            next_idx = cur_idx
        elif not state.first_animation_done:
            state.first_animation_done = True

        current = cur_idx if state.started else -1
        found = self.finder.find_next(next_idx, state.last_selected_index, prev_idx, current)
        if found == NOT_FOUND:
            logger.debug("No displayable photo this tick, retrying next interval.")
            if self.on_miss:
                self.on_miss()
            return

        if not state.started:
            state.started = True
            logger.info("First photo selected, slideshow started.")
            if self.on_started:
                self.on_started()

        state.last_selected_index = state.selected_index
        state.selected_index = found
        logger.debug(f"Selected slot {found} (previous {state.last_selected_index}).")
        self.sink.render(found)

    def pause(self) -> None:
        self._set_paused(True)

    def resume(self) -> None:
        self._set_paused(False)

    def toggle_pause(self) -> None:
        self._set_paused(not self.state.paused)

    def _set_paused(self, paused: bool) -> None:
        if self.state.paused == paused:
            return
        self.state.paused = paused
        logger.info(f"Slideshow {'paused' if paused else 'resumed'}.")
        if self.on_pause_changed:
            self.on_pause_changed(paused)

    def get_wait_time_ms(self) -> int:
        return self.state.wait_time_ms

    def set_wait_time_ms(self, wait_time_ms: int) -> None:
        """Set the interval used by future reschedules; a pending tick keeps its time."""
        if isinstance(wait_time_ms, bool) or not isinstance(wait_time_ms, int) or wait_time_ms <= 0:
            raise ValueError(f"Wait time must be a positive number of milliseconds, got {wait_time_ms!r}.")
        self.state.wait_time_ms = wait_time_ms

    def set_no_photos(self) -> None:
        """Enter the terminal state: no tick will run again this session."""
        self._cancel_timer()
        if self.state.no_photos:
            return
        self.state.no_photos = True
        logger.error("No usable photos left, stopping the slideshow.")
        if self.on_no_photos:
            self.on_no_photos()

    def stop(self) -> None:
        """Tear down the session timer."""
        self._cancel_timer()
        logger.debug("Slideshow timer stopped.")

    def is_started(self) -> bool:
        return self.state.started

    def is_animating(self) -> bool:
        """True once the first full transition cycle has run."""
        return self.state.first_animation_done

    def is_current_pair(self, idx: int) -> bool:
        """Is ``idx`` one of the two slots taking part in the current transition."""
        return idx == self.state.selected_index or idx == self.state.last_selected_index

    def _cancel_timer(self) -> None:
        if self.timer_id is not None:
            self.scheduler.cancel(self.timer_id)
            self.timer_id = None
