"""
Timer Scheduling Module.

The slideshow never sleeps or busy-waits: every periodic task re-arms a
one-shot timer at the end of its run. This module provides the two timer
sources used by the application, one on top of the Tkinter event loop and a
simulated clock for headless runs and tests.
"""

from __future__ import annotations

import heapq
import itertools
import logging
import tkinter as tk
from typing import Any, Callable, Protocol

logger = logging.getLogger(__name__)


class Scheduler(Protocol):
    """Minimal one-shot timer interface."""

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> Any:
        ...

    def cancel(self, handle: Any) -> None:
        ...


class TkScheduler:
    """Scheduler backed by ``after`` / ``after_cancel`` of a Tk widget."""

    def __init__(self, widget: tk.Misc):
        self.widget = widget

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> str:
        return self.widget.after(int(delay_ms), callback)

    def cancel(self, handle: str | None) -> None:
        if handle is None:
            return
        try:
            self.widget.after_cancel(handle)
        except tk.TclError as e:
            # The widget may already be destroyed during teardown.
            logger.debug(f"Could not cancel timer '{handle}': {e}")


class SimulatedScheduler:
    """
    Deterministic scheduler driven by a virtual clock.

    Nothing runs until :meth:`advance` moves the clock forward. Callbacks due
    at the same time fire in the order they were scheduled, and a callback
    scheduled while advancing fires within the same call if it falls due.
    """

    def __init__(self) -> None:
        self.now_ms: int = 0
        self._queue: list[tuple[int, int, Callable[[], None]]] = []
        self._cancelled: set[int] = set()
        self._ids = itertools.count(1)

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> int:
        handle = next(self._ids)
        heapq.heappush(self._queue, (self.now_ms + max(0, int(delay_ms)), handle, callback))
        return handle

    def cancel(self, handle: int | None) -> None:
        if handle is None:
            return
        if any(entry[1] == handle for entry in self._queue):
            self._cancelled.add(handle)

    def pending(self) -> int:
        """Number of timers still waiting to fire."""
        return sum(1 for _, handle, _ in self._queue if handle not in self._cancelled)

    def advance(self, delay_ms: int) -> int:
        """
        Move the virtual clock forward and fire every callback that falls due.

        Args:
            delay_ms: How far to move the clock, in milliseconds.

        Returns:
            The number of callbacks that were run.
        """
        target = self.now_ms + int(delay_ms)
        fired = 0
        while self._queue and self._queue[0][0] <= target:
            due, handle, callback = heapq.heappop(self._queue)
            if handle in self._cancelled:
                self._cancelled.discard(handle)
                continue
            self.now_ms = due
            callback()
            fired += 1
        self.now_ms = target
        return fired
