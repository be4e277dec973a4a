from __future__ import annotations
"""
User Input and Event Handling Module.

This module binds the keyboard and mouse controls of the screensaver to
their actions: pausing the show, changing its pace and quitting.
"""

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .app import ScreensaverApp

logger = logging.getLogger(__name__)

# Step, in milliseconds, of the speed controls.
WAIT_TIME_STEP_MS = 5000
MIN_WAIT_TIME_MS = 1000

def bind_controls(app: 'ScreensaverApp'):
    """
    Binds all keyboard shortcuts and mouse events to their handler functions.

    Args:
        app (ScreensaverApp): The main application instance.
    """
    # Playback
    app.window.bind('<space>', lambda e: toggle_pause(app))
    app.window.bind('p', lambda e: toggle_pause(app))

    # Slideshow pace
    app.window.bind('=', lambda e: slow_down(app))
    app.window.bind('+', lambda e: slow_down(app))
    app.window.bind('-', lambda e: speed_up(app))

    # Application Control
    app.window.bind('q', lambda e: app.quit())
    app.window.bind('Q', lambda e: app.quit())
    app.window.bind('<Escape>', lambda e: app.quit())

def toggle_pause(app: 'ScreensaverApp'):
    if app.session is not None:
        app.session.runner.toggle_pause()

def speed_up(app: 'ScreensaverApp'):
    if app.session is None:
        return
    runner = app.session.runner
    runner.set_wait_time_ms(max(MIN_WAIT_TIME_MS, runner.get_wait_time_ms() - WAIT_TIME_STEP_MS))
    logger.info(f"Slideshow interval decreased to {runner.get_wait_time_ms() / 1000:.0f}s")

def slow_down(app: 'ScreensaverApp'):
    if app.session is None:
        return
    runner = app.session.runner
    runner.set_wait_time_ms(runner.get_wait_time_ms() + WAIT_TIME_STEP_MS)
    logger.info(f"Slideshow interval increased to {runner.get_wait_time_ms() / 1000:.0f}s")
