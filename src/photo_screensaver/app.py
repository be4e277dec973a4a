from __future__ import annotations
"""
Main application classes for the photo screensaver.

`ScreensaverSession` assembles the scheduling core for one session: the view
pool, the runner and the clock, plus the detector that declares the pool
exhausted. `ScreensaverApp` hosts a session in a full-screen Tk window.
"""

import logging
import random
import tkinter as tk
from tkinter import messagebox
from pathlib import Path
from typing import Any, Callable, Sequence

from . import config, controls, hud, image_loader, settings as settings_mod
from .display import TkPresentation
from .finder import PhotoFinder
from .runner import PresentationSink, SlideshowRunner
from .scheduler import Scheduler, TkScheduler
from .settings import Settings
from .state import RunnerState
from .time_label import TimeAnnotator
from .views import ViewPool

logger = logging.getLogger(__name__)

class ScreensaverSession:
    """
    One slideshow session over a fixed photo selection.

    The sink may be given later through `attach_sink`, for sinks that need
    the pool before they can be built.
    """

    def __init__(
        self,
        photo_refs: Sequence[Any],
        probe: Callable[[Any], bool],
        scheduler: Scheduler,
        settings: Settings,
        publish_time: Callable[[str], None],
        on_no_photos: Callable[[], None] | None = None,
        on_pause_changed: Callable[[bool], None] | None = None,
    ):
        self.settings = settings
        self.scheduler = scheduler
        self.pool = ViewPool(photo_refs, probe)
        self.state = RunnerState()
        self.time_annotator = TimeAnnotator(
            self.state, scheduler, settings.show_time_mode, publish_time
        )
        self._on_no_photos = on_no_photos
        self.runner = SlideshowRunner(
            self.pool,
            self.state,
            scheduler,
            sink=_NullSink(),
            finder=PhotoFinder(self.pool),
            on_started=self.time_annotator.on_tick,
            on_miss=self.check_exhausted,
            on_no_photos=self._handle_no_photos,
            on_pause_changed=on_pause_changed,
        )

    def attach_sink(self, sink: PresentationSink) -> None:
        self.runner.sink = sink

    def launch(self, delay_ms: int = config.DEFAULT_START_DELAY_MS) -> None:
        """Start the clock and the slideshow."""
        self.time_annotator.initialize()
        self.runner.start(delay_ms, self.settings.transition_base_seconds)

    def check_exhausted(self) -> None:
        """Declare the session out of photos once every slot failed."""
        if self.pool.is_exhausted():
            logger.warning(f"All {len(self.pool)} photos failed to load.")
            self.runner.set_no_photos()

    def stop(self) -> None:
        self.runner.stop()
        self.time_annotator.stop()

    def _handle_no_photos(self) -> None:
        self.time_annotator.stop()
        self.time_annotator.publish('')
        if self._on_no_photos:
            self._on_no_photos()


class _NullSink:
    def render(self, slot_index: int) -> None:
        logger.debug(f"No presentation attached, slot {slot_index} not drawn.")


class ScreensaverApp:
    """
    The full-screen screensaver window.
    """

    def __init__(self, window: tk.Tk, photo_folder: str, settings: Settings,
                 start_delay_ms: int = config.DEFAULT_START_DELAY_MS, shuffle: bool = False,
                 rng: random.Random | None = None):
        self.window = window
        self.photo_folder = Path(photo_folder).resolve()
        self.settings = settings
        self.start_delay_ms = start_delay_ms
        self.shuffle = shuffle
        self.rng = rng

        self.images: list[Path] = []
        self.session: ScreensaverSession | None = None
        self.presentation: TkPresentation | None = None
        self.sizing_mode: int = settings.photo_sizing_mode
        self.transition_type: int = settings.photo_transition_mode

        # UI Elements
        self.canvas = tk.Canvas(self.window, bg='black', highlightthickness=0)
        self.canvas.pack(fill=tk.BOTH, expand=True)

        self.setup()

    def setup(self) -> None:
        """
        Perform the initial setup of the application.

        Loads the candidate photos, builds the session and its presentation,
        sets up the window and binds the controls. If no photos are found, it
        displays an error and closes the application.
        """
        self.images = image_loader.load_images_from_folder(self.photo_folder)
        if not self.images:
            messagebox.showerror("Error", "No photos found in the specified folder.")
            self.window.after(50, self.window.destroy)
            return
        if self.shuffle:
            self.images = image_loader.shuffle_images(self.images, self.rng)

        self.sizing_mode, sizing_type = settings_mod.resolve_sizing_mode(self.settings.photo_sizing_mode, self.rng)
        self.transition_type = settings_mod.resolve_transition_mode(self.settings.photo_transition_mode, self.rng)
        logger.info(f"Photo sizing mode {self.sizing_mode} ({sizing_type or 'actual size'}), transition {self.transition_type}.")

        self.session = ScreensaverSession(
            self.images,
            image_loader.probe_photo,
            TkScheduler(self.window),
            self.settings,
            publish_time=lambda label: hud.update_time_label(self.canvas, label),
            on_no_photos=lambda: hud.show_no_photos(self.canvas, config.NO_PHOTOS_LABEL),
            on_pause_changed=lambda paused: hud.update_paused(self.canvas, paused),
        )
        self.presentation = TkPresentation(self.canvas, self.session.pool, sizing_type)
        self.presentation.is_current_pair = self.session.runner.is_current_pair
        self.session.attach_sink(self.presentation)

        self.window.title("Photo Screensaver")
        self.window.attributes('-fullscreen', True)
        self.window.configure(cursor='none')

        controls.bind_controls(self)
        self.session.launch(self.start_delay_ms)

    def quit(self) -> None:
        """Cleanly shut down the application."""
        logger.info("Quit command received. Closing.")
        if self.session is not None:
            self.session.stop()
        self.window.destroy()

    def run(self) -> None:
        """Start the Tkinter main loop."""
        self.window.mainloop()
