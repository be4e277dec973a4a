"""
Session state shared by the slideshow components.

There is a single writer, the slideshow runner. The presentation layer, the
HUD and the clock only read it.
"""

from dataclasses import dataclass

from .config import DEFAULT_WAIT_TIME_MS


@dataclass
class RunnerState:
    selected_index: int = -1
    last_selected_index: int = -1
    started: bool = False
    first_animation_done: bool = False
    paused: bool = False
    wait_time_ms: int = DEFAULT_WAIT_TIME_MS
    no_photos: bool = False
