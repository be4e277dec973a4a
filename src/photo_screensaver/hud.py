"""
Heads-Up Display (HUD) Module.

This module draws the overlays of the screensaver on top of the photos: the
clock label, the paused indicator and the "no photos" message.
"""

import tkinter as tk
import logging

from .display import canvas_size

# Get a logger instance for this module
logger = logging.getLogger(__name__)

HUD_FONT = ("Helvetica", 28, "bold")
MESSAGE_FONT = ("Helvetica", 20)

def update_time_label(canvas: tk.Canvas, label: str) -> None:
    """
    Redraws the clock label in the bottom-right corner.

    An empty label removes the clock, which is how it stays hidden until the
    first photo is shown.

    Args:
        canvas (tk.Canvas): The canvas to draw on.
        label (str): The formatted time, or an empty string.
    """
    canvas.delete("time_label")
    if not label:
        return
    width, height = canvas_size(canvas)
    padding = 16
    canvas.create_text(
        width - padding, height - padding,
        text=label, anchor='se', fill="white", font=HUD_FONT, tags="time_label"
    )

def update_paused(canvas: tk.Canvas, paused: bool) -> None:
    """Shows or hides the paused indicator in the top-left corner."""
    canvas.delete("paused_label")
    if not paused:
        return
    canvas.create_text(
        16, 16, text="Paused", anchor='nw', fill="white", font=HUD_FONT, tags="paused_label"
    )

def show_no_photos(canvas: tk.Canvas, label: str) -> None:
    """
    Replaces the slideshow with the "no photos" message.

    Args:
        canvas (tk.Canvas): The canvas to draw on.
        label (str): The message to show.
    """
    logger.debug("Showing the no photos message.")
    canvas.delete("all")
    width, height = canvas_size(canvas)
    canvas.create_text(
        width // 2, height // 2,
        text=label, anchor=tk.CENTER, fill="white", font=MESSAGE_FONT, tags="no_photos_label"
    )
