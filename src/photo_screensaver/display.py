"""
Photo Display Module.

This module renders the selected view slot on the Tkinter canvas: it fits
the photo to the screen according to the session's sizing mode, and
robustly creates the PhotoImage objects Tk needs. Only the two slots of the
current transition pair are kept in memory.
"""

import tkinter as tk
from PIL import Image, ImageTk
import base64
import io
import logging
from typing import Callable, cast

from . import image_loader
from .exceptions.screensaver_errors import PhotoLoadError
from .views import ViewPool

logger = logging.getLogger(__name__)

def _resample_filter():
    try:
        return Image.Resampling.LANCZOS
    except AttributeError:
        return 1  # Fallback for older Pillow versions

def resize_image(image: Image.Image, target_width: int, target_height: int) -> Image.Image:
    """
    Resizes a PIL Image to fit within target dimensions while maintaining aspect ratio.

    Args:
        image (Image.Image): The original PIL Image object.
        target_width (int): The maximum width for the resized image.
        target_height (int): The maximum height for the resized image.

    Returns:
        Image.Image: The resized PIL Image. Returns a copy if resizing fails.
    """
    if target_width <= 0 or target_height <= 0:
        logger.warning(f"Resize_image: Invalid target dimensions ({target_width}x{target_height}).")
        return image.copy()

    original_width, original_height = image.width, image.height
    if original_width == 0 or original_height == 0:
        logger.warning(f"Resize_image: Invalid original image dimensions ({original_width}x{original_height}).")
        return image.copy()

    image_aspect_ratio = original_width / original_height
    target_aspect_ratio = target_width / target_height

    new_width, new_height = target_width, target_height
    if image_aspect_ratio > target_aspect_ratio:
        new_height = int(new_width / image_aspect_ratio)
    else:
        new_width = int(new_height * image_aspect_ratio)

    new_width = max(1, new_width)
    new_height = max(1, new_height)

    try:
        return image.resize((new_width, new_height), _resample_filter())
    except Exception as e:
        logger.error(f"Error during image resize: {e}")
        return image.copy()

def cover_image(image: Image.Image, target_width: int, target_height: int) -> Image.Image:
    """
    Scales a PIL Image to fill the target area, cropping the overflow evenly.

    Args:
        image (Image.Image): The original PIL Image object.
        target_width (int): Width of the area to fill.
        target_height (int): Height of the area to fill.

    Returns:
        Image.Image: An image of exactly the target size, or a copy of the
                     original if the dimensions are unusable.
    """
    if target_width <= 0 or target_height <= 0 or image.width == 0 or image.height == 0:
        logger.warning(f"Cover_image: Invalid dimensions ({image.width}x{image.height} -> {target_width}x{target_height}).")
        return image.copy()

    scale = max(target_width / image.width, target_height / image.height)
    scaled_width = max(target_width, round(image.width * scale))
    scaled_height = max(target_height, round(image.height * scale))
    scaled = image.resize((scaled_width, scaled_height), _resample_filter())

    left = (scaled_width - target_width) // 2
    top = (scaled_height - target_height) // 2
    return scaled.crop((left, top, left + target_width, top + target_height))

def fit_image(image: Image.Image, target_width: int, target_height: int, sizing_type: str | None) -> Image.Image:
    """Apply the session's sizing: 'contain', 'cover', or None to keep the photo's own size."""
    if sizing_type == 'contain':
        return resize_image(image, target_width, target_height)
    if sizing_type == 'cover':
        return cover_image(image, target_width, target_height)
    return image

def create_photoimage_robust(image: Image.Image) -> tk.PhotoImage | None:
    """
    Creates a tk.PhotoImage from a PIL Image with error handling.

    Tries ImageTk first and falls back to an in-memory PNG handed to Tk.

    Args:
        image (Image.Image): The PIL Image to convert.

    Returns:
        tk.PhotoImage | None: The created PhotoImage, or None if both methods fail.
    """
    if image.width <= 0 or image.height <= 0:
        logger.error(f"Invalid image dimensions: {image.width}x{image.height}")
        return None

    try:
        return cast(tk.PhotoImage, ImageTk.PhotoImage(image))
    except Exception as e1:
        logger.warning(f"ImageTk.PhotoImage failed: {e1}. Trying BytesIO fallback.")
        try:
            with io.BytesIO() as bio:
                image.save(bio, format='PNG')
                return tk.PhotoImage(data=base64.b64encode(bio.getvalue()))
        except Exception as e2:
            logger.error(f"All PhotoImage creation methods failed. Last error: {e2}")
            return None

def display_static_image(canvas: tk.Canvas, photo: tk.PhotoImage | None) -> None:
    """
    Displays a PhotoImage centered on the canvas, or an error text if there is none.

    Args:
        canvas (tk.Canvas): The canvas to draw on.
        photo (tk.PhotoImage | None): The image to show.
    """
    width, height = canvas_size(canvas)
    canvas.delete("image", "error_text")
    if photo:
        canvas.create_image(width // 2, height // 2, image=photo, anchor=tk.CENTER, tags="image")
        canvas.tag_lower("image")
    else:
        canvas.create_text(
            width // 2, height // 2,
            text="Error displaying photo", fill="red", font=("Helvetica", 16), tags="error_text"
        )

def canvas_size(canvas: tk.Canvas) -> tuple[int, int]:
    """Current canvas size, or the screen size before the canvas is mapped."""
    width, height = canvas.winfo_width(), canvas.winfo_height()
    if width <= 1 or height <= 1:
        width, height = canvas.winfo_screenwidth(), canvas.winfo_screenheight()
    return width, height


class TkPresentation:
    """
    Presentation sink drawing view slots on a Tk canvas.

    ``is_current_pair`` is wired to the runner once it exists; PhotoImages of
    slots outside the current pair are released after each render.
    """

    def __init__(
        self,
        canvas: tk.Canvas,
        pool: ViewPool,
        sizing_type: str | None,
        loader: Callable[..., Image.Image] = image_loader.load_photo,
    ):
        self.canvas = canvas
        self.pool = pool
        self.sizing_type = sizing_type
        self.loader = loader
        self.is_current_pair: Callable[[int], bool] | None = None
        self.photos: dict[int, tk.PhotoImage] = {}

    def render(self, slot_index: int) -> None:
        slot = self.pool[slot_index]
        photo = self.photos.get(slot_index)
        if photo is None:
            try:
                image = self.loader(slot.photo_ref)
                width, height = canvas_size(self.canvas)
                photo = create_photoimage_robust(fit_image(image, width, height, self.sizing_type))
            except (PhotoLoadError, tk.TclError) as e:
                logger.error(f"Error displaying slot {slot_index} '{slot.photo_ref}': {e}")
                photo = None

        try:
            display_static_image(self.canvas, photo)
        except tk.TclError as e:
            logger.error(f"Error drawing slot {slot_index} on the canvas: {e}")
            return

        if photo is not None:
            self.photos[slot_index] = photo
            logger.info(f"Showing slot {slot_index + 1}/{len(self.pool)}: '{slot.photo_ref}'")
        self._evict()

    def _evict(self) -> None:
        if self.is_current_pair is None:
            return
        for idx in list(self.photos):
            if not self.is_current_pair(idx):
                del self.photos[idx]
