"""
Photo Discovery and Loading Module.

This module is responsible for discovering candidate photos in a directory,
ordering them for a session, and loading them with Pillow. Loading doubles
as the render probe of the view pool: a photo that cannot be opened and
decoded is never shown.
"""

from __future__ import annotations

import logging
import random
from pathlib import Path

from PIL import Image

from .config import SUPPORTED_IMAGE_EXTENSIONS
from .exceptions.screensaver_errors import PhotoLoadError

logger = logging.getLogger(__name__)

def load_images_from_folder(image_folder: Path) -> list[Path]:
    """
    Scan a directory recursively for supported photo files.

    Only the file name is checked here; whether a file really decodes is
    settled later, when its slot is probed.

    Args:
        image_folder: The directory path to scan for photos.

    Returns:
        A sorted list of Path objects for all candidate photos found.
        Returns an empty list if the folder doesn't exist or nothing is found.
    """
    if not image_folder.is_dir():
        logger.error(f"The specified photo folder '{image_folder}' does not exist or is not a directory.")
        return []

    logger.info(f"Scanning for photos in: {image_folder}")

    raw_image_list = [
        item for item in image_folder.rglob('*')
        if item.is_file() and \
           item.name.lower().endswith(SUPPORTED_IMAGE_EXTENSIONS) and \
           not item.name.startswith('.')
    ]

    if not raw_image_list:
        logger.warning(f"No photos found in '{image_folder}' with supported extensions.")
        return []

    # Initial sort is by full path, which is deterministic
    sorted_images = sorted(raw_image_list)
    logger.info(f"Found {len(sorted_images)} candidate photos.")
    return sorted_images

def shuffle_images(images: list[Path], rng: random.Random | None = None) -> list[Path]:
    """
    Return a shuffled copy of the photo list.

    Args:
        images: The photo paths to shuffle.
        rng: Random source, for a reproducible order.

    Returns:
        A new list with the same photos in random order.
    """
    shuffled = list(images)
    (rng or random).shuffle(shuffled)
    logger.info(f"Shuffled {len(shuffled)} photos.")
    return shuffled

def load_photo(image_path: Path) -> Image.Image:
    """
    Open and fully decode a photo, converted to RGB.

    Args:
        image_path: The photo to load.

    Returns:
        The decoded image in RGB mode.

    Raises:
        PhotoLoadError: If the file is missing, unreadable or not a
                        supported image.
    """
    try:
        image = Image.open(image_path)
        image.load()  # Force decoding now so broken data fails here
    except (OSError, SyntaxError, ValueError, Image.DecompressionBombError) as e:
        raise PhotoLoadError(f"Cannot load photo '{image_path}': {e}") from e

    # RGB is the most reliable mode for all subsequent operations including ImageTk
    if image.mode != 'RGB':
        logger.debug(f"Converting photo from mode '{image.mode}' to 'RGB'.")
        # Handle transparency by adding a white background
        if image.mode in ('RGBA', 'LA') or 'transparency' in image.info:
            background = Image.new('RGB', image.size, (255, 255, 255))
            if image.mode == 'P':
                image = image.convert('RGBA')
            background.paste(image, mask=image.split()[-1] if image.mode in ('RGBA', 'LA') else None)
            image = background
        else:
            image = image.convert('RGB')
    return image

def probe_photo(image_path: Path) -> bool:
    """
    Render probe for a view slot.

    Args:
        image_path: The photo to check.

    Returns:
        True if the photo loads, False otherwise.
    """
    try:
        load_photo(image_path).close()
    except PhotoLoadError as e:
        logger.debug(f"Probe failed: {e}")
        return False
    return True
