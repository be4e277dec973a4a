# -*- coding: utf-8 -*-
"""
Unit tests for the display module.

This module tests photo fitting, robust PhotoImage creation and the Tk
presentation sink.
"""

import tkinter as tk
import pytest
from PIL import Image
from unittest.mock import patch, MagicMock

from photo_screensaver import display
from photo_screensaver.exceptions.screensaver_errors import PhotoLoadError

# --- Fixtures ---

@pytest.fixture
def sample_image():
    """Provides a sample PIL Image for testing."""
    return Image.new('RGB', (200, 100), color='blue')

@pytest.fixture
def canvas():
    canvas = MagicMock()
    canvas.winfo_width.return_value = 800
    canvas.winfo_height.return_value = 600
    return canvas

# --- Tests for resize_image ---

def test_resize_image_width_limited(sample_image):
    resized = display.resize_image(sample_image, 100, 100)
    assert resized.size == (100, 50)

def test_resize_image_height_limited(sample_image):
    resized = display.resize_image(sample_image, 300, 40)
    assert resized.size == (80, 40)

def test_resize_image_invalid_target_dims(sample_image, caplog):
    resized = display.resize_image(sample_image, 0, -10)
    assert resized.size == sample_image.size
    assert "Invalid target dimensions" in caplog.text

# --- Tests for cover_image and fit_image ---

def test_cover_image_fills_and_crops(sample_image):
    covered = display.cover_image(sample_image, 100, 100)
    assert covered.size == (100, 100)

def test_cover_image_upscales_small_photo(sample_image):
    covered = display.cover_image(sample_image, 800, 600)
    assert covered.size == (800, 600)

@pytest.mark.parametrize(
    "sizing_type, expected_size",
    [
        ('contain', (400, 200)),
        ('cover', (400, 400)),
        (None, (200, 100)),
    ],
)
def test_fit_image(sample_image, sizing_type, expected_size):
    assert display.fit_image(sample_image, 400, 400, sizing_type).size == expected_size

# --- Tests for create_photoimage_robust ---

@patch('photo_screensaver.display.ImageTk.PhotoImage')
def test_create_photoimage_robust_success_primary(mock_photoimage, sample_image):
    mock_instance = MagicMock()
    mock_photoimage.return_value = mock_instance

    result = display.create_photoimage_robust(sample_image)

    mock_photoimage.assert_called_once_with(sample_image)
    assert result == mock_instance

@patch('photo_screensaver.display.tk.PhotoImage')
@patch('photo_screensaver.display.ImageTk.PhotoImage', side_effect=Exception("Primary failed"))
def test_create_photoimage_robust_fallback_bytesio(mock_imagetk_pi, mock_tk_pi, sample_image, caplog):
    mock_instance = MagicMock()
    mock_tk_pi.return_value = mock_instance

    result = display.create_photoimage_robust(sample_image)

    assert "Trying BytesIO fallback" in caplog.text
    mock_tk_pi.assert_called_once()
    assert result == mock_instance

@patch('photo_screensaver.display.ImageTk.PhotoImage', side_effect=Exception("Primary failed"))
@patch('photo_screensaver.display.tk.PhotoImage', side_effect=Exception("All fallbacks failed"))
def test_create_photoimage_robust_all_fail(mock_tk_pi, mock_imagetk_pi, sample_image, caplog):
    result = display.create_photoimage_robust(sample_image)

    assert result is None
    assert "All PhotoImage creation methods failed" in caplog.text

# --- Tests for display_static_image ---

def test_display_static_image_centers_photo(canvas):
    photo = MagicMock()
    display.display_static_image(canvas, photo)

    canvas.create_image.assert_called_once_with(400, 300, image=photo, anchor=tk.CENTER, tags="image")
    canvas.create_text.assert_not_called()

def test_display_static_image_error_text(canvas):
    display.display_static_image(canvas, None)

    canvas.create_image.assert_not_called()
    assert canvas.create_text.call_args.kwargs['text'] == "Error displaying photo"

def test_canvas_size_falls_back_to_screen(canvas):
    canvas.winfo_width.return_value = 1
    canvas.winfo_height.return_value = 1
    canvas.winfo_screenwidth.return_value = 1920
    canvas.winfo_screenheight.return_value = 1080

    assert display.canvas_size(canvas) == (1920, 1080)

# --- Tests for TkPresentation ---

@pytest.fixture
def presentation(canvas, pool_factory, sample_image, mocker):
    pool, _ = pool_factory(4)
    mocker.patch('photo_screensaver.display.create_photoimage_robust', side_effect=lambda image: MagicMock())
    loader = MagicMock(return_value=sample_image)
    return display.TkPresentation(canvas, pool, 'contain', loader=loader)

def test_render_loads_and_draws_slot(presentation, canvas):
    presentation.render(2)

    presentation.loader.assert_called_once_with("photo2")
    canvas.create_image.assert_called_once()
    assert 2 in presentation.photos

def test_render_reuses_photo_of_current_pair(presentation):
    presentation.render(1)
    presentation.render(1)
    presentation.loader.assert_called_once_with("photo1")

def test_render_keeps_only_current_pair(presentation):
    pair = {0, 1}
    presentation.is_current_pair = lambda idx: idx in pair
    presentation.render(0)
    presentation.render(1)
    assert set(presentation.photos) == {0, 1}

    pair = {1, 2}
    presentation.render(2)
    assert set(presentation.photos) == {1, 2}

def test_render_load_failure_shows_error(presentation, canvas, caplog):
    presentation.loader.side_effect = PhotoLoadError("gone")

    presentation.render(3)

    assert "Error displaying slot 3" in caplog.text
    canvas.create_image.assert_not_called()
    assert 3 not in presentation.photos
