# -*- coding: utf-8 -*-
"""
Configuration and fixtures for pytest.

This module defines shared fixtures used across the test suite for the photo
screensaver. Fixtures include temporary photo folders, scripted view pools
driven by a simulated clock, mocking of GUI components (Tkinter), and
logging setup.
"""

import logging
from pathlib import Path
from typing import Iterator

import pytest
from PIL import Image

from photo_screensaver.runner import SlideshowRunner
from photo_screensaver.scheduler import SimulatedScheduler
from photo_screensaver.state import RunnerState
from photo_screensaver.views import ViewPool


class ScriptedProbe:
    """
    Render probe answering from a per-photo script.

    Photos missing from ``outcomes`` render fine. Every call is recorded so
    tests can check which photos were probed, and how often.
    """

    def __init__(self, outcomes=None):
        self.outcomes = dict(outcomes or {})
        self.calls = []

    def __call__(self, photo_ref):
        self.calls.append(photo_ref)
        return self.outcomes.get(photo_ref, True)


class RecordingSink:
    """Presentation sink remembering every rendered slot."""

    def __init__(self):
        self.rendered = []

    def render(self, slot_index):
        self.rendered.append(slot_index)


def make_pool(size, outcomes=None):
    """Build a pool of photos named ``photo0``..``photoN-1`` with a scripted probe."""
    probe = ScriptedProbe(outcomes)
    pool = ViewPool([f"photo{i}" for i in range(size)], probe)
    return pool, probe


@pytest.fixture
def pool_factory():
    """Factory for scripted pools, see `make_pool`."""
    return make_pool


@pytest.fixture
def scheduler():
    """A simulated scheduler starting at t=0."""
    return SimulatedScheduler()


@pytest.fixture
def sink():
    return RecordingSink()


@pytest.fixture
def build_runner(scheduler, sink):
    """
    Factory fixture assembling a runner over a scripted pool.

    Returns:
        Callable: ``build(size, outcomes=None, **hooks)`` returning
        ``(runner, pool, probe)``.
    """
    def build(size, outcomes=None, **hooks):
        pool, probe = make_pool(size, outcomes)
        runner = SlideshowRunner(pool, RunnerState(), scheduler, sink, **hooks)
        return runner, pool, probe
    return build


@pytest.fixture
def tmp_photo_dir(tmp_path: Path) -> Iterator[Path]:
    """
    Create a temporary photo folder with two good photos and one broken one.

    Yields:
        Path: The folder holding 'a_good.png', 'b_broken.jpg' and 'c_good.png'.
    """
    data_dir = tmp_path / "photos"
    data_dir.mkdir()
    Image.new('RGB', (100, 100), color='red').save(data_dir / "a_good.png", 'PNG')
    (data_dir / "b_broken.jpg").write_bytes(b"this is not a jpeg")
    Image.new('RGBA', (60, 40), color=(0, 0, 255, 128)).save(data_dir / "c_good.png", 'PNG')
    yield data_dir


@pytest.fixture
def patch_tk(mocker):
    """
    Patch the Tkinter module to avoid GUI instantiation during tests.

    This fixture patches 'tkinter.Tk' and 'tkinter.Canvas' to be MagicMock objects.
    This prevents actual windows from being created, which is essential for running
    tests in a headless environment.

    Returns:
        dict: A dictionary containing the mocked 'Tk' and 'Canvas' classes.
    """
    mock_tk = mocker.patch('tkinter.Tk', autospec=True)
    mock_canvas = mocker.patch('tkinter.Canvas', autospec=True)
    return {
        "Tk": mock_tk,
        "Canvas": mock_canvas,
    }


@pytest.fixture
def dummy_canvas(patch_tk):
    """
    Provide a dummy Tkinter Canvas instance sized 800x600.
    """
    canvas = patch_tk["Canvas"].return_value
    canvas.winfo_width.return_value = 800
    canvas.winfo_height.return_value = 600
    return canvas


@pytest.fixture
def caplog_info(caplog):
    """
    Set the logging level to INFO for the duration of a test.
    """
    caplog.set_level(logging.INFO)
    return caplog
