# -*- coding: utf-8 -*-
"""
Unit tests for the controls module.
"""

from unittest.mock import MagicMock

import pytest

from photo_screensaver import controls


@pytest.fixture
def mock_app():
    """Fixture to create a mock application instance with a running session."""
    app = MagicMock()
    app.window = MagicMock()
    app.session.runner.get_wait_time_ms.return_value = 30000
    return app


def test_bind_controls_registers_keys(mock_app):
    controls.bind_controls(mock_app)

    bound = {c.args[0] for c in mock_app.window.bind.call_args_list}
    assert {'<space>', 'p', '+', '=', '-', 'q', 'Q', '<Escape>'} <= bound


def test_space_toggles_pause(mock_app):
    controls.bind_controls(mock_app)
    handlers = {c.args[0]: c.args[1] for c in mock_app.window.bind.call_args_list}

    handlers['<space>'](MagicMock())

    mock_app.session.runner.toggle_pause.assert_called_once_with()


def test_escape_quits(mock_app):
    controls.bind_controls(mock_app)
    handlers = {c.args[0]: c.args[1] for c in mock_app.window.bind.call_args_list}

    handlers['<Escape>'](MagicMock())

    mock_app.quit.assert_called_once_with()


def test_speed_up_shortens_interval(mock_app):
    controls.speed_up(mock_app)
    mock_app.session.runner.set_wait_time_ms.assert_called_once_with(25000)


def test_speed_up_has_a_floor(mock_app):
    mock_app.session.runner.get_wait_time_ms.return_value = 2000
    controls.speed_up(mock_app)
    mock_app.session.runner.set_wait_time_ms.assert_called_once_with(controls.MIN_WAIT_TIME_MS)


def test_slow_down_lengthens_interval(mock_app):
    controls.slow_down(mock_app)
    mock_app.session.runner.set_wait_time_ms.assert_called_once_with(35000)


def test_controls_ignored_without_session(mock_app):
    mock_app.session = None
    controls.toggle_pause(mock_app)
    controls.speed_up(mock_app)
    controls.slow_down(mock_app)
