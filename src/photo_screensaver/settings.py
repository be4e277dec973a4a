"""
Session settings for the screensaver.

Settings are read once when a session is set up and never re-read while the
show runs. They come from an optional JSON file in the photo folder, with
command-line values taking precedence.
"""

from __future__ import annotations

import json
import logging
import random
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Mapping

from . import config
from .exceptions.screensaver_errors import SettingsError

logger = logging.getLogger(__name__)

# JSON keys and the Settings fields they feed.
_JSON_KEYS = {
    'transitionBaseSeconds': 'transition_base_seconds',
    'showTimeMode': 'show_time_mode',
    'photoSizingMode': 'photo_sizing_mode',
    'photoTransitionMode': 'photo_transition_mode',
}


@dataclass(frozen=True)
class Settings:
    transition_base_seconds: int | None = None
    show_time_mode: int = config.SHOW_TIME_OFF
    photo_sizing_mode: int = config.SIZING_CONTAIN
    photo_transition_mode: int = 0

    def __post_init__(self) -> None:
        base = self.transition_base_seconds
        if base is not None and (not isinstance(base, int) or isinstance(base, bool) or base <= 0):
            raise SettingsError(f"transitionBaseSeconds must be a positive integer, got {base!r}.")
        _check_range('showTimeMode', self.show_time_mode, config.SHOW_TIME_OFF, config.SHOW_TIME_24H)
        _check_range('photoSizingMode', self.photo_sizing_mode, config.SIZING_CONTAIN, config.SIZING_RANDOM)
        _check_range('photoTransitionMode', self.photo_transition_mode, 0, config.TRANSITION_RANDOM)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> 'Settings':
        """Build settings from a mapping using the JSON key names; unknown keys are ignored."""
        kwargs = {field: data[key] for key, field in _JSON_KEYS.items() if data.get(key) is not None}
        return cls(**kwargs)

    def merged(self, **overrides: Any) -> 'Settings':
        """Return a copy with every non-None override applied."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})


def _check_range(name: str, value: Any, low: int, high: int) -> None:
    if not isinstance(value, int) or isinstance(value, bool) or not low <= value <= high:
        raise SettingsError(f"{name} must be an integer between {low} and {high}, got {value!r}.")


def load_settings(settings_file: Path) -> Settings:
    """
    Load settings from a JSON file.

    A missing or unreadable file is not an error: the defaults are used.
    Values that are present but out of range are.

    Args:
        settings_file: Path to the JSON settings file.

    Returns:
        The loaded settings.

    Raises:
        SettingsError: If the file holds invalid values.
    """
    if not settings_file.exists():
        logger.debug(f"Settings file not found: {settings_file}. Using defaults.")
        return Settings()

    try:
        with open(settings_file, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.error(f"Error reading settings from '{settings_file}': {e}. Using defaults.")
        return Settings()

    if not isinstance(data, dict):
        logger.error(f"Settings file '{settings_file}' does not hold a JSON object. Using defaults.")
        return Settings()

    settings = Settings.from_mapping(data)
    logger.info(f"Loaded settings from {settings_file}.")
    return settings


def resolve_sizing_mode(mode: int, rng: random.Random | None = None) -> tuple[int, str | None]:
    """
    Turn a configured sizing mode into the mode used for this session.

    Args:
        mode: Configured sizing mode; ``SIZING_RANDOM`` picks one of the others.
        rng: Random source, for reproducible picks.

    Returns:
        The effective mode and its fit: ``'contain'``, ``'cover'`` or None
        for modes shown at their own size.
    """
    rng = rng or random
    if mode == config.SIZING_RANDOM:
        mode = rng.randint(config.SIZING_CONTAIN, config.SIZING_FRAME)
    if mode == config.SIZING_CONTAIN:
        return mode, 'contain'
    if mode == config.SIZING_COVER:
        return mode, 'cover'
    return mode, None


def resolve_transition_mode(mode: int, rng: random.Random | None = None) -> int:
    """Turn a configured transition type into this session's; ``TRANSITION_RANDOM`` picks one."""
    rng = rng or random
    if mode == config.TRANSITION_RANDOM:
        return rng.randint(0, config.TRANSITION_COUNT - 1)
    return mode
