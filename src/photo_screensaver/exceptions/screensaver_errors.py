"""
Domain-specific errors for the photo screensaver.

This module defines a hierarchy of custom exceptions that are specific to the
screensaver's domain logic. Routine photo failures are absorbed by the
scheduling core; these exceptions mark the points where a failure has to
cross a module boundary.
"""

class ScreensaverError(Exception):
    """Base class for all screensaver domain errors.

    This exception should not be raised directly. Instead, subclass it to create
    more specific error types.
    """

class PhotoLoadError(ScreensaverError):
    """Raised when a candidate photo cannot be opened or decoded."""


class EmptyPoolError(ScreensaverError):
    """Raised when a view pool is built from an empty photo selection."""


class SettingsError(ScreensaverError):
    """Raised when a settings value is out of range."""
