"""
Configuration constants for the photo screensaver.

This module centralizes defaults for the slideshow cadence, the clock label,
the accepted photo formats and the display modes so they are easily
accessible and modifiable across the application.
"""

# A tuple of supported photo file extensions (case-insensitive).
# Files with other extensions are never offered to the view pool.
SUPPORTED_IMAGE_EXTENSIONS = ('.png', '.jpg', '.jpeg', '.gif', '.bmp', '.tiff', '.webp')

# Default time in milliseconds between two slideshow ticks.
DEFAULT_WAIT_TIME_MS = 30000

# Delay in milliseconds before the very first tick, so the window can
# finish its initial paint before the entry animation.
DEFAULT_START_DELAY_MS = 2000

# Cadence of the clock label, in milliseconds. Deliberately independent of
# the photo cadence.
TIME_LABEL_INTERVAL_MS = 61 * 1000

# Clock label modes: 0 hides the clock, 1 is 12 hour, 2 is 24 hour.
SHOW_TIME_OFF = 0
SHOW_TIME_12H = 1
SHOW_TIME_24H = 2

# Photo sizing modes. RANDOM picks one of the others once per session.
SIZING_CONTAIN = 0
SIZING_COVER = 1
SIZING_ACTUAL = 2
SIZING_FRAME = 3
SIZING_RANDOM = 4

# Photo transition types. RANDOM picks one of 0..7 once per session.
TRANSITION_COUNT = 8
TRANSITION_RANDOM = 8

# Default logging level for the application.
# Can be 'DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'.
DEFAULT_LOG_LEVEL = 'INFO'

# Name of the optional JSON settings file looked up in the photo folder.
SETTINGS_FILENAME = 'screensaver.json'

# Label shown once the whole pool turned out to be unusable.
NO_PHOTOS_LABEL = 'There are no photos that can be displayed'
