"""
Command-Line Interface for the photo screensaver.

This module handles parsing of command-line arguments, sets up logging,
loads the session settings, and runs either the full-screen screensaver or
a headless simulation of the slideshow on a virtual clock.
"""

import argparse
import tkinter as tk
import logging
import coloredlogs
import sys
import importlib.metadata
from pathlib import Path

from .app import ScreensaverApp, ScreensaverSession
from . import config, image_loader
from .exceptions.screensaver_errors import ScreensaverError
from .scheduler import SimulatedScheduler
from .settings import Settings, load_settings

# Setup a dedicated logger for this application
logger = logging.getLogger(__name__)

class PrintingSink:
    """Presentation sink of the simulation: prints each selected photo."""

    def __init__(self, session: ScreensaverSession, scheduler: SimulatedScheduler):
        self.session = session
        self.scheduler = scheduler
        self.shown: list[int] = []

    def render(self, slot_index: int) -> None:
        self.shown.append(slot_index)
        photo = self.session.pool[slot_index].photo_ref
        print(f"{self.scheduler.now_ms / 1000:>10.1f}s  slot {slot_index:>4}  {photo}")

def positive_int(value: str) -> int:
    """argparse type for counts that must be at least 1."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: '{value}'")
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="A full-screen photo screensaver that skips photos it cannot show.",
        formatter_class=argparse.RawTextHelpFormatter
    )
    parser.add_argument(
        "-v", "--version",
        action="version",
        version=f"%(prog)s {importlib.metadata.version('photo-screensaver')}",
        help="Show the version number and exit."
    )
    parser.add_argument(
        "photo_folder",
        type=str,
        help="The folder containing the photos to display."
    )
    parser.add_argument(
        "-t", "--transition-time",
        type=int,
        default=None,
        metavar='SECONDS',
        help=f"Seconds between photos. Default: {config.DEFAULT_WAIT_TIME_MS // 1000}"
    )
    parser.add_argument(
        "--start-delay",
        type=int,
        default=config.DEFAULT_START_DELAY_MS,
        metavar='MS',
        help=f"Delay in milliseconds before the first photo. Default: {config.DEFAULT_START_DELAY_MS}"
    )
    parser.add_argument(
        "--show-time",
        type=int,
        choices=[config.SHOW_TIME_OFF, config.SHOW_TIME_12H, config.SHOW_TIME_24H],
        default=None,
        help="Clock display: 0 off, 1 12-hour, 2 24-hour."
    )
    parser.add_argument(
        "--sizing",
        type=int,
        choices=range(config.SIZING_CONTAIN, config.SIZING_RANDOM + 1),
        default=None,
        help="Photo sizing: 0 contain, 1 cover, 2 actual size, 3 frame, 4 random."
    )
    parser.add_argument(
        "--transition",
        type=int,
        choices=range(0, config.TRANSITION_RANDOM + 1),
        default=None,
        help=f"Transition type 0-{config.TRANSITION_COUNT - 1}, or {config.TRANSITION_RANDOM} for random."
    )
    parser.add_argument(
        "--settings",
        type=str,
        default=None,
        metavar='FILE',
        help=f"JSON settings file.\nDefaults to '{config.SETTINGS_FILENAME}' in the photo folder."
    )
    parser.add_argument(
        "--shuffle",
        action="store_true",
        help="Shuffle the photo order."
    )
    parser.add_argument(
        "--simulate",
        type=positive_int,
        default=None,
        metavar='TICKS',
        help="Run headless on a simulated clock for TICKS intervals\nand print the photo sequence."
    )
    parser.add_argument(
        "-l", "--log-level",
        type=str,
        default=config.DEFAULT_LOG_LEVEL,
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
        help=f"Set the logging level. Default: {config.DEFAULT_LOG_LEVEL}"
    )
    return parser

def resolve_settings(args: argparse.Namespace) -> Settings:
    """Load the settings file and apply the command-line overrides."""
    settings_file = Path(args.settings) if args.settings else Path(args.photo_folder) / config.SETTINGS_FILENAME
    return load_settings(settings_file).merged(
        transition_base_seconds=args.transition_time,
        show_time_mode=args.show_time,
        photo_sizing_mode=args.sizing,
        photo_transition_mode=args.transition,
    )

def simulate(args: argparse.Namespace, settings: Settings) -> int:
    """
    Run the slideshow core headless for a number of intervals.

    Returns:
        The process exit code.
    """
    images = image_loader.load_images_from_folder(Path(args.photo_folder).resolve())
    if not images:
        logger.critical("Simulation aborted, no photos found.")
        return 1
    if args.shuffle:
        images = image_loader.shuffle_images(images)

    scheduler = SimulatedScheduler()
    session = ScreensaverSession(
        images,
        image_loader.probe_photo,
        scheduler,
        settings,
        publish_time=lambda label: logger.debug(f"Clock label: '{label}'"),
        on_no_photos=lambda: print(config.NO_PHOTOS_LABEL),
    )
    sink = PrintingSink(session, scheduler)
    session.attach_sink(sink)
    session.launch(args.start_delay)

    scheduler.advance(args.start_delay)
    for _ in range(max(0, args.simulate - 1)):
        if session.state.no_photos:
            break
        scheduler.advance(session.runner.get_wait_time_ms())
    session.stop()

    counts = session.pool.counts()
    logger.info(
        f"Simulation finished: {len(sink.shown)} photos shown, "
        + ", ".join(f"{state.value}={n}" for state, n in counts.items())
    )
    return 1 if session.state.no_photos else 0

def main():
    """
    The main entry point for the application.

    Parses command-line arguments, sets up logging and the settings, and
    starts the screensaver.
    """
    parser = build_parser()
    args = parser.parse_args()

    # --- Setup Logging ---
    log_level_upper = args.log_level.upper()
    # Install coloredlogs for the package loggers
    coloredlogs.install(
        level=log_level_upper,
        logger=logging.getLogger('photo_screensaver'),
        fmt='%(asctime)s %(levelname)-8s %(name)s: %(message)s'
    )
    logging.getLogger().setLevel(getattr(logging, log_level_upper, logging.INFO))

    try:
        settings = resolve_settings(args)
    except ScreensaverError as e:
        logger.error(f"Invalid settings: {e}")
        sys.exit(1)

    if args.simulate is not None:
        sys.exit(simulate(args, settings))

    # --- Application Initialization ---
    try:
        root = tk.Tk()
        # Hide the main window until the app is set up
        root.withdraw()

        app = ScreensaverApp(
            window=root,
            photo_folder=args.photo_folder,
            settings=settings,
            start_delay_ms=args.start_delay,
            shuffle=args.shuffle,
        )

        if app.images:
            root.deiconify()
            app.run()
        else:
            # The app itself handles showing an error message.
            logger.critical("Application startup failed, likely no photos found.")
            sys.exit(1)

    except FileNotFoundError:
        logger.error(f"The specified photo folder does not exist: {args.photo_folder}")
        sys.exit(1)
    except Exception as e:
        logger.critical(f"An unexpected error occurred: {e}", exc_info=True)
        sys.exit(1)

if __name__ == '__main__':
    main()
