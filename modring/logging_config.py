"""
Logging Configuration
Sets up the 'modring' logger for the pygame window app.

The console gets a short line per record (the window is what people watch,
the terminal is only for diagnostics); the optional log file keeps full
timestamps for comparing against the reveal clock.
"""
import logging
import sys
from typing import Optional

CONSOLE_FORMAT = '%(levelname)-7s %(name)s: %(message)s'
FILE_FORMAT = '%(asctime)s.%(msecs)03d - %(name)s - %(levelname)s - %(message)s'


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configures the logger for the 'modring' namespace.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path to save logs to a file.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger("modring")
    logger.setLevel(level)

    # Re-running setup (tests, restarts) must not duplicate output.
    if logger.hasHandlers():
        logger.handlers.clear()

    # stderr keeps stdout free for pygame's banner; it is None when the app is
    # started without a console (pythonw, frozen windowed builds).
    if sys.stderr is not None:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(level)
        console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
        logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt='%H:%M:%S'))
        logger.addHandler(file_handler)

    if not logger.handlers:
        # Nowhere to write: keep records from reaching logging.lastResort.
        logger.addHandler(logging.NullHandler())

    logger.debug("Logging initialized.")
    return logger
