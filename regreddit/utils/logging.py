"""
Structured logging setup for regreddit.
"""
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional, Union

from config import settings

LOGGER_NAME = "regreddit"

# -v count -> console level
VERBOSITY_LEVELS = [
    logging.ERROR,
    logging.WARNING,
    logging.INFO,
    logging.DEBUG,
]


def verbosity_to_level(verbosity: int) -> int:
    """
    Map the number of -v flags to a logging level.

    Args:
        verbosity: Number of times -v was given (0 or more)

    Returns:
        Logging level constant
    """
    index = max(0, min(verbosity, len(VERBOSITY_LEVELS) - 1))
    return VERBOSITY_LEVELS[index]


def setup_logging(
    verbosity: int = 0, log_dir: Optional[Union[str, Path]] = None
) -> logging.Logger:
    """
    Set up logging with a stderr console handler and an optional file handler.

    Args:
        verbosity: Number of -v flags; 0 shows errors only, 3 or more shows debug output
        log_dir: Directory for a debug log file. Defaults to settings.LOG_DIR;
                 no file is written when both are empty

    Returns:
        Configured logger instance
    """
    level = verbosity_to_level(verbosity)
    if log_dir is None:
        log_dir = settings.LOG_DIR

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if log_dir else level)

    # Clear any existing handlers
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()

    log_format = logging.Formatter(
        "[%(asctime)s] %(levelname)s: %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
    )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(log_format)
    logger.addHandler(console_handler)

    if log_dir:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)
        log_file = log_path / f"regreddit_{datetime.now().strftime('%Y%m%d_%H%M%S')}.log"
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)  # File gets all logs
        file_handler.setFormatter(log_format)
        logger.addHandler(file_handler)
        logger.debug(f"Log file: {log_file}")

    logger.debug(f"Console log level: {logging.getLevelName(level)}")

    return logger


def get_logger(name: str = LOGGER_NAME) -> logging.Logger:
    """
    Get a logger instance.

    Module loggers are named after their import path, so they all sit under
    the "regreddit" logger configured by setup_logging().

    Args:
        name: Logger name

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
