"""Logging configuration for ascii-galaxy."""

import logging
import logging.handlers
from pathlib import Path
from typing import Optional

from ascii_galaxy.config import LOGS_DIR, LOG_LEVEL, LOG_FORMAT


def setup_logging(
    name: str = "ascii_galaxy",
    level: Optional[str] = None,
    log_file: Optional[Path] = None,
    console: bool = False,
) -> logging.Logger:
    """
    Set up logging configuration.

    The animation owns the terminal, so console output is off unless asked
    for; records go to a rotating log file instead. If that file cannot be
    opened, file logging is skipped and a NullHandler keeps the logger quiet.

    Args:
        name: Logger name
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Path to log file
        console: Also log to stderr

    Returns:
        Configured logger instance
    """
    if level is None:
        level = LOG_LEVEL
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger(name)
    logger.setLevel(numeric_level)

    # Drop handlers from an earlier call so records are not duplicated
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT)

    if console:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(numeric_level)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    # File handler
    if log_file is None:
        log_file = LOGS_DIR / f"{name}.log"

    try:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=10485760,  # 10MB
            backupCount=5,
        )
    except OSError as e:
        # Unwritable logs directory must not stop the animation
        if not logger.handlers:
            logger.addHandler(logging.NullHandler())
        logger.warning("File logging disabled, cannot open %s: %s", log_file, e)
        return logger

    file_handler.setLevel(numeric_level)
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)

    return logger


__all__ = ["setup_logging"]
