"""Logging configuration for the command line."""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

LOG_FILE = "drillo.log"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(log_dir: Path, verbose: bool = False) -> logging.Logger:
    """Send package logs to a rotating file and warnings to stderr.

    Args:
        log_dir: Directory for the rotating log file
        verbose: Log DEBUG records and echo INFO to stderr

    Returns:
        The configured package logger
    """
    logger = logging.getLogger("drillo")
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.INFO if verbose else logging.WARNING)
    console_handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    logger.addHandler(console_handler)

    try:
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_dir / LOG_FILE, maxBytes=5_000_000, backupCount=3, encoding="utf-8"
        )
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(file_handler)
    except OSError as e:
        logger.warning(f"File logging disabled: {e}")

    return logger
