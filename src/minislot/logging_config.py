"""Logging configuration for the minislot service and CLI."""

import logging
import sys
from pathlib import Path

# Log levels
LOG_LEVEL = logging.INFO

# Log format
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(log_file: str | None = None, debug: bool = False, banner: bool = True):
    """
    Configure logging for the application.

    Args:
        log_file: Optional path to log file. If None, logs to stdout only.
        debug: If True, enable DEBUG level logging (includes rendered manifests)
        banner: If True, log a startup banner with the effective settings
    """
    level = logging.DEBUG if debug else LOG_LEVEL

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    # Replace handlers from a previous call instead of stacking them
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)

    # Console handler (stdout)
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    root_logger.addHandler(console_handler)

    # File handler (if specified)
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(level)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        root_logger.addHandler(file_handler)

        logging.info(f"Logging to file: {log_file}")

    if banner:
        logging.info("=" * 80)
        logging.info("minislot deployment server starting")
        logging.info(f"Log Level: {logging.getLevelName(level)}")
        logging.info(f"Debug Mode: {debug}")
        logging.info("=" * 80)
