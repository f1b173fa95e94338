"""Logging configuration for pricetrack.

All ``pricetrack.*`` loggers route through one file handler in
``Settings.LOGS_DIR``; warnings and errors are echoed to stderr as well.
"""

import logging
import sys
from pathlib import Path

from pricetrack.infrastructure.settings import Settings

_DETAILED_FORMAT = (
    "%(asctime)s | %(levelname)-8s | %(name)s | %(module)s:%(funcName)s:%(lineno)d | "
    "%(message)s"
)

_CONSOLE_FORMAT = "%(levelname)s: %(message)s"

_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

ROOT_LOGGER_NAME = "pricetrack"


def setup_logging() -> Path:
    """Initialise the root ``pricetrack`` logger.

    Safe to call more than once: handlers are only attached the first time.

    Returns:
        The path of the log file.
    """
    logs_dir: Path = Settings.LOGS_DIR
    log_file = logs_dir / Settings.LOG_FILE_NAME

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(logging.DEBUG)

    # Prevent duplicate handlers on repeated calls (e.g. tests)
    if root_logger.handlers:
        return log_file

    logs_dir.mkdir(parents=True, exist_ok=True)

    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setLevel(getattr(logging, Settings.LOG_LEVEL, logging.INFO))
    file_handler.setFormatter(logging.Formatter(_DETAILED_FORMAT, datefmt=_DATE_FORMAT))

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.WARNING)
    console_handler.setFormatter(logging.Formatter(_CONSOLE_FORMAT))

    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)

    root_logger.debug("Logging initialised — log file: %s", log_file)
    return log_file
