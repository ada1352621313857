"""Logging setup.

The UI owns the terminal, so records only go somewhere when a log
file is configured.
"""

import logging
from pathlib import Path

LOGGER_NAME = "fuzzy_menu"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(log_file: Path | None, level: int = logging.DEBUG) -> logging.Logger:
    """Attach a file handler to the package logger, or a NullHandler."""
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    if log_file is None:
        logger.addHandler(logging.NullHandler())
        return logger

    log_file.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(log_file, encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(level)
    # Keep records out of the root logger's terminal handlers
    logger.propagate = False
    return logger
