"""
Logging Configuration
Sets up the package logger for the calculator.

Level and log file default to the BODYCOMPOSITION_LOG_LEVEL and
BODYCOMPOSITION_LOG_FILE environment variables (see config.py).
"""
import logging
import sys
from typing import Optional

from bodycomposition.config import LOG_LEVEL, LOG_FILE

LOGGER_NAME = "bodycomposition"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%H:%M:%S'


def setup_logging(level: Optional[int] = None, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configures the logger of the 'bodycomposition' namespace.

    Args:
        level: Logging level (e.g. logging.DEBUG). Falls back to the environment.
        log_file: Optional path to save logs to a file. Falls back to the environment.

    Returns:
        The configured package logger.
    """
    level = LOG_LEVEL if level is None else level
    log_file = log_file or LOG_FILE

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # Drop handlers from a previous call so records are not written twice
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.debug("Logging initialized (level=%s, file=%s).", logging.getLevelName(level), log_file)
    return logger
