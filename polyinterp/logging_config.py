"""
Logging Configuration
Sets up the package logger. Library modules only call ``logging.getLogger(__name__)``;
applications embedding polyinterp call :func:`setup_logging` once.
"""
import logging
import sys
from typing import Optional

from polyinterp.config import load_settings


def setup_logging(level: Optional[int] = None, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configure the logger for the 'polyinterp' namespace.

    Args:
        level: Logging level (defaults to ``POLYINTERP_LOG_LEVEL``)
        log_file: Optional path to also write logs to

    Returns:
        The configured package logger
    """
    if level is None:
        level = load_settings().log_level_value

    logger = logging.getLogger("polyinterp")
    logger.setLevel(level)

    # Avoid duplicate output when called more than once
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug("Logging initialized at level %s", logging.getLevelName(level))
    return logger
