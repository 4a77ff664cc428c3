# src/fieldconf/logs.py

import logging
from typing import cast

from .constants import DEFAULT_ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL
from .meta import PROGRAM_ENV, PROGRAM_PACKAGE
from .utils.utils_logs import (
    ConsoleLogger,
    register_default_log_level,
    register_log_level_env_vars,
)


class AppLogger(ConsoleLogger):
    """App-specific logger class."""

    # for future use if needed, empty for now


# --- Logger initialization ---------------------------------------------------

# Register TRACE and SILENT levels
AppLogger.extend_logging_module()

# Must happen before the logger is created so it picks up the registered values
register_log_level_env_vars(
    [f"{PROGRAM_ENV}_{DEFAULT_ENV_LOG_LEVEL}", DEFAULT_ENV_LOG_LEVEL]
)
register_default_log_level(DEFAULT_LOG_LEVEL)


def _create_app_logger() -> AppLogger:
    # Only our own logger gets the AppLogger class; the host application's
    # logger class is restored right away.
    previous = logging.getLoggerClass()
    logging.setLoggerClass(AppLogger)
    try:
        return cast("AppLogger", logging.getLogger(PROGRAM_PACKAGE))
    finally:
        logging.setLoggerClass(previous)


_APP_LOGGER = _create_app_logger()


# --- Convenience utils ---------------------------------------------------------


def get_app_logger() -> AppLogger:
    """Return the configured app logger.

    Use this in library code instead of logging.getLogger() for
    better type hints.
    """
    return _APP_LOGGER
