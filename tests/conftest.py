# tests/conftest.py
"""Shared test setup for project."""

from collections.abc import Generator

import pytest

import fieldconf.logs as mod_logs
from tests.utils import DEFAULT_TEST_LOG_LEVEL
from tests.utils.log_fixtures import (
    direct_logger,
    module_logger,
)


# These fixtures are intentionally re-exported so pytest can discover them.
__all__ = [
    "direct_logger",
    "module_logger",
]


# ----------------------------------------------------------------------
# Fixtures
# ----------------------------------------------------------------------


@pytest.fixture(autouse=True)
def reset_logger_level() -> Generator[None, None, None]:
    """Reset the app logger to DEFAULT_TEST_LOG_LEVEL around each test.

    The logger is a module-level singleton; tests that change its level
    must not leak into the next one.
    """
    logger = mod_logs.get_app_logger()
    logger.setLevel(DEFAULT_TEST_LOG_LEVEL)
    yield
    logger.setLevel(DEFAULT_TEST_LOG_LEVEL)

