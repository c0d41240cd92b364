"""Shared test configuration and fixtures."""

import logging
from unittest.mock import patch

import pytest

from icsrecur.config.settings import IcsRecurSettings, reset_settings
from icsrecur.recur import RecurValue


@pytest.fixture
def monthly_rule() -> RecurValue:
    """Create a multi-valued monthly rule."""
    return RecurValue("FREQ=MONTHLY;BYDAY=1,2,3;BYHOUR=5")


@pytest.fixture
def clean_settings():
    """Clean up global settings state before and after tests."""
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def isolated_settings(clean_settings):
    """Create settings that ignore the environment and any YAML file."""
    with (
        patch.dict("os.environ", {}, clear=True),
        patch.object(IcsRecurSettings, "_find_config_file", return_value=None),
    ):
        yield IcsRecurSettings()


@pytest.fixture
def restore_icsrecur_logger():
    """Restore the package logger after tests that reconfigure it."""
    logger = logging.getLogger("icsrecur")
    level = logger.level
    handlers = list(logger.handlers)
    yield logger
    for handler in logger.handlers:
        if handler not in handlers:
            handler.close()
    logger.handlers[:] = handlers
    logger.setLevel(level)
