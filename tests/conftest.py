import logging

import pytest


@pytest.fixture(autouse=True)
def restore_library_log_level():
    """Restore the library logger level after each test."""
    logger = logging.getLogger("luhnmodn")
    level = logger.level
    yield
    logger.setLevel(level)
