"""Root conftest — shared test configuration."""

import os

import pytest
import structlog

# Ensure tests don't pick up a developer's extra flow directory
os.environ["VALIDFLOW_FLOWS_DIR"] = ""

from validflow.config import get_settings  # noqa: E402
from validflow.validators.engine import get_engine  # noqa: E402


@pytest.fixture(autouse=True)
def _fresh_settings():
    """Drop cached settings, engine and logging config between tests."""
    get_settings.cache_clear()
    get_engine.cache_clear()
    yield
    get_settings.cache_clear()
    get_engine.cache_clear()
    structlog.reset_defaults()
