"""Shared fixtures."""

import pytest

from attempt.config import clear_settings_cache


@pytest.fixture(autouse=True)
def fresh_settings() -> object:
    """Re-read settings from the environment for every test."""
    clear_settings_cache()
    yield
    clear_settings_cache()
