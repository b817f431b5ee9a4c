"""Shared fixtures for formtree tests."""

import pytest

from formtree import reset_config


@pytest.fixture(autouse=True)
def _clean_config():
    """Every test starts and ends with the empty process-wide config."""
    reset_config()
    yield
    reset_config()
