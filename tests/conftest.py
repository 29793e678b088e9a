"""Shared fixtures for VITAE tests."""

from pathlib import Path

import pytest
from loguru import logger

CONFIGS_PATH = Path(__file__).resolve().parents[1] / "configs"


@pytest.fixture
def configs_path() -> Path:
    """Directory holding the example personal.json and style.json."""
    return CONFIGS_PATH


@pytest.fixture(autouse=True)
def reset_loguru():
    """Drop sinks added by setup_logger so tests don't log into each other's tmp dirs."""
    yield
    logger.remove()
