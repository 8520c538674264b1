import logging

import pytest
from fastapi.testclient import TestClient

from moringa_toolkit.core.config import get_settings
from moringa_toolkit.main import create_app


@pytest.fixture(autouse=True)
def package_logger():
    """Restore the package logger's handlers and level after each test"""
    logger = logging.getLogger("moringa_toolkit")
    handlers = list(logger.handlers)
    level = logger.level
    yield logger
    logger.handlers = handlers
    logger.setLevel(level)


@pytest.fixture
def client():
    """Test client over a freshly built app"""
    with TestClient(create_app()) as test_client:
        yield test_client


@pytest.fixture
def clean_env(monkeypatch):
    """Drop server settings from the environment and the settings cache"""
    for name in ("PORT", "BIND_ADDRESS", "ENVIRONMENT", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield monkeypatch
    get_settings.cache_clear()
