"""Fixtures for infrastructure.logging tests."""

import pytest
from unittest.mock import Mock

from infrastructure.configuration import Settings
from infrastructure.logging.setup import configure_logging


@pytest.fixture
def mock_settings():
    """Mock Settings instance for testing."""
    settings = Mock(spec=Settings)
    settings.LOG_LEVEL = "WARNING"
    settings.is_production = False
    return settings


@pytest.fixture
def restore_test_logging():
    """Re-apply the silent test configuration after a test changes it."""
    yield
    configure_logging()
