"""Shared fixtures for the test suite."""

import sys
from pathlib import Path

# Ensure the application source root is on sys.path so importing
# application packages (e.g. `infrastructure.i18n`) works regardless of
# how pytest was invoked.
project_root = str(Path(__file__).resolve().parents[1])
if project_root not in sys.path:
    sys.path.insert(0, project_root)

import pytest  # noqa: E402
import structlog  # noqa: E402

from infrastructure.services import get_message_source_resolver, get_settings  # noqa: E402


@pytest.fixture(autouse=True)
def reset_providers():
    """Drop cached providers and log context so tests stay isolated."""
    get_settings.cache_clear()
    get_message_source_resolver.cache_clear()
    yield
    get_settings.cache_clear()
    get_message_source_resolver.cache_clear()
    structlog.contextvars.clear_contextvars()
