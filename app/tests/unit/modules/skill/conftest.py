"""Fixtures for skill handler tests."""

import pytest

from infrastructure.i18n import create_message_source_resolver
from infrastructure.i18n.factory import default_messages_dir


@pytest.fixture
def bundled_resolver():
    """Resolver over the skill's bundled app/locales directory."""
    return create_message_source_resolver(messages_dir=default_messages_dir())
