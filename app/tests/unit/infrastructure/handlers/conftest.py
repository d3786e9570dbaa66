"""Feature-level fixtures for localized handler tests."""

from typing import List, Optional, Tuple
from unittest.mock import MagicMock

import pytest

from infrastructure.handlers import HandlerInput, LocaledHandler, Response
from infrastructure.i18n import Locale, MessageLookup


class RecordingHandler(LocaledHandler):
    """LocaledHandler that records delegated calls and greets."""

    def __init__(self, *args, response_enabled: bool = True, **kwargs):
        super().__init__(*args, **kwargs)
        self.response_enabled = response_enabled
        self.calls: List[Tuple[HandlerInput, Locale, MessageLookup]] = []

    def can_handle(self, handler_input: HandlerInput) -> bool:
        return True

    def handle_request(
        self,
        handler_input: HandlerInput,
        locale: Locale,
        messages: MessageLookup,
    ) -> Optional[Response]:
        self.calls.append((handler_input, locale, messages))
        if not self.response_enabled:
            return None
        return Response(speech=messages.get_message(locale, "welcome", "Hi"))


@pytest.fixture
def recording_handler_class():
    """The RecordingHandler class, for subclassing in tests."""
    return RecordingHandler


@pytest.fixture
def mock_log():
    """Mock structured logger injected into handlers."""
    return MagicMock()
