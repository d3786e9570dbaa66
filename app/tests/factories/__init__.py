"""Test data factories for deterministic test data generation."""

from tests.factories.handlers import (
    make_handler_input,
    make_request_payload,
)
from tests.factories.i18n import (
    make_locale,
    make_message_source,
    make_resolver,
)

__all__ = [
    "make_handler_input",
    "make_request_payload",
    "make_locale",
    "make_message_source",
    "make_resolver",
]
