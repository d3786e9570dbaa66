"""i18n system - locale resolution and message lookup.

Parses raw locale tags from incoming requests and resolves locale-specific
message bundles with a fallback chain, so handlers can build responses
with localized text or their own defaults.

Main components:
- models: Locale, MessageSource
- exceptions: InvalidLocaleError
- resolvers: LocaleResolver for parsing locale tags
- loader: MessageSourceLoader, YAMLMessageSourceLoader, InMemoryMessageSourceLoader
- messages: MessageSourceResolver and MessageLookup
- factory: create_message_source_resolver
"""

from infrastructure.i18n.exceptions import InvalidLocaleError
from infrastructure.i18n.factory import create_message_source_resolver
from infrastructure.i18n.loader import (
    InMemoryMessageSourceLoader,
    MessageSourceLoader,
    YAMLMessageSourceLoader,
)
from infrastructure.i18n.messages import MessageLookup, MessageSourceResolver
from infrastructure.i18n.models import Locale, MessageSource
from infrastructure.i18n.resolvers import LocaleResolver

__all__ = [
    "Locale",
    "MessageSource",
    "InvalidLocaleError",
    "LocaleResolver",
    "MessageSourceLoader",
    "YAMLMessageSourceLoader",
    "InMemoryMessageSourceLoader",
    "MessageSourceResolver",
    "MessageLookup",
    "create_message_source_resolver",
]
