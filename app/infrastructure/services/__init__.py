"""Cached providers for shared services."""

from infrastructure.services.providers import (
    get_message_source_resolver,
    get_settings,
)

__all__ = [
    "get_settings",
    "get_message_source_resolver",
]
