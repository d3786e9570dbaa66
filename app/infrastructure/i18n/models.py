"""Locale and message source models for the i18n system.

Defines the immutable values passed between locale resolution,
message source loading and handler logic.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional


@dataclass(frozen=True)
class Locale:
    """Structured locale parsed from a raw locale tag.

    Frozen to ensure immutability and hashability for caching.

    Attributes:
        language: Lower-case language code (e.g., "en", "fr").
        region: Upper-case region code (e.g., "US", "CA"), or None.
    """

    language: str
    region: Optional[str] = None

    def __post_init__(self):
        if not self.language:
            raise ValueError("Locale language must not be empty")

    @property
    def tag(self) -> str:
        """Return the hyphenated tag (e.g., "fr-CA" or "fr")."""
        if self.region:
            return f"{self.language}-{self.region}"
        return self.language

    def __str__(self) -> str:
        return self.tag


@dataclass(frozen=True)
class MessageSource:
    """Messages loaded for one resource base and locale qualifier.

    Attributes:
        resource_base: Bundle family the messages were loaded from.
        qualifier: Locale tag of the bundle ("fr-CA", "fr"), or None for
            an unqualified bundle.
        messages: Read-only mapping of message key to template.
    """

    resource_base: str
    qualifier: Optional[str] = None
    messages: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self):
        # Copy so later changes to the caller's dict never leak in
        object.__setattr__(self, "messages", MappingProxyType(dict(self.messages)))

    def get_message(self, key: str) -> Optional[str]:
        """Retrieve a message template by key.

        Args:
            key: Message key (e.g., "welcome", "help.reprompt").

        Returns:
            Message template, or None if not found.
        """
        return self.messages.get(key)

    def has_message(self, key: str) -> bool:
        """Check if a message exists for the given key."""
        return key in self.messages

    def __len__(self) -> int:
        return len(self.messages)
