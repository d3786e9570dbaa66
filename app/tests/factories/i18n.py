"""Test data factories for i18n system testing.

Provides deterministic test data builders for:
- Locale
- MessageSource
- MessageSourceResolver backed by in-memory bundles
"""

from typing import Dict, Optional, Tuple

from infrastructure.i18n import (
    InMemoryMessageSourceLoader,
    Locale,
    MessageSource,
    MessageSourceResolver,
)


def make_locale(language: str = "en", region: Optional[str] = "US") -> Locale:
    """Create a Locale instance.

    Args:
        language: Language code.
        region: Region code, or None.

    Returns:
        Locale instance.
    """
    return Locale(language=language, region=region)


def make_message_source(
    resource_base: str = "greetings",
    qualifier: Optional[str] = "en",
    messages: Optional[Dict[str, str]] = None,
) -> MessageSource:
    """Create a MessageSource instance.

    Args:
        resource_base: Bundle family.
        qualifier: Locale tag of the bundle.
        messages: Flat dict {key: template}.

    Returns:
        MessageSource instance.
    """
    if messages is None:
        messages = {
            "welcome": "Welcome",
            "goodbye": "Goodbye",
        }
    return MessageSource(
        resource_base=resource_base, qualifier=qualifier, messages=messages
    )


def make_resolver(
    bundles: Optional[Dict[Tuple[str, Optional[str]], Dict[str, str]]] = None,
    default_resource_base: Optional[str] = None,
    use_cache: bool = True,
) -> MessageSourceResolver:
    """Create a MessageSourceResolver over in-memory bundles.

    Args:
        bundles: Bundles keyed by (resource_base, qualifier).
        default_resource_base: Process-default bundle name.
        use_cache: Whether the resolver caches loads.

    Returns:
        MessageSourceResolver instance.
    """
    return MessageSourceResolver(
        loader=InMemoryMessageSourceLoader(bundles or {}),
        default_resource_base=default_resource_base,
        use_cache=use_cache,
    )
