"""Process-wide providers for settings and the message source resolver."""

from functools import lru_cache

from infrastructure.configuration import Settings
from infrastructure.i18n.factory import create_message_source_resolver
from infrastructure.i18n.messages import MessageSourceResolver


@lru_cache
def get_settings() -> Settings:
    """Settings loaded once per process."""
    return Settings()


@lru_cache
def get_message_source_resolver() -> MessageSourceResolver:
    """
    Get application-scoped message source resolver singleton.

    All handlers share this resolver, so its cache is process-wide.

    Returns:
        MessageSourceResolver: Cached resolver configured from settings.i18n.

    Usage:
        handler = LaunchRequestHandler(
            message_source_resolver=get_message_source_resolver()
        )
    """
    i18n = get_settings().i18n
    return create_message_source_resolver(
        messages_dir=i18n.messages_dir,
        default_resource_base=i18n.default_resource_base,
        use_cache=i18n.cache_enabled,
    )
