"""Factory functions for creating i18n components.

Provides convenience functions for initializing message source resolvers
from application settings.
"""

from pathlib import Path
from typing import Optional

from infrastructure.i18n.loader import (
    InMemoryMessageSourceLoader,
    MessageSourceLoader,
    YAMLMessageSourceLoader,
)
from infrastructure.i18n.messages import MessageSourceResolver
from infrastructure.logging import get_module_logger

logger = get_module_logger()


def default_messages_dir() -> Path:
    """Return the bundled locales directory (app/locales)."""
    # This file is at .../app/infrastructure/i18n/factory.py
    return Path(__file__).resolve().parents[2] / "locales"


def create_message_source_resolver(
    messages_dir: Optional[Path] = None,
    default_resource_base: Optional[str] = None,
    use_cache: bool = True,
) -> MessageSourceResolver:
    """Create and configure a MessageSourceResolver.

    If no messages_dir is provided, uses the default app/locales directory.
    A missing directory is not an error: the resolver is created with an
    empty loader so every lookup falls back to default text.

    Args:
        messages_dir: Path to YAML bundle files (default: app/locales)
        default_resource_base: Unqualified bundle tried last (default: none)
        use_cache: Whether to cache load results (default: True)

    Returns:
        MessageSourceResolver: Configured resolver instance

    Usage:
        # Use defaults
        resolver = create_message_source_resolver()

        # Custom directory and process-wide default bundle
        resolver = create_message_source_resolver(
            messages_dir=Path("/srv/skill/locales"),
            default_resource_base="messages",
        )
    """
    directory = Path(messages_dir) if messages_dir else default_messages_dir()

    loader: MessageSourceLoader
    if directory.is_dir():
        loader = YAMLMessageSourceLoader(directory)
    else:
        logger.warning("messages_dir_not_found", messages_dir=str(directory))
        loader = InMemoryMessageSourceLoader()

    resolver = MessageSourceResolver(
        loader=loader,
        default_resource_base=default_resource_base,
        use_cache=use_cache,
    )
    logger.info(
        "message_source_resolver_created",
        messages_dir=str(directory),
        default_resource_base=default_resource_base,
        use_cache=use_cache,
    )
    return resolver
