"""Skill module - localized handlers for launch, help and fallback requests.

Bundles for these handlers live in app/locales:
- LaunchRequestHandler.<locale>.yml
- help.<locale>.yml
"""

from typing import Optional

from infrastructure.handlers import RequestDispatcher
from infrastructure.i18n import MessageSourceResolver
from modules.skill.handlers import (
    FallbackIntentHandler,
    HelpIntentHandler,
    LaunchRequestHandler,
)


def create_skill_dispatcher(
    resolver: Optional[MessageSourceResolver] = None,
) -> RequestDispatcher:
    """Create a dispatcher with the skill's handlers in priority order.

    Args:
        resolver: Message source resolver shared by all handlers.
            Defaults to the process-wide resolver.

    Returns:
        RequestDispatcher: Dispatcher ready to handle requests
    """
    return RequestDispatcher(
        [
            LaunchRequestHandler(message_source_resolver=resolver),
            HelpIntentHandler(message_source_resolver=resolver),
            FallbackIntentHandler(message_source_resolver=resolver),
        ]
    )


__all__ = [
    "LaunchRequestHandler",
    "HelpIntentHandler",
    "FallbackIntentHandler",
    "create_skill_dispatcher",
]
