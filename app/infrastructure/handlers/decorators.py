"""Decorators for configuring localized handlers."""

from typing import Callable, TypeVar

T = TypeVar("T", bound=type)


def resource_bundle_base(name: str) -> Callable[[T], T]:
    """Set the resource base (bundle file prefix) for a handler class.

    Without this decorator a LocaledHandler loads bundles named after
    its class.

    Args:
        name: Resource base, e.g. "help" loads help.fr-CA.yml, help.fr.yml.

    Example:
        @resource_bundle_base("help")
        class HelpIntentHandler(LocaledHandler):
            ...
    """
    if not name or not name.strip():
        raise ValueError("Resource base must not be empty")

    def decorator(cls: T) -> T:
        cls.resource_bundle_base = name.strip()
        return cls

    return decorator
