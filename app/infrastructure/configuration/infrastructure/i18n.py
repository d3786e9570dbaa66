"""Localization infrastructure settings."""

from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator

from infrastructure.configuration.base import InfrastructureSettings


class I18nSettings(InfrastructureSettings):
    """Message bundle configuration for localized handlers.

    Environment Variables:
        I18N_MESSAGES_DIR: Directory of YAML bundles (default: app/locales)
        I18N_DEFAULT_RESOURCE_BASE: Unqualified bundle tried after the
            locale-specific ones (default: unset)
        I18N_CACHE_ENABLED: Cache loaded bundles per process (default: True)

    Bundle files are named <resource_base>.<locale>.yml, e.g.
    LaunchRequestHandler.fr-CA.yml, LaunchRequestHandler.fr.yml, messages.yml.

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()

        if settings.i18n.cache_enabled:
            messages_dir = settings.i18n.messages_dir
        ```
    """

    messages_dir: Optional[Path] = Field(
        default=None,
        alias="I18N_MESSAGES_DIR",
        description="Directory containing YAML message bundles",
    )
    default_resource_base: Optional[str] = Field(
        default=None,
        alias="I18N_DEFAULT_RESOURCE_BASE",
        description="Process-wide bundle used when no locale bundle exists",
    )
    cache_enabled: bool = Field(
        default=True,
        alias="I18N_CACHE_ENABLED",
        description="Cache loaded message bundles by resource base and locale",
    )

    @field_validator("messages_dir", "default_resource_base", mode="before")
    @classmethod
    def empty_as_unset(cls, v):
        """Treat empty environment values as unset."""
        if isinstance(v, str) and not v.strip():
            return None
        return v
