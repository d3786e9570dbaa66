"""Environment-driven settings for the skill.

``Settings`` aggregates per-concern settings (currently ``I18nSettings``).
Application code reads them through ``infrastructure.services.get_settings``:

    settings = get_settings()
    settings.i18n.messages_dir
"""

from infrastructure.configuration.infrastructure import I18nSettings
from infrastructure.configuration.settings import Settings

__all__ = ["Settings", "I18nSettings"]
