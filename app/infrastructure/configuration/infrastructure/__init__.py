"""Infrastructure-level settings."""

from infrastructure.configuration.infrastructure.i18n import I18nSettings

__all__ = ["I18nSettings"]
