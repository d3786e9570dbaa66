"""Infrastructure modules for the localized skill.

Centralized infrastructure components:
- configuration: Settings management (Settings, I18nSettings)
- logging: Structured logging (get_module_logger, bind_request_context)
- i18n: Locale resolution and message lookup
- handlers: Localized request handlers and dispatch chain
- services: Process-wide providers (get_settings, get_message_source_resolver)
"""
