"""Structlog processors that keep request logs safe to ship.

Handlers log whole request envelopes at debug level. Envelopes carry
consent and access tokens nested a few levels deep, and can be large, so
every event passes through ``mask_sensitive_data`` and
``truncate_large_values`` before rendering. Both walk nested mappings and
lists.
"""

from typing import Any, Callable, Iterable, Mapping

Processor = Callable[[Any, str, dict[str, Any]], dict[str, Any]]

DEFAULT_MASK = "***REDACTED***"

# Substrings of event keys whose values are never rendered.
SENSITIVE_PATTERNS = frozenset(
    {
        "password",
        "secret",
        "token",
        "api_key",
        "apikey",
        "authorization",
        "credential",
        "private_key",
        "access_token",
        "consent_token",
    }
)


def _is_sensitive(key: Any, patterns: Iterable[str]) -> bool:
    lowered = str(key).lower()
    return any(pattern in lowered for pattern in patterns)


def _mask(value: Any, patterns: frozenset[str], mask_value: str) -> Any:
    if isinstance(value, Mapping):
        return {
            key: (
                mask_value
                if item is not None and _is_sensitive(key, patterns)
                else _mask(item, patterns, mask_value)
            )
            for key, item in value.items()
        }
    if isinstance(value, (list, tuple)):
        return type(value)(_mask(item, patterns, mask_value) for item in value)
    return value


def mask_sensitive_data(
    mask_value: str = DEFAULT_MASK,
    additional_patterns: frozenset[str] | None = None,
) -> Processor:
    """Build a processor replacing sensitive values with ``mask_value``.

    Key matching is a case-insensitive substring test applied at every
    nesting level, so ``context.System.apiAccessToken`` is masked too.
    ``None`` values are left alone so a missing token still shows up as
    missing.
    """
    patterns = SENSITIVE_PATTERNS | (additional_patterns or frozenset())

    def processor(_logger, _method_name, event_dict):
        return _mask(event_dict, patterns, mask_value)

    return processor


def _truncate(value: Any, max_length: int) -> Any:
    if isinstance(value, str) and len(value) > max_length:
        return f"{value[:max_length]}...[truncated, {len(value)} chars total]"
    if isinstance(value, Mapping):
        return {key: _truncate(item, max_length) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return type(value)(_truncate(item, max_length) for item in value)
    return value


def truncate_large_values(max_length: int = 2000) -> Processor:
    """Build a processor cutting string values down to ``max_length``."""

    def processor(_logger, _method_name, event_dict):
        return {key: _truncate(value, max_length) for key, value in event_dict.items()}

    return processor
