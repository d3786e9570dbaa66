"""Structlog-based logging for the skill.

Modules take a logger with ``get_module_logger()``; the dispatcher path
wraps each request in ``bind_request_context`` so entries carry the
request id.
"""

from infrastructure.logging.context import (
    bind_request_context,
    clear_request_context,
    get_correlation_id,
)
from infrastructure.logging.formatters import (
    SENSITIVE_PATTERNS,
    mask_sensitive_data,
    truncate_large_values,
)
from infrastructure.logging.setup import configure_logging, get_module_logger

__all__ = [
    "configure_logging",
    "get_module_logger",
    "bind_request_context",
    "get_correlation_id",
    "clear_request_context",
    "mask_sensitive_data",
    "truncate_large_values",
    "SENSITIVE_PATTERNS",
]
