"""Request-scoped logging context.

Everything logged inside ``bind_request_context`` carries the request's
correlation id, plus whatever extra keys the caller binds (the handler
name, typically).
"""

import uuid
from contextlib import contextmanager
from typing import Any, Iterator, Optional

import structlog


@contextmanager
def bind_request_context(
    correlation_id: Optional[str] = None, **extra_context: Any
) -> Iterator[None]:
    """Bind ``correlation_id`` and ``extra_context`` for the block.

    A random UUID is used when no correlation id is given. Keys whose
    value is None are not bound. On exit the keys are unbound, and any
    value an enclosing block had bound for them comes back.
    """
    context = {key: value for key, value in extra_context.items() if value is not None}
    context["correlation_id"] = correlation_id or str(uuid.uuid4())
    with structlog.contextvars.bound_contextvars(**context):
        yield


def get_correlation_id() -> Optional[str]:
    return structlog.contextvars.get_contextvars().get("correlation_id")


def clear_request_context() -> None:
    """Drop every key bound in the current context."""
    structlog.contextvars.clear_contextvars()
