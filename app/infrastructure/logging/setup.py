"""Structlog setup for the skill.

``configure_logging`` runs once on import and wires structlog into the
standard library logger. Modules then take a logger bound to their own
name:

    from infrastructure.logging import get_module_logger

    logger = get_module_logger()
    logger.debug("resolved_locale", locale="fr-CA")

Under pytest everything is silenced; tests that assert on log calls
inject a mock logger instead.
"""

import inspect
import logging
import sys
from typing import Any, List, Optional

import structlog
from structlog.stdlib import BoundLogger

from infrastructure.configuration import Settings
from infrastructure.logging.formatters import (
    mask_sensitive_data,
    truncate_large_values,
)

SILENT_LEVEL = logging.CRITICAL + 1
FALLBACK_LEVEL = logging.WARNING


def _is_test_environment() -> bool:
    return "pytest" in sys.modules


def _level_from_name(name: Optional[str]) -> int:
    """Map a level name such as "debug" to its logging constant."""
    if not name:
        return FALLBACK_LEVEL
    level = getattr(logging, name.strip().upper(), None)
    return level if isinstance(level, int) else FALLBACK_LEVEL


def _apply(processors: List[Any], level: int) -> BoundLogger:
    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    logging.basicConfig(format="%(message)s", level=level, force=True)
    return structlog.stdlib.get_logger()


def _silence() -> BoundLogger:
    logging.root.setLevel(SILENT_LEVEL)
    return _apply(
        [
            structlog.stdlib.add_log_level,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        SILENT_LEVEL,
    )


def _build_processors(json_output: bool) -> List[Any]:
    processors: List[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.CallsiteParameterAdder(
            parameters=[
                structlog.processors.CallsiteParameter.FILENAME,
                structlog.processors.CallsiteParameter.LINENO,
                structlog.processors.CallsiteParameter.FUNC_NAME,
            ]
        ),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        mask_sensitive_data(),
        truncate_large_values(),
    ]
    if json_output:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())
    return processors


def configure_logging(
    settings: Optional[Settings] = None,
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
) -> BoundLogger:
    """Configure structlog and the root logger.

    Args:
        settings: Settings to read LOG_LEVEL and the environment from.
            Loaded from the environment when omitted.
        log_level: Level name overriding ``settings.LOG_LEVEL``.
        is_production: Overrides ``settings.is_production``. Production
            renders JSON lines, anything else renders for the console.

    Returns:
        The root structlog logger.
    """
    if _is_test_environment():
        return _silence()

    if settings is None:
        settings = Settings()
    if is_production is None:
        is_production = settings.is_production

    return _apply(
        _build_processors(json_output=is_production),
        _level_from_name(log_level or settings.LOG_LEVEL),
    )


logger: BoundLogger = configure_logging()


def get_module_logger() -> BoundLogger:
    """Return the shared logger bound to the caller's module.

    Binds ``component`` (last dotted segment) and ``module_path`` (full
    module name), e.g. ``messages`` and ``infrastructure.i18n.messages``.
    """
    frame = inspect.currentframe()
    caller = frame.f_back if frame is not None else None
    if caller is None:
        return logger

    module = inspect.getmodule(caller)
    if module is None:
        return logger.bind(component="unknown")

    return logger.bind(
        component=module.__name__.rsplit(".", 1)[-1],
        module_path=module.__name__,
    )
