"""
Structured Logging
==================
structlog integration for scheduler events.

Usage:
    from shiftrota.utils.structured_logging import get_structured_logger

    log = get_structured_logger("shiftrota.engine.rotation")
    log.info("employee_scheduled", employee="Alice", day=12, evening=13)

Events are routed through the standard library so that the ``shiftrota``
handlers configured by ``setup_logging`` (and pytest's ``caplog``) see them.
"""
from typing import Any

import structlog
import structlog.contextvars

_CONFIGURED = False


def configure_structlog(json_output: bool = False) -> None:
    """
    Configure structlog for the application.

    Args:
        json_output: If True, render events as JSON (for log files / machines).
                     If False, render ``event key=value`` pairs.
    """
    global _CONFIGURED

    renderer = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.processors.KeyValueRenderer(key_order=["event"], sort_keys=True)
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )
    _CONFIGURED = True


def get_structured_logger(name: str) -> Any:
    """
    Get a structured logger bound to a stdlib logger of the same name.

    Args:
        name: Logger name (e.g., "shiftrota.engine.rotation")
    """
    if not _CONFIGURED:
        configure_structlog()
    return structlog.get_logger(name)


def bind_context(**kwargs) -> None:
    """
    Bind context variables for all subsequent log calls.

    Args:
        **kwargs: Context values (e.g., month="2023-03")
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    """Clear all context variables."""
    structlog.contextvars.clear_contextvars()
