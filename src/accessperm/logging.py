"""Logging configuration.

structlog is configured once by the composition root through configure_logging().
The standard logging module is routed through the same formatter, so library
loggers (uvicorn, psycopg) share the output format.

```
from accessperm.logging import get_logger

logger = get_logger(__name__)
logger.info("access_permission.created", access_permission_id=str(ap.id))
```
"""

from __future__ import annotations

import logging
from typing import Any

import structlog
import structlog.contextvars


def _get_log_renderer(renderer: str, environment: str) -> structlog.types.Processor:
    """Console renderer for development, JSON everywhere else.

    renderer may force either one with "console" or "json".
    """
    renderer = renderer.lower()
    if renderer == "console":
        use_console = True
    elif renderer == "json":
        use_console = False
    else:
        use_console = environment == "development"

    if use_console:
        return structlog.dev.ConsoleRenderer(
            colors=True,
            pad_event=0,
            exception_formatter=structlog.dev.plain_traceback,
            sort_keys=True,
        )
    return structlog.processors.JSONRenderer()


def configure_logging(
    level: str = "INFO",
    renderer: str = "auto",
    environment: str = "development",
) -> None:
    """Configure structlog and the root logger."""
    common_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    structlog.configure(
        processors=[structlog.stdlib.filter_by_level]
        + common_processors
        + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler()
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processor=_get_log_renderer(renderer, environment),
            foreign_pre_chain=common_processors,
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))


def bind_log_context(**kwargs: Any) -> None:
    """Add values to the logging context of the current async context."""
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_log_context() -> None:
    """Clear the logging context, e.g. at the start of a request."""
    structlog.contextvars.clear_contextvars()


def get_logger(name: str, **kwargs: Any) -> structlog.stdlib.BoundLogger:
    """Get a logger instance (usually get_logger(__name__))."""
    return structlog.get_logger(name, **kwargs)
