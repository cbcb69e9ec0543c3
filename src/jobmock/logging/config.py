"""
Logging configuration.

Provides a single entry point for configuring structured logging.
Level and output format default to the values in
:class:`~jobmock.settings.JobMockSettings`:

- JOBMOCK_LOG_LEVEL: DEBUG | INFO | WARNING | ERROR (default: INFO)
- JOBMOCK_LOG_FORMAT: json | console (default: console)

Usage:
    # Configure at application startup
    from jobmock.logging import configure_logging
    configure_logging()

    # Or with explicit settings
    configure_logging(level="DEBUG", format="json")
"""

from __future__ import annotations

import logging
import sys
from typing import Literal

import structlog
from structlog.types import Processor

from jobmock.logging.context import add_context_processor

_configured = False


def configure_logging(
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] | None = None,
    format: Literal["json", "console"] | None = None,
    force: bool = False,
) -> None:
    """
    Configure structured logging for the application.

    Should be called once at startup (CLI entry, test session, etc.).
    Subsequent calls are no-ops unless force=True.

    Args:
        level: Log level (overrides JOBMOCK_LOG_LEVEL)
        format: Output format (overrides JOBMOCK_LOG_FORMAT)
        force: Reconfigure even if already configured
    """
    global _configured

    if _configured and not force:
        return

    if level is None or format is None:
        from jobmock.settings import get_settings

        settings = get_settings()
        level = level or settings.log_level
        format = format or settings.log_format

    log_level = level.upper()
    log_format = format.lower()

    processors: list[Processor] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        add_context_processor,
        structlog.processors.format_exc_info,
        structlog.processors.StackInfoRenderer(),
    ]

    if log_format == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(
            structlog.dev.ConsoleRenderer(
                colors=sys.stderr.isatty(),
                exception_formatter=structlog.dev.plain_traceback,
            )
        )

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # stdlib logging carries the rendered line to stderr
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, log_level),
        force=True,
    )
    logging.getLogger("jobmock").setLevel(getattr(logging, log_level))

    _configured = True


def is_debug_enabled() -> bool:
    """Check if DEBUG level logging is enabled."""
    return logging.getLogger("jobmock").isEnabledFor(logging.DEBUG)


def is_configured() -> bool:
    """Check if logging has been configured."""
    return _configured
