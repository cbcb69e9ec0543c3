"""
jobmock logging - structured, job-aware logging.

This module provides:
- Structured logging with structlog
- Job context propagation via contextvars
- Settings-based configuration

Usage:
    from jobmock.logging import configure_logging, get_logger, bind_context

    # Configure once at startup
    configure_logging()

    # Get a logger
    log = get_logger(__name__)

    # Bind job context (automatically attached to all logs)
    bind_context(job_id="render-scene", runner="local")
"""

from jobmock.logging.config import configure_logging, is_configured, is_debug_enabled
from jobmock.logging.context import (
    LogContext,
    bind_context,
    clear_context,
    get_context,
    get_logger,
    push_context,
)

__all__ = [
    # Configuration
    "configure_logging",
    "is_configured",
    "is_debug_enabled",
    # Context
    "LogContext",
    "bind_context",
    "clear_context",
    "get_context",
    "get_logger",
    "push_context",
]
