"""
Logging context management using contextvars.

Job-level context (job id, parent scope, runner name) is attached to every
log entry emitted while a job runs, without passing it through each call.
contextvars are asyncio-safe, so concurrent ``run_job`` calls on different
jobs keep their own context.
"""

from __future__ import annotations

from contextvars import ContextVar
from dataclasses import asdict, dataclass
from typing import Any

import structlog


@dataclass
class LogContext:
    """
    Context attached to all log entries.

    job_id: Identifier of the job being operated on
    parent: Scope label of that job
    runner: Name of the command runner executing it
    """

    job_id: str | None = None
    parent: str | None = None
    runner: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Return non-None fields as dict."""
        return {k: v for k, v in asdict(self).items() if v is not None}

    def merge(self, **kwargs: Any) -> LogContext:
        """Create new context with merged values."""
        current = asdict(self)
        current.update({k: v for k, v in kwargs.items() if v is not None and k in current})
        return LogContext(**current)


_log_context: ContextVar[LogContext] = ContextVar("jobmock_log_context")  # noqa: B039


def get_context() -> LogContext:
    """Get the current log context."""
    return _log_context.get(LogContext())


def bind_context(**kwargs: Any) -> LogContext:
    """
    Bind additional values to current context.

    This merges with the existing context rather than replacing it.
    """
    updated = get_context().merge(**kwargs)
    _log_context.set(updated)
    return updated


def clear_context() -> None:
    """Clear the current context (reset to empty)."""
    _log_context.set(LogContext())


class _ContextToken:
    """Token for restoring context after a scoped operation."""

    def __init__(self, token):
        self._token = token

    def restore(self) -> None:
        _log_context.reset(self._token)


def push_context(**kwargs: Any) -> _ContextToken:
    """
    Push new context values, returning a token to restore later.

    Usage:
        token = push_context(job_id="j1")
        try:
            await do_work()
        finally:
            token.restore()
    """
    updated = get_context().merge(**kwargs)
    return _ContextToken(_log_context.set(updated))


def add_context_processor(
    logger: Any,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Structlog processor that adds job context to every log entry."""
    for key, value in get_context().to_dict().items():
        if key not in event_dict:
            event_dict[key] = value
    return event_dict


def get_logger(name: str | None = None) -> Any:
    """Get a structured logger (typically ``get_logger(__name__)``)."""
    return structlog.get_logger(name)
