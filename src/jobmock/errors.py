"""
Structured error types for jobmock.

Provides a small hierarchy of typed errors with metadata for error
categorization, logging, and root cause analysis through error chaining.

Only *lookup* and *configuration* problems are raised to callers of the jobs
client. Execution outcomes (non-zero exit codes, commands that cannot be
spawned) are recorded on the job record as ``FAILED`` instead, so callers
poll status rather than catch exceptions.

Architecture:
    ::

        ┌─────────────────────────────────────────────────────┐
        │                   JobMockError                       │
        │  (message, category, retryable, context, cause)     │
        ├─────────────────────────────────────────────────────┤
        │                                                      │
        │  JobNotFoundError     CommandSpawnError   ConfigError│
        │  (NOT_FOUND)          (SPAWN)             (CONFIG)   │
        │  raised to caller     caught by run_job   factories  │
        └─────────────────────────────────────────────────────┘

Examples:
    >>> err = JobNotFoundError("j1")
    >>> str(err)
    'Job with ID j1 not found'
    >>> err.category
    <ErrorCategory.NOT_FOUND: 'NOT_FOUND'>

    Chaining a spawn failure:

    >>> try:
    ...     raise FileNotFoundError("no such file")
    ... except FileNotFoundError as e:
    ...     raise CommandSpawnError("Command not found: foo", cause=e)
    Traceback (most recent call last):
    ...
    CommandSpawnError: Command not found: foo

Tags:
    error-handling, exception-hierarchy, jobmock

Doc-Types:
    - API Reference
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorCategory(str, Enum):
    """Standard error categories for classification."""

    NOT_FOUND = "NOT_FOUND"       # Unknown job identifier
    SPAWN = "SPAWN"               # Command could not be launched
    CONFIG = "CONFIG"             # Invalid settings
    UNKNOWN = "UNKNOWN"


class JobMockError(Exception):
    """Base exception for all jobmock errors.

    Subclasses set ``default_category`` and ``default_retryable`` so that
    call sites only pass a message (and optionally a cause).

    Args:
        message: Human-readable error message.
        category: Overrides ``default_category``.
        retryable: Overrides ``default_retryable``.
        context: Extra metadata for logging.
        cause: Underlying exception, also set as ``__cause__``.
    """

    default_category: ErrorCategory = ErrorCategory.UNKNOWN
    default_retryable: bool = False

    def __init__(
        self,
        message: str,
        *,
        category: ErrorCategory | None = None,
        retryable: bool | None = None,
        context: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.category = category or self.default_category
        self.retryable = self.default_retryable if retryable is None else retryable
        self.context: dict[str, Any] = dict(context or {})
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r}, category={self.category.value})"

    def with_context(self, **kwargs: Any) -> JobMockError:
        """Add context fields and return self for chaining."""
        self.context.update(kwargs)
        return self

    def to_dict(self) -> dict[str, Any]:
        """Serialize for logging and JSON output."""
        result: dict[str, Any] = {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "category": self.category.value,
            "retryable": self.retryable,
        }
        if self.context:
            result["context"] = dict(self.context)
        if self.cause is not None:
            result["cause"] = f"{type(self.cause).__name__}: {self.cause}"
        return result


class JobNotFoundError(JobMockError, LookupError):
    """No job is registered under the given identifier.

    Raised by ``run_job``, ``update_job`` and ``delete_job``. ``get_job``
    returns ``None`` instead.
    """

    default_category = ErrorCategory.NOT_FOUND

    def __init__(self, job_id: str, **kwargs: Any) -> None:
        super().__init__(f"Job with ID {job_id} not found", **kwargs)
        self.job_id = job_id
        self.context.setdefault("job_id", job_id)


class CommandSpawnError(JobMockError):
    """The command runner could not launch the process at all."""

    default_category = ErrorCategory.SPAWN

    def __init__(self, message: str, *, command: str | None = None, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        self.command = command
        if command is not None:
            self.context.setdefault("command", command)


class ConfigError(JobMockError):
    """Settings hold a value the factories cannot honor."""

    default_category = ErrorCategory.CONFIG
