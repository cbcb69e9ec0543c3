"""
Centralized settings for jobmock.

One validated, cached settings object read from ``JOBMOCK_*`` environment
variables and an optional ``.env`` file. The jobs client itself never reads
the environment: only :func:`create_runner`, :func:`create_client` and the
CLI consult these settings.

Examples:
    >>> settings = JobMockSettings(runner="stub", log_level="DEBUG")
    >>> client = create_client(settings)

Tags:
    jobmock, configuration, settings, pydantic

Doc-Types:
    api-reference
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from jobmock.errors import ConfigError

if TYPE_CHECKING:
    from jobmock.jobs._types import CommandRunner
    from jobmock.jobs.client import LocalJobsClient


class JobMockSettings(BaseSettings):
    """jobmock configuration.

    All fields can be set via ``JOBMOCK_*`` environment variables (e.g.
    ``JOBMOCK_RUNNER=stub``) or through a ``.env`` file.
    """

    model_config = SettingsConfigDict(
        env_prefix="JOBMOCK_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ── Execution ────────────────────────────────────────────────
    runner: str = Field(default="local", description="Command runner strategy (local | stub)")
    inherit_env: bool = Field(default=True, description="Child processes see the ambient environment")
    shell: bool = Field(default=False, description="Run the command line through the system shell")

    # ── Job defaults ─────────────────────────────────────────────
    default_parent: str = Field(default="projects/local/locations/local")
    creator: str = Field(default="test")

    # ── Logging ──────────────────────────────────────────────────
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(default="INFO")
    log_format: Literal["json", "console"] = Field(default="console")

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value

    @field_validator("log_format", "runner", mode="before")
    @classmethod
    def _lower(cls, value: object) -> object:
        return value.lower() if isinstance(value, str) else value


# ── Settings factory with caching ────────────────────────────────────────

_settings_cache: dict[str, JobMockSettings] = {}


def get_settings(*, _force_reload: bool = False) -> JobMockSettings:
    """Load, validate, and cache a :class:`JobMockSettings` instance."""
    if not _force_reload and "default" in _settings_cache:
        return _settings_cache["default"]
    settings = JobMockSettings()
    _settings_cache["default"] = settings
    return settings


def clear_settings_cache() -> None:
    """Drop the cached settings so the next call re-reads the environment."""
    _settings_cache.clear()


# ── Factories ────────────────────────────────────────────────────────────


def create_runner(settings: JobMockSettings | None = None) -> CommandRunner:
    """Build the command runner named by ``settings.runner``.

    Raises:
        ConfigError: If the runner name is not known.
    """
    settings = settings or get_settings()

    if settings.runner == "local":
        from jobmock.jobs.local_process import LocalProcessRunner

        return LocalProcessRunner(inherit_env=settings.inherit_env, shell=settings.shell)
    if settings.runner == "stub":
        from jobmock.jobs.mock_runners import StubCommandRunner

        return StubCommandRunner()

    raise ConfigError(
        f"Unknown runner '{settings.runner}'. Available: local, stub",
        context={"runner": settings.runner},
    )


def create_client(settings: JobMockSettings | None = None) -> LocalJobsClient:
    """Build a :class:`~jobmock.jobs.client.LocalJobsClient` from settings."""
    from jobmock.jobs.client import LocalJobsClient

    settings = settings or get_settings()
    return LocalJobsClient(runner=create_runner(settings), creator=settings.creator)
