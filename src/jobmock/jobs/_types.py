"""Job types and the command-runner protocol.

This module defines the canonical abstractions for the jobs mock:

- JobStatus: Lifecycle status of a job record
- JobRecord: The registry entry for one job
- JobDefinition: Structured job body (command, arguments, env, labels)
- CreateJobRequest / ListJobsRequest: Request envelopes shaped after the
  cloud Jobs API
- CommandResult: What a command runner observed for one process
- CommandRunner: Protocol every execution strategy implements

Architecture:

    .. code-block:: text

        ┌──────────────────────────────────────────────────────────┐
        │                  _types.py Module Map                     │
        ├──────────────────────────────────────────────────────────┤
        │                                                           │
        │  CreateJobRequest ──► JobDefinition                       │
        │         │                                                 │
        │         ▼                                                 │
        │     JobRecord (status: JobStatus)                         │
        │         │                                                 │
        │         │ run_job                                         │
        │         ▼                                                 │
        │  CommandRunner (Protocol) ──► CommandResult               │
        │                                                           │
        └──────────────────────────────────────────────────────────┘

    State machine:

    .. code-block:: text

        CREATED --run--> RUNNING --exit 0--> COMPLETED
                                 \\--exit != 0 / spawn error--> FAILED
        (any) --update--> UPDATED
        (any) --delete--> [removed]
"""

from __future__ import annotations

import uuid
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import Enum
from typing import Any, Protocol, runtime_checkable


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _utcnow() -> datetime:
    """Return timezone-aware UTC datetime."""
    return datetime.now(UTC)


def _generate_uid() -> str:
    return str(uuid.uuid4())


# ---------------------------------------------------------------------------
# Status
# ---------------------------------------------------------------------------

class JobStatus(str, Enum):
    """Lifecycle status of a job record.

    ``UPDATED`` marks a record whose command was edited; it says nothing
    about execution. ``update_time`` on the record tracks edits separately.
    """

    CREATED = "CREATED"
    RUNNING = "RUNNING"
    COMPLETED = "COMPLETED"
    FAILED = "FAILED"
    UPDATED = "UPDATED"

    @property
    def is_terminal(self) -> bool:
        """Whether a run attempt has finished."""
        return self in (JobStatus.COMPLETED, JobStatus.FAILED)


# ---------------------------------------------------------------------------
# Requests
# ---------------------------------------------------------------------------

@dataclass
class JobDefinition:
    """Structured job body.

    Example:
        >>> JobDefinition(
        ...     command="python",
        ...     arguments=["render_blender_scene.py"],
        ...     env={"SCENE_FILE": "scene.blend", "OUTPUT_PATH": "./output/"},
        ... )
    """

    command: str = ""
    arguments: list[str] = field(default_factory=list)
    env: dict[str, str] = field(default_factory=dict)
    labels: dict[str, str] = field(default_factory=dict)
    annotations: dict[str, str] = field(default_factory=dict)


@dataclass
class CreateJobRequest:
    """Request to register a job.

    Attributes:
        job_id: Caller-assigned identifier. Reusing one overwrites the
            existing record.
        job: The job body.
        parent: Scope label, e.g. ``projects/{project}/locations/{location}``.
        validate_only: Build and return the record without storing it.
    """

    job_id: str
    job: JobDefinition = field(default_factory=JobDefinition)
    parent: str = ""
    validate_only: bool = False


@dataclass
class ListJobsRequest:
    """Listing parameters.

    Accepted for call-shape compatibility with the cloud API; the mock
    always returns every registered job.
    """

    parent: str | None = None
    page_size: int | None = None
    page_token: str | None = None
    show_deleted: bool | None = None


# ---------------------------------------------------------------------------
# Record
# ---------------------------------------------------------------------------

@dataclass
class JobRecord:
    """One registered job.

    Mutated in place by ``run_job`` and ``update_job``; the instance returned
    from ``create_job`` is the same object later returned by ``get_job``.
    """

    name: str
    parent: str
    command: str
    arguments: list[str] = field(default_factory=list)
    env: dict[str, str] = field(default_factory=dict)
    status: JobStatus = JobStatus.CREATED
    creation_time: datetime = field(default_factory=_utcnow)
    creator: str = "test"
    execution_count: int = 0
    labels: dict[str, str] = field(default_factory=dict)
    annotations: dict[str, str] = field(default_factory=dict)
    output: str | None = None
    exit_code: int | None = None
    update_time: datetime | None = None
    uid: str = field(default_factory=_generate_uid)

    @property
    def resource_name(self) -> str:
        """Full resource name: ``{parent}/jobs/{name}``."""
        if self.parent:
            return f"{self.parent}/jobs/{self.name}"
        return self.name

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON output."""
        return {
            "name": self.name,
            "resource_name": self.resource_name,
            "uid": self.uid,
            "parent": self.parent,
            "command": self.command,
            "arguments": list(self.arguments),
            "env": dict(self.env),
            "status": self.status.value,
            "creation_time": self.creation_time.isoformat(),
            "update_time": self.update_time.isoformat() if self.update_time else None,
            "creator": self.creator,
            "execution_count": self.execution_count,
            "labels": dict(self.labels),
            "annotations": dict(self.annotations),
            "output": self.output,
            "exit_code": self.exit_code,
        }


# ---------------------------------------------------------------------------
# Command runner
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class CommandResult:
    """Observed outcome of one process."""

    exit_code: int
    stdout: str = ""
    stderr: str = ""

    @property
    def succeeded(self) -> bool:
        return self.exit_code == 0


@runtime_checkable
class CommandRunner(Protocol):
    """Protocol for execution strategies.

    The jobs client talks to processes exclusively through ``run``. The
    local subprocess runner is the production strategy; the runners in
    :mod:`jobmock.jobs.mock_runners` substitute for it in tests.

    .. code-block:: text

        run(command, arguments, env)
          ├── process launched → CommandResult(exit_code, stdout, stderr)
          └── cannot launch    → raise CommandSpawnError
    """

    @property
    def runner_name(self) -> str:
        """Unique name for this strategy (e.g. 'local', 'stub')."""
        ...

    async def run(
        self,
        command: str,
        arguments: Sequence[str],
        env: Mapping[str, str],
    ) -> CommandResult:
        """Run ``command`` with ``arguments`` and wait for it to exit.

        ``env`` holds the job's overrides; runners that spawn real
        processes overlay them on the ambient environment.

        Raises:
            CommandSpawnError: If the process cannot be launched.
        """
        ...
