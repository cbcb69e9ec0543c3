"""Local jobs client — the job registry and execution state machine.

``LocalJobsClient`` mirrors the operation surface of a cloud Jobs control
plane (create / run / get / list / update / delete) but keeps job records in
an owned in-memory table and executes them through a pluggable
:class:`~jobmock.jobs._types.CommandRunner`.

Architecture:

    .. code-block:: text

        caller
          │ create_job(request)
          ▼
        LocalJobsClient ──► JobRegistry (name → JobRecord)
          │ run_job(name)
          ▼
        CommandRunner.run(command, arguments, env)
          ├── exit 0        → COMPLETED, output = stdout or stderr
          ├── exit != 0     → FAILED,    output = diagnostic text
          └── spawn error   → FAILED,    output = error message

    .. mermaid::

        stateDiagram-v2
            [*] --> CREATED: create_job
            CREATED --> RUNNING: run_job
            RUNNING --> COMPLETED: exit 0
            RUNNING --> FAILED: exit != 0 / spawn error
            COMPLETED --> RUNNING: run_job
            FAILED --> RUNNING: run_job
            UPDATED --> RUNNING: run_job
            CREATED --> UPDATED: update_job
            COMPLETED --> UPDATED: update_job
            FAILED --> UPDATED: update_job

Error handling:
    Unknown identifiers raise :class:`~jobmock.errors.JobNotFoundError` from
    ``run_job``, ``update_job`` and ``delete_job``; ``get_job`` returns None.
    Execution failures are never raised. They are recorded on the job as
    ``FAILED`` with the diagnostic text in ``output``.

Example:
    >>> async with LocalJobsClient() as client:
    ...     await client.create_job(job_id="j1", command="echo", arguments=["Hello, World!"])
    ...     job = await client.run_job("j1")
    ...     job.status, job.output
    (<JobStatus.COMPLETED: 'COMPLETED'>, 'Hello, World!\\n')
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from jobmock.errors import CommandSpawnError
from jobmock.jobs._types import (
    CommandResult,
    CommandRunner,
    CreateJobRequest,
    JobDefinition,
    JobRecord,
    JobStatus,
    ListJobsRequest,
    _utcnow,
)
from jobmock.jobs.registry import JobRegistry
from jobmock.logging import get_logger, push_context

logger = get_logger(__name__)


class LocalJobsClient:
    """In-process stand-in for a cloud Jobs API client.

    Args:
        runner: Execution strategy. Defaults to ``LocalProcessRunner()``.
        creator: Attribution stamped on every created record.
        registry: Table to store records in. Each client gets a fresh one
            by default.
    """

    def __init__(
        self,
        *,
        runner: CommandRunner | None = None,
        creator: str = "test",
        registry: JobRegistry | None = None,
    ) -> None:
        if runner is None:
            from jobmock.jobs.local_process import LocalProcessRunner

            runner = LocalProcessRunner()
        self._runner = runner
        self._creator = creator
        self._registry = registry if registry is not None else JobRegistry()

    @property
    def runner(self) -> CommandRunner:
        return self._runner

    @property
    def registry(self) -> JobRegistry:
        return self._registry

    # ------------------------------------------------------------------
    # Create
    # ------------------------------------------------------------------

    async def create_job(
        self,
        request: CreateJobRequest | None = None,
        *,
        job_id: str | None = None,
        command: str = "",
        arguments: Sequence[str] | None = None,
        parent: str = "",
        env: Mapping[str, str] | None = None,
        labels: Mapping[str, str] | None = None,
    ) -> JobRecord:
        """Register a job with status ``CREATED``.

        Accepts either a :class:`CreateJobRequest` or the flat keyword
        shape (``job_id``, ``command``, ``arguments``, ...). An existing job
        with the same identifier is replaced.

        Returns:
            The new record. With ``request.validate_only`` the record is
            built but not stored.

        Raises:
            TypeError: If neither a request nor ``job_id`` is given.
        """
        if request is None:
            if job_id is None:
                raise TypeError("create_job() needs a CreateJobRequest or job_id=")
            request = CreateJobRequest(
                job_id=job_id,
                parent=parent,
                job=JobDefinition(
                    command=command,
                    arguments=list(arguments or []),
                    env=dict(env or {}),
                    labels=dict(labels or {}),
                ),
            )

        definition = request.job
        record = JobRecord(
            name=request.job_id,
            parent=request.parent,
            command=definition.command,
            arguments=list(definition.arguments),
            env=dict(definition.env),
            labels=dict(definition.labels),
            annotations=dict(definition.annotations),
            creator=self._creator,
        )

        if request.validate_only:
            logger.debug("job_validated", job_id=record.name)
            return record

        previous = self._registry.put(record)
        logger.info(
            "job_created",
            job_id=record.name,
            parent=record.parent,
            command=record.command,
            replaced=previous is not None,
        )
        return record

    # ------------------------------------------------------------------
    # Run
    # ------------------------------------------------------------------

    async def run_job(self, job_id: str) -> JobRecord:
        """Execute a job and wait for its process to exit.

        Sets ``RUNNING``, invokes the runner, then records the outcome.
        Execution failures are captured on the record, not raised.

        Raises:
            JobNotFoundError: If no job is registered as ``job_id``.
        """
        record = self._registry.require(job_id)

        token = push_context(job_id=record.name, parent=record.parent or None,
                             runner=self._runner.runner_name)
        try:
            record.status = JobStatus.RUNNING
            logger.info("job_run_started", command=record.command, arguments=record.arguments)

            try:
                result = await self._runner.run(record.command, record.arguments, record.env)
            except (CommandSpawnError, OSError) as exc:
                self._finish(record, JobStatus.FAILED, output=str(exc) or repr(exc), exit_code=None)
                logger.warning("job_run_failed", reason="spawn", error=record.output)
                return record

            if result.succeeded:
                self._finish(
                    record,
                    JobStatus.COMPLETED,
                    output=result.stdout or result.stderr,
                    exit_code=result.exit_code,
                )
                logger.info("job_run_finished", exit_code=result.exit_code)
            else:
                self._finish(
                    record,
                    JobStatus.FAILED,
                    output=_failure_output(record, result),
                    exit_code=result.exit_code,
                )
                logger.warning("job_run_failed", reason="exit_code", exit_code=result.exit_code)
            return record
        finally:
            token.restore()

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    async def get_job(self, job_id: str) -> JobRecord | None:
        """Return the current record, or None if it does not exist."""
        return self._registry.get(job_id)

    async def list_jobs(self, request: ListJobsRequest | None = None) -> list[JobRecord]:
        """Return every registered job.

        ``request`` is accepted for call-shape compatibility; its filter
        and paging fields have no effect.
        """
        return self._registry.values()

    # ------------------------------------------------------------------
    # Update / delete
    # ------------------------------------------------------------------

    async def update_job(self, job_id: str, command: str) -> JobRecord:
        """Replace a job's command and mark it ``UPDATED``.

        Arguments and environment are left untouched.

        Raises:
            JobNotFoundError: If no job is registered as ``job_id``.
        """
        record = self._registry.require(job_id)
        record.command = command
        record.status = JobStatus.UPDATED
        record.update_time = _utcnow()
        logger.info("job_updated", job_id=job_id, command=command)
        return record

    async def delete_job(self, job_id: str) -> None:
        """Remove a job.

        Raises:
            JobNotFoundError: If no job is registered as ``job_id``,
                including one that was already deleted.
        """
        self._registry.remove(job_id)
        logger.info("job_deleted", job_id=job_id)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    async def close(self) -> None:
        """Drop every job record."""
        self._registry.clear()

    async def __aenter__(self) -> LocalJobsClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    def __repr__(self) -> str:
        return f"LocalJobsClient(runner={self._runner.runner_name!r}, jobs={len(self._registry)})"

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _finish(
        record: JobRecord,
        status: JobStatus,
        *,
        output: str,
        exit_code: int | None,
    ) -> None:
        record.status = status
        record.output = output
        record.exit_code = exit_code
        record.update_time = _utcnow()


def _failure_output(record: JobRecord, result: CommandResult) -> str:
    """Diagnostic text for a non-zero exit. Never empty."""
    header = f"Command failed with exit code {result.exit_code}: {record.command}"
    detail = result.stderr.strip() or result.stdout.strip()
    return f"{header}\n{detail}" if detail else header
