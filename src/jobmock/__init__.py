"""
jobmock — a local, in-process mock of a cloud batch Jobs API.

Create job specifications, run them, and poll status and output exactly as
against the cloud control plane, except that each run is a local subprocess.
Client code can be tested without credentials or infrastructure.

Usage:
    from jobmock import LocalJobsClient

    async with LocalJobsClient() as client:
        await client.create_job(job_id="j1", command="echo", arguments=["Hello, World!"])
        job = await client.run_job("j1")
        assert job.status == "COMPLETED"
"""

from jobmock.errors import (
    CommandSpawnError,
    ConfigError,
    ErrorCategory,
    JobMockError,
    JobNotFoundError,
)
from jobmock.jobs import (
    CommandResult,
    CommandRunner,
    CreateJobRequest,
    JobDefinition,
    JobRecord,
    JobRegistry,
    JobStatus,
    ListJobsRequest,
    LocalJobsClient,
    LocalProcessRunner,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Client
    "LocalJobsClient",
    "JobRegistry",
    "LocalProcessRunner",
    # Types
    "CommandResult",
    "CommandRunner",
    "CreateJobRequest",
    "JobDefinition",
    "JobRecord",
    "JobStatus",
    "ListJobsRequest",
    # Errors
    "CommandSpawnError",
    "ConfigError",
    "ErrorCategory",
    "JobMockError",
    "JobNotFoundError",
]
