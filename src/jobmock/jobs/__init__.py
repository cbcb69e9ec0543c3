"""Jobs: registry, execution state machine, and command runners.

Architecture:

    .. code-block:: text

        jobmock.jobs
        ├── __init__.py       ← Public API (this file)
        ├── _types.py         ← JobStatus, JobRecord, requests, CommandRunner protocol
        ├── _base.py          ← BaseCommandRunner (logging + error wrapping)
        ├── local_process.py  ← LocalProcessRunner (asyncio subprocess)
        ├── mock_runners.py   ← Stub / Failing / Sequence runners for tests
        ├── registry.py       ← JobRegistry (owned keyed table)
        └── client.py         ← LocalJobsClient (public operation surface)

    LocalJobsClient owns one JobRegistry and one CommandRunner. Swapping the
    runner swaps how jobs execute without touching the state machine.
"""

from jobmock.jobs._base import BaseCommandRunner
from jobmock.jobs._types import (
    CommandResult,
    CommandRunner,
    CreateJobRequest,
    JobDefinition,
    JobRecord,
    JobStatus,
    ListJobsRequest,
)
from jobmock.jobs.client import LocalJobsClient
from jobmock.jobs.local_process import LocalProcessRunner
from jobmock.jobs.mock_runners import (
    FailingCommandRunner,
    RecordedCall,
    SequenceCommandRunner,
    StubCommandRunner,
)
from jobmock.jobs.registry import JobRegistry

__all__ = [
    # Types & Protocol
    "CommandResult",
    "CommandRunner",
    "CreateJobRequest",
    "JobDefinition",
    "JobRecord",
    "JobStatus",
    "ListJobsRequest",
    # Runners
    "BaseCommandRunner",
    "LocalProcessRunner",
    # Registry & client
    "JobRegistry",
    "LocalJobsClient",
    # Mock runners (testing)
    "FailingCommandRunner",
    "RecordedCall",
    "SequenceCommandRunner",
    "StubCommandRunner",
]
