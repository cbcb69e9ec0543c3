"""Mock command runners — test doubles for the execution strategy.

These stand in for :class:`~jobmock.jobs.local_process.LocalProcessRunner`
wherever a test should not spawn real processes, the same way a remote
execution backend would be substituted.

Architecture::

    BaseCommandRunner
    ├── LocalProcessRunner      (real subprocesses)
    ├── StubCommandRunner       (canned result, records calls)
    ├── FailingCommandRunner    (always raises CommandSpawnError)
    └── SequenceCommandRunner   (scripted results in order)

Example::

    runner = StubCommandRunner(stdout="rendered 12 frames\\n")
    client = LocalJobsClient(runner=runner)

    runner = SequenceCommandRunner([
        CommandResult(exit_code=1, stderr="flaky"),
        CommandResult(exit_code=0, stdout="ok"),
    ])
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field

from jobmock.errors import CommandSpawnError
from jobmock.jobs._base import BaseCommandRunner
from jobmock.jobs._types import CommandResult


@dataclass(frozen=True)
class RecordedCall:
    """One invocation seen by a mock runner."""

    command: str
    arguments: list[str] = field(default_factory=list)
    env: dict[str, str] = field(default_factory=dict)


class StubCommandRunner(BaseCommandRunner):
    """Runner that returns one canned result for every call.

    .. code-block:: text

        StubCommandRunner behavior:

        run(...)
          ├── records RecordedCall in .calls
          └── returns CommandResult(exit_code, stdout, stderr)

    Example:
        >>> runner = StubCommandRunner(exit_code=2, stderr="boom")
        >>> result = await runner.run("anything", [], {})
        >>> result.exit_code
        2
    """

    def __init__(self, *, exit_code: int = 0, stdout: str = "", stderr: str = "") -> None:
        self.result = CommandResult(exit_code=exit_code, stdout=stdout, stderr=stderr)
        self.calls: list[RecordedCall] = []

    @property
    def runner_name(self) -> str:
        return "stub"

    @property
    def call_count(self) -> int:
        return len(self.calls)

    async def _do_run(
        self,
        command: str,
        arguments: Sequence[str],
        env: Mapping[str, str],
    ) -> CommandResult:
        self.calls.append(RecordedCall(command=command, arguments=list(arguments), env=dict(env)))
        return self.result


class FailingCommandRunner(BaseCommandRunner):
    """Runner whose processes can never be launched.

    Useful for exercising the spawn-failure path without depending on a
    missing executable on the host.
    """

    def __init__(self, *, message: str = "Simulated spawn failure") -> None:
        self._message = message
        self.calls: list[RecordedCall] = []

    @property
    def runner_name(self) -> str:
        return "failing"

    async def _do_run(
        self,
        command: str,
        arguments: Sequence[str],
        env: Mapping[str, str],
    ) -> CommandResult:
        self.calls.append(RecordedCall(command=command, arguments=list(arguments), env=dict(env)))
        raise CommandSpawnError(f"{self._message}: {command}", command=command)


class SequenceCommandRunner(BaseCommandRunner):
    """Runner that returns scripted results in order.

    Once the script is exhausted the last result repeats.

    Example:
        >>> runner = SequenceCommandRunner([
        ...     CommandResult(exit_code=1, stderr="first try"),
        ...     CommandResult(exit_code=0, stdout="second try"),
        ... ])
    """

    def __init__(self, results: Sequence[CommandResult]) -> None:
        if not results:
            raise ValueError("SequenceCommandRunner needs at least one result")
        self._results = list(results)
        self._index = 0
        self.calls: list[RecordedCall] = []

    @property
    def runner_name(self) -> str:
        return "sequence"

    async def _do_run(
        self,
        command: str,
        arguments: Sequence[str],
        env: Mapping[str, str],
    ) -> CommandResult:
        self.calls.append(RecordedCall(command=command, arguments=list(arguments), env=dict(env)))
        result = self._results[min(self._index, len(self._results) - 1)]
        self._index += 1
        return result
