"""Base command runner with shared logging and error wrapping.

Architecture:

    .. code-block:: text

        CommandRunner (Protocol)
              │
              ▼
        BaseCommandRunner
        └── run()  → log + error wrapping → _do_run()
              │
        ┌─────┴──────────────┬──────────────────────┐
        ▼                    ▼                      ▼
    LocalProcessRunner   StubCommandRunner   FailingCommandRunner ...

Subclassing:
    class MyRunner(BaseCommandRunner):
        runner_name = "mine"

        async def _do_run(self, command, arguments, env):
            ...
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from jobmock.errors import CommandSpawnError
from jobmock.jobs._types import CommandResult
from jobmock.logging import get_logger

logger = get_logger(__name__)


class BaseCommandRunner:
    """Base class for command runners.

    Subclasses MUST implement ``_do_run`` and ``runner_name``.

    ``run`` wraps each call with:
        - Structured logging (start / finish)
        - ``OSError`` conversion to ``CommandSpawnError``

    .. code-block:: text

        run(command, arguments, env)
          ├── log: command_started
          ├── _do_run(...)   ← subclass implements
          ├── log: command_finished (exit_code)
          └── on OSError: raise CommandSpawnError from it
    """

    @property
    def runner_name(self) -> str:
        raise NotImplementedError

    async def run(
        self,
        command: str,
        arguments: Sequence[str],
        env: Mapping[str, str],
    ) -> CommandResult:
        """Run with logging and error wrapping."""
        logger.debug(
            "command_started",
            command=command,
            arguments=list(arguments),
            runner_name=self.runner_name,
        )
        try:
            result = await self._do_run(command, arguments, env)
        except CommandSpawnError as exc:
            logger.warning("command_spawn_failed", command=command, error=exc.message)
            raise
        except OSError as exc:
            logger.warning("command_spawn_failed", command=command, error=str(exc))
            raise CommandSpawnError(
                f"Failed to start process: {exc}",
                command=command,
                cause=exc,
            ) from exc

        logger.debug(
            "command_finished",
            command=command,
            exit_code=result.exit_code,
            runner_name=self.runner_name,
        )
        return result

    async def _do_run(
        self,
        command: str,
        arguments: Sequence[str],
        env: Mapping[str, str],
    ) -> CommandResult:
        """Implement in subclass."""
        raise NotImplementedError
