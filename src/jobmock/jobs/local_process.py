"""Local process runner — executes jobs as local subprocesses.

A ``CommandRunner`` that launches the job's command on this machine instead
of in a remote container, so client code written against the cloud Jobs API
can be exercised without credentials or infrastructure.

Architecture:

    .. code-block:: text

        LocalProcessRunner — Container-Free Execution
        ┌─────────────────────────────────────────────────────────┐
        │                                                         │
        │  Job field          │ Local process equivalent          │
        │  ───────────────────┼───────────────────────────────────│
        │  command            │ argv[0] (looked up in $PATH)      │
        │  arguments          │ argv[1:]                          │
        │  env                │ os.environ overlay                │
        │                     │                                   │
        │  NOT supported locally:                                 │
        │  - Images, resource limits, network isolation           │
        │  - Timeouts and cancellation                            │
        │                                                         │
        └─────────────────────────────────────────────────────────┘

Example:
    >>> runner = LocalProcessRunner()
    >>> result = await runner.run("echo", ["Hello, World!"], {})
    >>> result.stdout
    'Hello, World!\\n'
"""

from __future__ import annotations

import asyncio
import os
import shlex
from collections.abc import Mapping, Sequence
from pathlib import Path

from jobmock.errors import CommandSpawnError
from jobmock.jobs._base import BaseCommandRunner
from jobmock.jobs._types import CommandResult
from jobmock.logging import get_logger, is_debug_enabled

logger = get_logger(__name__)


class LocalProcessRunner(BaseCommandRunner):
    """Runs job commands as local OS subprocesses.

    Uses ``asyncio.create_subprocess_exec`` so the awaiting caller suspends
    while other jobs keep running. With ``shell=True`` the command and its
    arguments are joined into one command line and handed to the system
    shell, which is how callers that pass ``echo "Hello, World!"`` as a
    single command string expect it to behave.

    Example:
        >>> runner = LocalProcessRunner(inherit_env=False)
        >>> result = await runner.run("env", [], {"FOO": "bar"})
        >>> result.stdout
        'FOO=bar\\n'
    """

    def __init__(
        self,
        *,
        inherit_env: bool = True,
        shell: bool = False,
        cwd: str | Path | None = None,
    ) -> None:
        """Initialize the local process runner.

        Args:
            inherit_env: If True, child processes inherit the current
                environment (with the job env overlaid). If False, only
                the job env is passed.
            shell: Run the joined command line through the system shell.
            cwd: Working directory for child processes. Defaults to the
                current directory.
        """
        self._inherit_env = inherit_env
        self._shell = shell
        self._cwd = str(cwd) if cwd is not None else None

    @property
    def runner_name(self) -> str:
        return "local"

    async def _do_run(
        self,
        command: str,
        arguments: Sequence[str],
        env: Mapping[str, str],
    ) -> CommandResult:
        if not command:
            raise CommandSpawnError("No command specified", command=command)

        process_env = self._build_env(env)

        try:
            if self._shell:
                process = await asyncio.create_subprocess_shell(
                    self._build_command_line(command, arguments),
                    stdout=asyncio.subprocess.PIPE,
                    stderr=asyncio.subprocess.PIPE,
                    env=process_env,
                    cwd=self._cwd,
                )
            else:
                process = await asyncio.create_subprocess_exec(
                    command,
                    *arguments,
                    stdout=asyncio.subprocess.PIPE,
                    stderr=asyncio.subprocess.PIPE,
                    env=process_env,
                    cwd=self._cwd,
                )
        except FileNotFoundError as exc:
            raise CommandSpawnError(
                f"Command not found: {command} ({exc})",
                command=command,
                cause=exc,
            ) from exc
        except PermissionError as exc:
            raise CommandSpawnError(
                f"Permission denied: {command} ({exc})",
                command=command,
                cause=exc,
            ) from exc
        except (ValueError, TypeError) as exc:
            # NUL bytes in argv, "=" in an env key
            raise CommandSpawnError(
                f"Invalid command line: {command!r} ({exc})",
                command=command,
                cause=exc,
            ) from exc

        stdout, stderr = await process.communicate()
        result = CommandResult(
            exit_code=process.returncode if process.returncode is not None else -1,
            stdout=stdout.decode(errors="replace") if stdout else "",
            stderr=stderr.decode(errors="replace") if stderr else "",
        )

        if is_debug_enabled():
            for line in result.stdout.splitlines():
                logger.debug("command_output", stream="stdout", line=line)
            for line in result.stderr.splitlines():
                logger.debug("command_output", stream="stderr", line=line)

        return result

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _build_env(self, overrides: Mapping[str, str]) -> dict[str, str]:
        """Build environment dict for the subprocess."""
        env = dict(os.environ) if self._inherit_env else {}
        env.update(overrides)
        return env

    def _build_command_line(self, command: str, arguments: Sequence[str]) -> str:
        """Join command + quoted arguments for the shell.

        The command itself is passed through unquoted so that a full
        command line stored in ``command`` keeps working.
        """
        if not arguments:
            return command
        return " ".join([command, shlex.join(arguments)])
