"""
Root Typer application for the jobmock CLI.

The registry lives in memory, so each invocation starts with an empty
client: ``exec`` creates one job, runs it, and prints the result.
"""

from __future__ import annotations

import asyncio

import typer
from typer import Typer

from jobmock.cli.utils import console, output_error, output_json, output_record, parse_pairs

app = Typer(
    name="jobmock",
    help="jobmock — run cloud batch job specs as local subprocesses.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


# ── Version callback ─────────────────────────────────────────────────────


def _version_callback(value: bool) -> None:
    if value:
        from jobmock import __version__

        typer.echo(f"jobmock {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool | None = typer.Option(  # noqa: UP007
        None,
        "--version",
        "-V",
        help="Show version and exit.",
        callback=_version_callback,
        is_eager=True,
    ),
) -> None:
    """jobmock CLI — create and run jobs locally."""


# ── exec ─────────────────────────────────────────────────────────────────


@app.command("exec", context_settings={"allow_interspersed_args": False})
def exec_job(
    job_id: str = typer.Argument(..., help="Job identifier"),
    command: str = typer.Argument(..., help="Executable or script path"),
    args: list[str] | None = typer.Argument(None, help="Arguments passed to the command"),
    parent: str | None = typer.Option(None, "--parent", "-p", help="Scope label for the job"),
    env: list[str] | None = typer.Option(None, "--env", "-e", help="KEY=VALUE environment override"),
    label: list[str] | None = typer.Option(None, "--label", "-l", help="KEY=VALUE label"),
    shell: bool = typer.Option(False, "--shell", help="Run the command line through the shell"),
    json_out: bool = typer.Option(False, "--json"),
) -> None:
    """Create a job, run it, and print the resulting record."""
    from jobmock.errors import JobMockError
    from jobmock.jobs import CreateJobRequest, JobDefinition, JobStatus
    from jobmock.logging import configure_logging
    from jobmock.settings import create_client, get_settings

    configure_logging()
    settings = get_settings()
    if shell and not settings.shell:
        settings = settings.model_copy(update={"shell": True})

    request = CreateJobRequest(
        job_id=job_id,
        parent=settings.default_parent if parent is None else parent,
        job=JobDefinition(
            command=command,
            arguments=list(args or []),
            env=parse_pairs(env, option="--env"),
            labels=parse_pairs(label, option="--label"),
        ),
    )

    async def _run():
        async with create_client(settings) as client:
            await client.create_job(request)
            return await client.run_job(job_id)

    try:
        record = asyncio.run(_run())
    except JobMockError as err:
        output_error(err)

    if json_out:
        output_json(record.to_dict())
    else:
        output_record(record.to_dict(), title=f"Job: {record.resource_name}")

    if record.status == JobStatus.FAILED:
        raise typer.Exit(code=1)


# ── Sub-command registration ─────────────────────────────────────────────

from jobmock.cli.config import app as config_app  # noqa: E402

app.add_typer(config_app, name="config", help="Configuration management.")


def run() -> None:
    """Console-script entry point."""
    try:
        app()
    except KeyboardInterrupt:
        console.print("[dim]Interrupted.[/dim]")
        raise SystemExit(130) from None
