"""
CLI: ``jobmock config`` — configuration inspection.
"""

from __future__ import annotations

import typer

from jobmock.cli.utils import output_json, output_mapping

app = typer.Typer(no_args_is_help=True)


@app.command("show")
def show(
    json_out: bool = typer.Option(False, "--json"),
) -> None:
    """Show the effective settings (env vars + .env file)."""
    from jobmock.settings import get_settings

    data = get_settings().model_dump()
    if json_out:
        output_json(data)
    else:
        output_mapping(data, title="jobmock settings")
