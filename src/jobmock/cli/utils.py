"""
CLI utility helpers — output formatting and option parsing.
"""

from __future__ import annotations

import json
from typing import Any

import typer
from rich.console import Console
from rich.table import Table

from jobmock.errors import JobMockError

console = Console()
err_console = Console(stderr=True)

_STATUS_STYLES = {
    "COMPLETED": "green",
    "FAILED": "red",
    "RUNNING": "yellow",
    "UPDATED": "cyan",
    "CREATED": "dim",
}


# ── Option parsing ───────────────────────────────────────────────────────


def parse_pairs(values: list[str] | None, *, option: str) -> dict[str, str]:
    """Parse repeated ``KEY=VALUE`` options into a dict."""
    result: dict[str, str] = {}
    for raw in values or []:
        key, sep, value = raw.partition("=")
        if not sep or not key:
            raise typer.BadParameter(f"expected KEY=VALUE, got {raw!r}", param_hint=option)
        result[key] = value
    return result


# ── Output helpers ───────────────────────────────────────────────────────


def output_json(payload: Any) -> None:
    console.print_json(json.dumps(payload, default=str))


def output_record(data: dict[str, Any], *, title: str = "") -> None:
    """Render a job record dict as a two-column table."""
    table = Table(title=title or None, show_header=False, pad_edge=False)
    table.add_column("field", style="bold")
    table.add_column("value", overflow="fold")
    for key, value in data.items():
        if key == "output":
            continue
        if key == "status":
            style = _STATUS_STYLES.get(str(value), "")
            table.add_row(key, f"[{style}]{value}[/{style}]" if style else str(value))
        elif isinstance(value, dict | list):
            table.add_row(key, json.dumps(value) if value else "-")
        else:
            table.add_row(key, "-" if value is None else str(value))
    console.print(table)

    output = data.get("output")
    if output:
        console.print("\n[bold]Output:[/bold]")
        console.print(output, markup=False, highlight=False)


def output_mapping(data: dict[str, Any], *, title: str = "") -> None:
    """Render a flat mapping as a key/value table."""
    table = Table(title=title or None, pad_edge=False)
    table.add_column("key", style="bold")
    table.add_column("value", overflow="fold")
    for key, value in data.items():
        table.add_row(key, str(value))
    console.print(table)


def output_error(err: JobMockError) -> None:
    """Print a jobmock error to stderr and exit with code 1."""
    err_console.print(f"[bold red]Error[/bold red] ({err.category.value}): {err.message}")
    raise typer.Exit(code=1)
