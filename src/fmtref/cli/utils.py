"""
CLI utility helpers — output formatting and error reporting.
"""

from __future__ import annotations

import json
import re
from typing import Any, NoReturn

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from fmtref.core.errors import FormatError

console = Console()
err_console = Console(stderr=True)

_INTEGER_RE = re.compile(r"[+-]?\d+")


# ── Argument helpers ─────────────────────────────────────────────────────


def coerce_argument(value: str, *, as_string: bool = False) -> str | int:
    """Turn a command line word into an ``int`` when it looks like one."""
    if not as_string and _INTEGER_RE.fullmatch(value):
        return int(value)
    return value


# ── Output helpers ───────────────────────────────────────────────────────


def fail(error: FormatError) -> NoReturn:
    """Report a ``FormatError`` on stderr and exit with status 1."""
    err_console.print(
        f"[bold red]Error[/bold red] ({error.category.value}): {escape(error.message)}"
    )
    raise typer.Exit(code=1)


def output_json(payload: Any) -> None:
    console.print_json(json.dumps(payload, default=str))


def print_table(rows: list[dict[str, Any]], *, title: str = "") -> None:
    """Render a list of dicts as a Rich table."""
    if not rows:
        console.print("[dim]No items.[/dim]")
        return
    table = Table(title=title or None, show_lines=False, pad_edge=False)
    for col in rows[0]:
        table.add_column(col, overflow="fold")
    for row in rows:
        table.add_row(*(escape("" if v is None else str(v)) for v in row.values()))
    console.print(table)


def print_dict(data: dict[str, Any], *, title: str = "") -> None:
    """Render a single dict as key-value pairs."""
    if title:
        console.print(f"[bold]{escape(title)}[/bold]")
    for k, v in data.items():
        console.print(f"  [cyan]{k}[/cyan]: {escape(str(v))}")
