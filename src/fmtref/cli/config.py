"""
CLI: ``fmtref config`` — configuration inspection.
"""

from __future__ import annotations

import typer
from rich.markup import escape

from fmtref.cli.utils import console, err_console

app = typer.Typer(no_args_is_help=True)


@app.command("show")
def show_config(
    format: str = typer.Option("table", "--format", "-f", help="Output format: table, json, env"),
) -> None:
    """Show current configuration."""
    from fmtref.core.config import get_settings

    settings = get_settings()

    if format == "json":
        console.print_json(settings.model_dump_json())
        return

    if format == "env":
        for key, value in sorted(settings.model_dump(mode="json").items()):
            console.print(f"FMTREF_{key.upper()}={value!r}", markup=False)
        return

    from rich.table import Table

    table = Table()
    table.add_column("Setting")
    table.add_column("Value")
    table.add_row("Line separator", repr(settings.line_separator))
    table.add_row("Log level", settings.log_level)
    table.add_row("Log format", settings.log_format.value)
    console.print(table)


@app.command("validate")
def validate_config() -> None:
    """Validate configuration from the environment and .env file."""
    from fmtref.core.config import get_settings
    from fmtref.core.errors import ConfigError

    try:
        get_settings(_force_reload=True)
    except ConfigError as e:
        err_console.print(f"[red]Configuration Error:[/red] {escape(e.message)}")
        raise typer.Exit(1) from e

    console.print("[green]✓ Configuration is valid[/green]")
