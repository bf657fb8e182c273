"""
Root Typer application for the fmtref CLI.
"""

from __future__ import annotations

import logging

import typer
from rich.markup import escape
from typer import Typer

from fmtref.cli import directives
from fmtref.cli.config import app as config_app
from fmtref.cli.utils import err_console

app = Typer(
    name="fmtref",
    help="fmtref — printf-style format directive reference.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


# ── Version callback ─────────────────────────────────────────────────────


def _version_callback(value: bool) -> None:
    if value:
        from fmtref import __version__

        typer.echo(f"fmtref {__version__}")
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
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        "-l",
        help="Log level for diagnostics on stderr (default: FMTREF_LOG_LEVEL).",
    ),
) -> None:
    """fmtref CLI — render, explain and demonstrate format directives."""
    from fmtref.core.config import get_settings
    from fmtref.core.errors import ConfigError
    from fmtref.core.logging import configure_logging

    try:
        settings = get_settings()
    except ConfigError as e:
        err_console.print(f"[red]Configuration Error:[/red] {escape(e.message)}")
        raise typer.Exit(1) from e

    level = (log_level or settings.log_level).upper()
    if not isinstance(getattr(logging, level, None), int):
        raise typer.BadParameter(f"unknown log level {log_level!r}", param_hint="--log-level")
    configure_logging(level=level, json_format=settings.json_logs)


# ── Command registration ─────────────────────────────────────────────────

app.command("render", context_settings={"ignore_unknown_options": True})(directives.render)
app.command("explain")(directives.explain)
app.command("table")(directives.table)
app.command("demo")(directives.demo)

app.add_typer(config_app, name="config", help="Configuration inspection.")
