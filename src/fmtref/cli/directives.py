"""
CLI: ``fmtref render | explain | table | demo`` — directive commands.
"""

from __future__ import annotations

import io
import sys

import typer

from fmtref.cli.utils import (
    coerce_argument,
    console,
    err_console,
    fail,
    output_json,
    print_dict,
    print_table,
)
from fmtref.core.errors import FormatError


def render(
    template: str = typer.Argument(..., help="Format template, e.g. '%-10s%s'."),
    args: list[str] | None = typer.Argument(None, help="Arguments consumed in order."),
    strings: bool = typer.Option(False, "--strings", "-s", help="Pass every argument as a string."),
    no_newline: bool = typer.Option(False, "--no-newline", "-n", help="Do not end the output with a newline."),
) -> None:
    """Render TEMPLATE with ARGS, like printf."""
    from fmtref.printer import printf
    from fmtref.template import argument_count

    values = [coerce_argument(a, as_string=strings) for a in args or []]
    try:
        printf(template, *values, file=sys.stdout)
    except FormatError as e:
        fail(e)
    if not no_newline:
        typer.echo("")

    surplus = len(values) - argument_count(template)
    if surplus > 0:
        err_console.print(f"[yellow]Warning:[/yellow] {surplus} surplus argument(s) ignored")


def explain(
    token: str = typer.Argument(..., help="Single directive, e.g. '%05d'."),
    json_out: bool = typer.Option(False, "--json"),
) -> None:
    """Show how a directive renders its argument."""
    from fmtref.reference import reference_entry

    try:
        entry = reference_entry(token)
    except FormatError as e:
        fail(e)

    if json_out:
        output_json(entry.to_dict())
        return
    print_dict(entry.to_dict(), title=token)


def table(
    json_out: bool = typer.Option(False, "--json"),
) -> None:
    """Print the directive reference table."""
    from fmtref.reference import REFERENCE_TABLE

    rows = [entry.to_dict() for entry in REFERENCE_TABLE]
    if json_out:
        output_json(rows)
        return
    print_table(rows, title="Format directives")


def demo(
    raw: bool = typer.Option(False, "--raw", help="Print the demonstrations' output as-is."),
    json_out: bool = typer.Option(False, "--json"),
) -> None:
    """Run the demonstrations and check their output."""
    from fmtref.reference import run_demonstrations

    if raw:
        outcomes = run_demonstrations(sys.stdout, line_separator="\n")
        typer.echo("")
    else:
        outcomes = run_demonstrations(io.StringIO(), line_separator="\n")

        rows = [
            {
                "template": o.demonstration.template,
                "args": ", ".join(repr(a) for a in o.demonstration.args),
                "expected": repr(o.demonstration.expected),
                "actual": repr(o.actual) if o.error is None else o.error.message,
                "ok": "✓" if o.matched else "✗",
            }
            for o in outcomes
        ]
        if json_out:
            output_json(rows)
        else:
            print_table(rows, title="Demonstrations")

    failed = [o for o in outcomes if not o.matched]
    if failed:
        if not json_out:
            console.print(f"[red]{len(failed)} demonstration(s) did not match[/red]")
        raise typer.Exit(code=1)
