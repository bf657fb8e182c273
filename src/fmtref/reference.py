"""
Reference table and demonstrations for the supported directives.

``REFERENCE_TABLE`` is the documented contract for each directive;
``DEMONSTRATIONS`` are concrete calls with their expected output, and
``run_demonstrations()`` replays them through :func:`fmtref.printer.printf`
so the contract is checked rather than just written down.

Examples:
    >>> describe("%-10s")
    'Left-aligns a string in a field of width 10, padding with spaces on the right.'
    >>> [d.expected for d in DEMONSTRATIONS if d.template == "%05d"]
    ['00005']
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TextIO

from fmtref.core.config import get_settings
from fmtref.core.errors import FormatError
from fmtref.core.logging import get_logger
from fmtref.core.result import try_result
from fmtref.directive import Alignment, ArgumentType, FormatDirective, PadChar, parse_directive
from fmtref.printer import printf

logger = get_logger(__name__)


@dataclass(frozen=True)
class ReferenceEntry:
    """One row of the reference table. Unused columns are None."""

    token: str
    argument: str | None
    width: int | None
    alignment: str | None
    pad: str | None
    behavior: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "token": self.token,
            "argument": self.argument,
            "width": self.width,
            "alignment": self.alignment,
            "pad": self.pad,
            "behavior": self.behavior,
        }


def describe_directive(directive: FormatDirective) -> str:
    noun = "a string" if directive.argument_type is ArgumentType.STRING else "an integer"

    if directive.width is None:
        if directive.argument_type is ArgumentType.STRING:
            return "Renders a string unchanged."
        return "Renders an integer as decimal digits, without padding."

    if directive.alignment is Alignment.LEFT:
        side, verb = "right", "Left-aligns"
    else:
        side, verb = "left", "Right-aligns"
    fill = "zeros" if directive.pad_char is PadChar.ZERO else "spaces"
    return f"{verb} {noun} in a field of width {directive.width}, padding with {fill} on the {side}."


def describe(token: str) -> str:
    """English description of ``token``.

    Raises:
        InvalidDirective: the token is not supported
    """
    if token == "%n":
        return "Writes the platform line terminator; takes no argument."
    if token == "%%":
        return "Writes a literal percent sign; takes no argument."
    return describe_directive(parse_directive(token))


def reference_entry(token: str) -> ReferenceEntry:
    if token in ("%n", "%%"):
        return ReferenceEntry(token, None, None, None, None, describe(token))

    directive = parse_directive(token)
    padded = directive.width is not None
    return ReferenceEntry(
        token=token,
        argument=directive.argument_type.value,
        width=directive.width,
        alignment=directive.alignment.value if padded else None,
        pad=directive.pad_char.value if padded else None,
        behavior=describe_directive(directive),
    )


REFERENCE_TOKENS = ("%n", "%s", "%-10s", "%10s", "%d", "%5d", "%05d")

REFERENCE_TABLE: tuple[ReferenceEntry, ...] = tuple(reference_entry(t) for t in REFERENCE_TOKENS)


# ── Demonstrations ───────────────────────────────────────────────────────


@dataclass(frozen=True)
class Demonstration:
    """A template, its arguments and the output it must produce.

    ``expected`` is written with ``\\n`` for every ``%n``.
    """

    template: str
    args: tuple[Any, ...]
    expected: str
    note: str = ""

    def expected_for(self, line_separator: str) -> str:
        return self.expected.replace("\n", line_separator)


@dataclass(frozen=True)
class DemoOutcome:
    demonstration: Demonstration
    actual: str | None
    matched: bool
    error: FormatError | None = None


DEMONSTRATIONS: tuple[Demonstration, ...] = (
    Demonstration("Hello%nWorld!%n", (), "Hello\nWorld!\n", "%n ends a line"),
    Demonstration(
        "%-10s%s",
        ("charan", "hari"),
        "charan    hari",
        "left-aligned in 10 columns, so the next string starts at column 11",
    ),
    Demonstration(
        "%10s%s",
        ("hari", "charan"),
        "      haricharan",
        "right-aligned in 10 columns: 6 spaces, then hari",
    ),
    Demonstration("%d", (5,), "5", "decimal digits, no padding"),
    Demonstration("%5d", (5,), "    5", "right-aligned in 5 columns"),
    Demonstration("%05d", (5,), "00005", "zero padded until it reaches 5 digits"),
)


def run_demonstrations(
    file: TextIO | None = None,
    *,
    line_separator: str | None = None,
    demonstrations: tuple[Demonstration, ...] = DEMONSTRATIONS,
) -> list[DemoOutcome]:
    """Print every demonstration and compare it with its expected output.

    Each demonstration is printed with :func:`printf` as written, so
    templates without ``%n`` run into the next one, as consecutive printf
    calls do.  A failing demonstration is reported, not raised.
    """
    separator = line_separator if line_separator is not None else get_settings().line_separator
    outcomes: list[DemoOutcome] = []

    for demo in demonstrations:
        result = try_result(
            lambda demo=demo: printf(demo.template, *demo.args, file=file, line_separator=separator)
        )
        if result.is_ok():
            actual = result.unwrap()
            matched = actual == demo.expected_for(separator)
            outcomes.append(DemoOutcome(demo, actual, matched))
        else:
            outcomes.append(DemoOutcome(demo, None, False, result.error))

        logger.debug(
            "demonstration_run",
            template=demo.template,
            matched=outcomes[-1].matched,
        )

    return outcomes


__all__ = [
    "DEMONSTRATIONS",
    "REFERENCE_TABLE",
    "REFERENCE_TOKENS",
    "DemoOutcome",
    "Demonstration",
    "ReferenceEntry",
    "describe",
    "describe_directive",
    "reference_entry",
    "run_demonstrations",
]
