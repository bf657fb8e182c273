"""
fmtref - printf-style format directive reference.

Parses the small directive vocabulary (``%s``, ``%-10s``, ``%10s``, ``%d``,
``%5d``, ``%05d``, ``%n``, ``%%``), validates arguments against it and
renders through Python's native ``%`` formatting.

Quick start::

    from fmtref import format_template, printf

    format_template("%-10s%s", "charan", "hari")   # 'charan    hari'
    printf("%05d%n", 5)                            # writes '00005\\n'
"""

from fmtref.core.errors import (
    ArgumentTypeMismatch,
    FormatError,
    InvalidDirective,
    MissingArgument,
    UnrenderableArgument,
    UnsupportedPadding,
)
from fmtref.directive import Alignment, ArgumentType, FormatDirective, PadChar, parse_directive
from fmtref.printer import printf
from fmtref.render import format_template, render_directive, try_format

__version__ = "0.1.0"

__all__ = [
    "Alignment",
    "ArgumentType",
    "ArgumentTypeMismatch",
    "FormatDirective",
    "FormatError",
    "InvalidDirective",
    "MissingArgument",
    "PadChar",
    "UnsupportedPadding",
    "UnrenderableArgument",
    "format_template",
    "parse_directive",
    "printf",
    "render_directive",
    "try_format",
    "__version__",
]
