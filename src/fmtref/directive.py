"""
Directive parsing - turn a token such as ``%-10s`` into a FormatDirective.

The accepted vocabulary is deliberately small::

    %s   %Ns   %-Ns          string, optional width, optional left alignment
    %d   %Nd   %-Nd   %0Nd   integer, optional width, alignment or zero pad

``%n`` (line terminator) and ``%%`` (literal percent) are template-level
directives: they consume no argument and are handled by
:mod:`fmtref.template`.

Anything else the printf family knows about (precision, ``%x``, ``%f``,
``+``/``#``/``,`` flags, argument indexes) is rejected with
:class:`~fmtref.core.errors.InvalidDirective`.

Examples:
    >>> d = parse_directive("%05d")
    >>> d.width, d.alignment.value, d.pad_char.value
    (5, 'right', 'zero')
    >>> parse_directive("%-10s").native_spec
    '%-10s'
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

from fmtref.core.errors import InvalidDirective, UnsupportedPadding
from fmtref.core.logging import get_logger

logger = get_logger(__name__)


# Broad on purpose: the scanner must find where a directive ends even when
# it is one fmtref rejects, so the error names the whole token.
DIRECTIVE_PATTERN = re.compile(
    r"%(?P<index>\d+\$)?"
    r"(?P<flags>[-#+ 0,(<]*)"
    r"(?P<width>\d+)?"
    r"(?P<precision>\.\d+)?"
    r"(?P<conversion>[a-zA-Z%])"
)

# Token shaped like a string/integer directive but with garbage where the
# width belongs, e.g. "%1os" or "%-x5d".
_BAD_WIDTH_PATTERN = re.compile(r"%[-0]*\S+[sd]")

SUPPORTED_FLAGS = frozenset("-0")
TEMPLATE_CONVERSIONS = frozenset("n%")


class ArgumentType(str, Enum):
    STRING = "string"
    INTEGER = "integer"


class Alignment(str, Enum):
    LEFT = "left"
    RIGHT = "right"


class PadChar(str, Enum):
    SPACE = "space"
    ZERO = "zero"


_CONVERSIONS = {
    "s": ArgumentType.STRING,
    "d": ArgumentType.INTEGER,
}


@dataclass(frozen=True)
class FormatDirective:
    """
    Immutable descriptor for one argument-consuming directive.

    Attributes:
        token: Literal token as written (``%-10s``)
        argument_type: STRING for ``s``, INTEGER for ``d``
        width: Minimum field width, or None
        alignment: LEFT only with the ``-`` flag; RIGHT otherwise
        pad_char: ZERO only with the ``0`` flag on an integer directive
    """

    token: str
    argument_type: ArgumentType
    width: int | None = None
    alignment: Alignment = Alignment.RIGHT
    pad_char: PadChar = PadChar.SPACE

    @property
    def conversion(self) -> str:
        return "s" if self.argument_type is ArgumentType.STRING else "d"

    @property
    def native_spec(self) -> str:
        """Equivalent ``%``-operator spec that performs the rendering."""
        flags = ""
        if self.alignment is Alignment.LEFT:
            flags += "-"
        if self.pad_char is PadChar.ZERO:
            flags += "0"
        width = "" if self.width is None else str(self.width)
        return f"%{flags}{width}{self.conversion}"

    def to_dict(self) -> dict[str, object]:
        return {
            "token": self.token,
            "argument_type": self.argument_type.value,
            "width": self.width,
            "alignment": self.alignment.value,
            "pad_char": self.pad_char.value,
        }


def directive_from_match(match: re.Match[str]) -> FormatDirective:
    """Validate a :data:`DIRECTIVE_PATTERN` match and build the directive.

    Raises:
        InvalidDirective: unsupported conversion, flag, precision, index,
            or an illegal flag/width combination
        UnsupportedPadding: ``0`` flag on a string directive
    """
    token = match.group(0)
    conversion = match.group("conversion")
    flags = match.group("flags")
    width = match.group("width")

    if conversion in TEMPLATE_CONVERSIONS:
        raise InvalidDirective(token, "takes no argument; use it inside a template")
    if conversion not in _CONVERSIONS:
        raise InvalidDirective(token, f"unsupported conversion {conversion!r}")
    if match.group("index"):
        raise InvalidDirective(token, "argument indexes are not supported")
    if match.group("precision"):
        raise InvalidDirective(token, "precision is not supported")

    for flag in flags:
        if flag not in SUPPORTED_FLAGS:
            raise InvalidDirective(token, f"unsupported flag {flag!r}")
    if len(set(flags)) != len(flags):
        raise InvalidDirective(token, "duplicate flag")

    argument_type = _CONVERSIONS[conversion]
    left = "-" in flags
    zero = "0" in flags

    if zero and argument_type is ArgumentType.STRING:
        raise UnsupportedPadding(token)
    if left and zero:
        raise InvalidDirective(token, "flags '-' and '0' cannot be combined")
    if flags and width is None:
        raise InvalidDirective(token, f"flag {flags[0]!r} requires a width")

    directive = FormatDirective(
        token=token,
        argument_type=argument_type,
        width=int(width) if width is not None else None,
        alignment=Alignment.LEFT if left else Alignment.RIGHT,
        pad_char=PadChar.ZERO if zero else PadChar.SPACE,
    )
    logger.debug("directive_parsed", **directive.to_dict())
    return directive


def parse_directive(token: str) -> FormatDirective:
    """Parse a single directive token.

    Raises:
        InvalidDirective: the token is not exactly one supported directive,
            or its width is not a non-negative integer
        UnsupportedPadding: zero padding on a string directive
    """
    match = DIRECTIVE_PATTERN.fullmatch(token)
    if match is None:
        if _BAD_WIDTH_PATTERN.fullmatch(token):
            raise InvalidDirective(token, "width must be a non-negative integer")
        raise InvalidDirective(token, "unrecognised directive syntax")
    return directive_from_match(match)


__all__ = [
    "Alignment",
    "ArgumentType",
    "DIRECTIVE_PATTERN",
    "FormatDirective",
    "PadChar",
    "directive_from_match",
    "parse_directive",
]
