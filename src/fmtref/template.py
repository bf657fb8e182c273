"""
Template scanning - split a whole format string into ordered segments.

``"Hello%nWorld!%n"`` becomes::

    Literal("Hello"), LineSeparator(), Literal("World!"), LineSeparator()

``"%-10s%s"`` becomes two DirectiveSegments, each consuming one argument.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import Union

from fmtref.core.errors import FormatError, InvalidDirective
from fmtref.directive import DIRECTIVE_PATTERN, FormatDirective, directive_from_match


@dataclass(frozen=True)
class Literal:
    text: str
    position: int = 0


@dataclass(frozen=True)
class LineSeparator:
    """``%n``: the configured line terminator."""

    position: int = 0


@dataclass(frozen=True)
class PercentLiteral:
    """``%%``: a single percent sign."""

    position: int = 0


@dataclass(frozen=True)
class DirectiveSegment:
    directive: FormatDirective
    position: int = 0


Segment = Union[Literal, LineSeparator, PercentLiteral, DirectiveSegment]


@lru_cache(maxsize=256)
def parse_template(template: str) -> tuple[Segment, ...]:
    """Scan ``template`` into segments.

    Raises:
        InvalidDirective: a ``%`` that does not start a supported directive;
            the error context carries the template and the token position
    """
    segments: list[Segment] = []
    literal_start = 0
    pos = template.find("%")

    while pos != -1:
        if pos > literal_start:
            segments.append(Literal(template[literal_start:pos], literal_start))

        match = DIRECTIVE_PATTERN.match(template, pos)
        if match is None:
            reason = "dangling '%' at end of template" if pos == len(template) - 1 else "unrecognised directive syntax"
            raise InvalidDirective(template[pos : pos + 2], reason).with_context(
                template=template, position=pos
            )

        conversion = match.group("conversion")
        plain = match.group(0) == f"%{conversion}"
        if plain and conversion == "n":
            segments.append(LineSeparator(pos))
        elif plain and conversion == "%":
            segments.append(PercentLiteral(pos))
        else:
            try:
                directive = directive_from_match(match)
            except FormatError as e:
                raise e.with_context(template=template, position=pos)
            segments.append(DirectiveSegment(directive, pos))

        literal_start = match.end()
        pos = template.find("%", literal_start)

    if literal_start < len(template):
        segments.append(Literal(template[literal_start:], literal_start))

    return tuple(segments)


def argument_count(template: str) -> int:
    """Number of arguments ``template`` consumes."""
    return sum(isinstance(s, DirectiveSegment) for s in parse_template(template))


__all__ = [
    "DirectiveSegment",
    "LineSeparator",
    "Literal",
    "PercentLiteral",
    "Segment",
    "argument_count",
    "parse_template",
]
