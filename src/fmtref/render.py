"""
Rendering - validate arguments against directives and render them.

The padding, alignment and sign rules are not reimplemented here: once a
directive and its argument have been validated, the text is produced by
Python's own ``%`` operator using :attr:`FormatDirective.native_spec`.

Examples:
    >>> render_directive("%-10s", "charan") + render_directive("%s", "hari")
    'charan    hari'
    >>> format_template("%10s%s", "hari", "charan")
    '      haricharan'
    >>> format_template("%05d", 5)
    '00005'
"""

from __future__ import annotations

from typing import Any

from fmtref.core.config import get_settings
from fmtref.core.errors import (
    ArgumentTypeMismatch,
    FormatError,
    MissingArgument,
    UnrenderableArgument,
)
from fmtref.core.logging import get_logger
from fmtref.core.result import Result, try_result
from fmtref.directive import ArgumentType, FormatDirective, parse_directive
from fmtref.template import (
    DirectiveSegment,
    LineSeparator,
    Literal,
    PercentLiteral,
    parse_template,
)

logger = get_logger(__name__)

_NO_ARGUMENT = object()

NULL_TEXT = "null"


def _is_integer(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _resolve_separator(line_separator: str | None) -> str:
    if line_separator is not None:
        return line_separator
    return get_settings().line_separator


def render_value(directive: FormatDirective, argument: Any) -> str:
    """Render one argument through an already parsed directive.

    String directives render ``None`` as ``"null"``, the way printf-family
    formatters print a null reference; any other value goes through ``str()``.

    Raises:
        ArgumentTypeMismatch: an integer directive got a non-integer
        UnrenderableArgument: the integer is too long to convert to digits
    """
    if directive.argument_type is ArgumentType.INTEGER and not _is_integer(argument):
        raise ArgumentTypeMismatch(directive.token, argument)
    if argument is None:
        argument = NULL_TEXT
    try:
        return directive.native_spec % (argument,)
    except ValueError as e:
        raise UnrenderableArgument(directive.token, argument, cause=e) from e


def render_directive(
    directive: FormatDirective | str,
    argument: Any = _NO_ARGUMENT,
    *,
    line_separator: str | None = None,
) -> str:
    """Render a single directive.

    ``directive`` may be a parsed :class:`FormatDirective` or a token.  The
    template-level tokens ``%n`` and ``%%`` are accepted too and take no
    argument.

    Raises:
        InvalidDirective: the token is not a supported directive
        UnsupportedPadding: zero padding on a string directive
        ArgumentTypeMismatch: argument type does not match
        MissingArgument: an argument directive was called without argument
    """
    if isinstance(directive, str):
        if directive == "%n":
            return _resolve_separator(line_separator)
        if directive == "%%":
            return "%"
        directive = parse_directive(directive)

    if argument is _NO_ARGUMENT:
        raise MissingArgument(directive.token, 0)
    return render_value(directive, argument)


def format_template(template: str, *args: Any, line_separator: str | None = None) -> str:
    """Render a whole template, consuming ``args`` in order.

    Surplus arguments are ignored.  On any error nothing is returned: the
    error carries the template, the token position and, for argument
    errors, the argument index.

    Raises:
        InvalidDirective, UnsupportedPadding: bad directive in ``template``
        ArgumentTypeMismatch: argument type does not match its directive
        MissingArgument: fewer arguments than directives
    """
    separator: str | None = None
    parts: list[str] = []
    index = 0

    try:
        segments = parse_template(template)
        for segment in segments:
            if isinstance(segment, Literal):
                parts.append(segment.text)
            elif isinstance(segment, PercentLiteral):
                parts.append("%")
            elif isinstance(segment, LineSeparator):
                if separator is None:
                    separator = _resolve_separator(line_separator)
                parts.append(separator)
            elif isinstance(segment, DirectiveSegment):
                token = segment.directive.token
                if index >= len(args):
                    raise MissingArgument(token, index).with_context(
                        template=template, position=segment.position
                    )
                try:
                    parts.append(render_value(segment.directive, args[index]))
                except FormatError as e:
                    raise e.with_context(
                        template=template,
                        position=segment.position,
                        argument_index=index,
                    )
                index += 1
    except FormatError as e:
        logger.warning("format_failed", **e.to_dict())
        raise

    if index < len(args):
        logger.debug("surplus_arguments_ignored", template=template, used=index, given=len(args))

    rendered = "".join(parts)
    logger.debug("template_rendered", template=template, arguments=index, length=len(rendered))
    return rendered


def try_format(template: str, *args: Any, line_separator: str | None = None) -> Result[str]:
    """:func:`format_template` returning ``Ok``/``Err`` instead of raising."""
    return try_result(lambda: format_template(template, *args, line_separator=line_separator))


__all__ = [
    "format_template",
    "render_directive",
    "render_value",
    "try_format",
]
