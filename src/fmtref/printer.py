"""
printf - render a template and write it to a stream.

Like the printf it documents, no terminator is appended: use ``%n`` in
the template to end a line.
"""

from __future__ import annotations

import sys
from typing import Any, TextIO

from fmtref.render import format_template


def printf(
    template: str,
    *args: Any,
    file: TextIO | None = None,
    line_separator: str | None = None,
) -> str:
    """Render ``template`` with ``args`` and write it to ``file``.

    ``file`` defaults to the current ``sys.stdout``.  The template is fully
    rendered before anything is written, so a failing call writes nothing.

    Returns:
        The text that was written.
    """
    text = format_template(template, *args, line_separator=line_separator)
    stream = file if file is not None else sys.stdout
    stream.write(text)
    return text


__all__ = ["printf"]
