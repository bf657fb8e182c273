"""
CLI layer for fmtref.

Provides a Typer application whose commands delegate to the library
modules (``fmtref.render``, ``fmtref.reference``).  This package handles
only terminal transport: argument parsing, coloured output, and tables.

Entry point::

    fmtref --help
"""

from fmtref.cli.app import app

__all__ = ["app"]
