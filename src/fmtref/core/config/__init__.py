"""Centralized configuration for fmtref.

Quick start::

    from fmtref.core.config import get_settings

    settings = get_settings()
    print(repr(settings.line_separator))   # '\\n'

Guardrails:
    ❌ Reading ``os.linesep`` or ``FMTREF_*`` variables ad-hoc in each module
    ✅ ``get_settings().line_separator`` from the cached singleton
"""

from .settings import (
    FmtRefSettings,
    LogFormat,
    clear_settings_cache,
    get_settings,
)

__all__ = [
    "FmtRefSettings",
    "LogFormat",
    "get_settings",
    "clear_settings_cache",
]
