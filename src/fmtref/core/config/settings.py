"""
Centralized settings for fmtref.

:class:`FmtRefSettings` is the single validated, cached source for the
few knobs the library has: the text rendered for ``%n`` and how the CLI
configures logging.  Values come from ``FMTREF_*`` environment variables
or a ``.env`` file.

Tags:
    fmtref, configuration, settings, pydantic, caching, validation

Doc-Types:
    api-reference
"""

from __future__ import annotations

import logging
import os
from enum import Enum
from pathlib import Path

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from fmtref.core.errors import ConfigError


class LogFormat(str, Enum):
    """Renderer used by :func:`fmtref.core.logging.configure_logging`."""

    CONSOLE = "console"
    JSON = "json"


class FmtRefSettings(BaseSettings):
    """fmtref configuration.

    All fields can be set via ``FMTREF_*`` environment variables (e.g.
    ``FMTREF_LINE_SEPARATOR``) or through a ``.env`` file.
    """

    model_config = SettingsConfigDict(
        env_prefix="FMTREF_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ── Rendering ────────────────────────────────────────────────
    line_separator: str = Field(
        default=os.linesep,
        description="Text rendered for the %n directive",
    )

    # ── Logging ──────────────────────────────────────────────────
    log_level: str = Field(default="WARNING")
    log_format: LogFormat = Field(default=LogFormat.CONSOLE)

    @field_validator("line_separator")
    @classmethod
    def _check_line_separator(cls, value: str) -> str:
        if value not in ("\n", "\r\n", "\r"):
            raise ValueError(f"line_separator must be one of \\n, \\r\\n, \\r (got {value!r})")
        return value

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level {value!r}")
        return level

    @property
    def json_logs(self) -> bool:
        return self.log_format == LogFormat.JSON


# ── Settings factory with caching ────────────────────────────────────────

_settings_cache: dict[str, FmtRefSettings] = {}


def get_settings(
    *,
    env_file: Path | None = None,
    _force_reload: bool = False,
) -> FmtRefSettings:
    """Load, validate, and cache a :class:`FmtRefSettings` instance.

    Parameters
    ----------
    env_file:
        Explicit ``.env`` file to read instead of ``./.env``.
    _force_reload:
        Bypass cache and reload.

    Raises
    ------
    ConfigError
        When a value fails validation.
    """
    cache_key = str(env_file or "")

    if not _force_reload and cache_key in _settings_cache:
        return _settings_cache[cache_key]

    try:
        if env_file is not None:
            settings = FmtRefSettings(_env_file=env_file)  # type: ignore[call-arg]
        else:
            settings = FmtRefSettings()
    except ValidationError as e:
        raise ConfigError(f"Invalid fmtref settings: {e}", cause=e) from e

    _settings_cache[cache_key] = settings
    return settings


def clear_settings_cache() -> None:
    """Clear the settings cache (primarily for testing)."""
    _settings_cache.clear()
