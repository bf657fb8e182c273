"""Tests for fmtref.core.config settings.

Covers:
- Defaults
- Environment variable override
- .env file loading
- Validation errors surfaced as ConfigError
- Caching
"""

import os

import pytest

from fmtref.core.config import FmtRefSettings, LogFormat, clear_settings_cache, get_settings
from fmtref.core.errors import ConfigError, ErrorCategory


class TestDefaults:
    def test_line_separator_defaults_to_os_linesep(self, monkeypatch):
        monkeypatch.delenv("FMTREF_LINE_SEPARATOR")
        assert FmtRefSettings().line_separator == os.linesep

    def test_logging_defaults(self):
        s = FmtRefSettings()
        assert s.log_level == "WARNING"
        assert s.log_format is LogFormat.CONSOLE
        assert s.json_logs is False


class TestEnvOverride:
    def test_line_separator(self, monkeypatch):
        monkeypatch.setenv("FMTREF_LINE_SEPARATOR", "\r\n")
        assert get_settings().line_separator == "\r\n"

    def test_log_level_is_normalised(self, monkeypatch):
        monkeypatch.setenv("FMTREF_LOG_LEVEL", "debug")
        assert get_settings().log_level == "DEBUG"

    def test_json_log_format(self, monkeypatch):
        monkeypatch.setenv("FMTREF_LOG_FORMAT", "json")
        assert get_settings().json_logs is True

    def test_env_file(self, tmp_path, monkeypatch):
        monkeypatch.delenv("FMTREF_LINE_SEPARATOR")
        env_file = tmp_path / "custom.env"
        env_file.write_text("FMTREF_LOG_LEVEL=ERROR\n")
        assert get_settings(env_file=env_file).log_level == "ERROR"

    def test_dotenv_in_working_directory(self, tmp_path):
        (tmp_path / ".env").write_text("FMTREF_LOG_FORMAT=json\n")
        assert get_settings().log_format is LogFormat.JSON


class TestValidation:
    @pytest.mark.parametrize(
        "key,value",
        [
            ("FMTREF_LOG_LEVEL", "LOUD"),
            ("FMTREF_LOG_FORMAT", "xml"),
            ("FMTREF_LINE_SEPARATOR", ";"),
        ],
    )
    def test_invalid_value_raises_config_error(self, monkeypatch, key, value):
        monkeypatch.setenv(key, value)
        with pytest.raises(ConfigError) as exc_info:
            get_settings()
        assert exc_info.value.category == ErrorCategory.CONFIG
        assert exc_info.value.cause is not None


class TestCaching:
    def test_cached_instance(self):
        assert get_settings() is get_settings()

    def test_force_reload(self):
        first = get_settings()
        assert get_settings(_force_reload=True) is not first

    def test_clear_cache(self, monkeypatch):
        first = get_settings()
        monkeypatch.setenv("FMTREF_LOG_LEVEL", "ERROR")
        assert get_settings().log_level == first.log_level
        clear_settings_cache()
        assert get_settings().log_level == "ERROR"
