"""Unit tests for LoggerSettings and its environment loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from tokenlog.config import DEFAULT_FORMAT, InvalidSettingError, LoggerSettings, SettingsError

_VARIABLES = ("TOKENLOG_LEVEL", "TOKENLOG_IDENTITY", "TOKENLOG_DEBUG_BUILD", "TOKENLOG_DEFAULT_FORMAT")


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    for variable in _VARIABLES:
        monkeypatch.delenv(variable, raising=False)
    return monkeypatch


# ---------------------------------------------------------------------------
# Constructor arguments
# ---------------------------------------------------------------------------


class TestLoggerSettings:
    def test_defaults(self) -> None:
        settings = LoggerSettings()
        assert settings.level == "info"
        assert settings.identity == "tokenlog"
        assert settings.debug_build is False
        assert settings.default_format == DEFAULT_FORMAT

    def test_level_is_case_insensitive(self) -> None:
        assert LoggerSettings(level="WARNING").level == "WARNING"

    def test_unknown_level_rejected(self) -> None:
        with pytest.raises(InvalidSettingError) as exc_info:
            LoggerSettings(level="loud")
        assert exc_info.value.setting == "level"
        assert exc_info.value.source == "level"
        assert str(exc_info.value).startswith("Logger setting level='loud' rejected:")

    def test_empty_identity_rejected(self) -> None:
        with pytest.raises(InvalidSettingError) as exc_info:
            LoggerSettings(identity="")
        assert exc_info.value.reason == "must not be empty"

    def test_invalid_setting_is_settings_error(self) -> None:
        with pytest.raises(SettingsError):
            LoggerSettings(level="")


# ---------------------------------------------------------------------------
# Environment
# ---------------------------------------------------------------------------


class TestFromEnv:
    def test_uses_defaults_without_env(self, clean_env: pytest.MonkeyPatch) -> None:
        assert LoggerSettings.from_env() == LoggerSettings()

    def test_reads_text_fields(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("TOKENLOG_LEVEL", "debug")
        clean_env.setenv("TOKENLOG_IDENTITY", "com.example.app")
        clean_env.setenv("TOKENLOG_DEFAULT_FORMAT", "[$L] $M")
        settings = LoggerSettings.from_env()
        assert settings.level == "debug"
        assert settings.identity == "com.example.app"
        assert settings.default_format == "[$L] $M"

    @pytest.mark.parametrize("raw", ["1", "true", "True", "yes", " on "])
    def test_debug_build_true(self, clean_env: pytest.MonkeyPatch, raw: str) -> None:
        clean_env.setenv("TOKENLOG_DEBUG_BUILD", raw)
        assert LoggerSettings.from_env().debug_build is True

    @pytest.mark.parametrize("raw", ["0", "false", "no", "OFF"])
    def test_debug_build_false(self, clean_env: pytest.MonkeyPatch, raw: str) -> None:
        clean_env.setenv("TOKENLOG_DEBUG_BUILD", raw)
        assert LoggerSettings.from_env().debug_build is False

    def test_unrecognized_flag_names_the_variable(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("TOKENLOG_DEBUG_BUILD", "sometimes")
        with pytest.raises(InvalidSettingError) as exc_info:
            LoggerSettings.from_env()
        assert exc_info.value.setting == "debug_build"
        assert exc_info.value.source == "TOKENLOG_DEBUG_BUILD"

    def test_invalid_level_names_the_variable(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("TOKENLOG_LEVEL", "verbose")
        with pytest.raises(InvalidSettingError) as exc_info:
            LoggerSettings.from_env()
        assert exc_info.value.source == "TOKENLOG_LEVEL"
        assert "TOKENLOG_LEVEL='verbose'" in str(exc_info.value)
        assert isinstance(exc_info.value.__cause__, InvalidSettingError)

    def test_reads_env_file(self, clean_env: pytest.MonkeyPatch, tmp_path: Path) -> None:
        env_file = tmp_path / ".env"
        env_file.write_text("TOKENLOG_LEVEL=error\nTOKENLOG_IDENTITY=from.dotenv\n", encoding="utf-8")
        # Registered with monkeypatch so teardown removes what load_dotenv sets.
        clean_env.setenv("TOKENLOG_LEVEL", "info")
        clean_env.setenv("TOKENLOG_IDENTITY", "placeholder")

        settings = LoggerSettings.from_env(env_file, override=True)

        assert settings.level == "error"
        assert settings.identity == "from.dotenv"

    def test_env_file_does_not_override_by_default(self, clean_env: pytest.MonkeyPatch, tmp_path: Path) -> None:
        env_file = tmp_path / ".env"
        env_file.write_text("TOKENLOG_LEVEL=error\n", encoding="utf-8")
        clean_env.setenv("TOKENLOG_LEVEL", "warning")

        assert LoggerSettings.from_env(env_file).level == "warning"
