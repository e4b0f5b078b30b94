"""
Tests for stable_match.utils.config - settings defaults and environment overrides.
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from stable_match.utils.config import (
    AppSettings,
    LoggingSettings,
    MatchingSettings,
    get_settings,
    reload_settings,
)


class TestMatchingSettings:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("MATCH_LOG_ROUNDS", raising=False)
        settings = MatchingSettings()
        assert settings.iteration_cap == 0
        assert settings.log_rounds is False

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("MATCH_ITERATION_CAP", "25")
        monkeypatch.setenv("MATCH_LOG_ROUNDS", "1")
        settings = MatchingSettings()
        assert settings.iteration_cap == 25
        assert settings.log_rounds is True

    def test_negative_cap_rejected(self, monkeypatch):
        monkeypatch.setenv("MATCH_ITERATION_CAP", "-3")
        with pytest.raises(ValidationError):
            MatchingSettings()


class TestLoggingSettings:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("LOG_FILE_PATH", raising=False)
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        settings = LoggingSettings()
        assert settings.level == "INFO"
        assert settings.file_path is None
        assert settings.console_output is True

    def test_lowercase_level_accepted(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "debug")
        assert LoggingSettings().level == "DEBUG"

    def test_unknown_level_rejected(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "verbose")
        with pytest.raises(ValidationError):
            LoggingSettings()

    def test_file_path_from_env(self, monkeypatch, tmp_path):
        monkeypatch.setenv("LOG_FILE_PATH", str(tmp_path / "match.log"))
        assert LoggingSettings().file_path == Path(tmp_path / "match.log")


class TestAppSettings:
    def test_testing_environment(self):
        assert AppSettings().environment == "testing"

    def test_nested_sections(self):
        settings = AppSettings()
        assert isinstance(settings.matching, MatchingSettings)
        assert isinstance(settings.logging, LoggingSettings)


class TestSettingsSingleton:
    def test_get_settings_cached(self):
        assert get_settings() is get_settings()

    def test_reload_replaces_instance(self, monkeypatch):
        before = get_settings()
        monkeypatch.setenv("MATCH_ITERATION_CAP", "7")
        after = reload_settings()
        assert after is not before
        assert get_settings() is after
        assert after.matching.iteration_cap == 7
