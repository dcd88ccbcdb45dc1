"""Tests for Pydantic Settings configuration."""

from __future__ import annotations

import os

import pytest
from pydantic import ValidationError

from monads.config import MonadsSettings, get_settings


def _clear_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in list(os.environ.keys()):
        if key.startswith("MONADS_"):
            monkeypatch.delenv(key, raising=False)


class TestMonadsSettings:
    """Tests for MonadsSettings."""

    def test_default_values(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """MonadsSettings should have sensible defaults."""
        _clear_env(monkeypatch)

        settings = MonadsSettings(_env_file=None)

        assert settings.log_level == "WARNING"
        assert settings.json_format is False
        assert settings.path_separator == "."

    def test_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """MonadsSettings should read MONADS_ variables."""
        monkeypatch.setenv("MONADS_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("MONADS_JSON_FORMAT", "true")
        monkeypatch.setenv("MONADS_PATH_SEPARATOR", "/")

        settings = MonadsSettings(_env_file=None)

        assert settings.log_level == "DEBUG"
        assert settings.json_format is True
        assert settings.path_separator == "/"

    def test_log_level_is_case_insensitive(self) -> None:
        """log_level should accept lowercase values."""
        settings = MonadsSettings(_env_file=None, log_level="info")

        assert settings.log_level == "INFO"

    def test_invalid_log_level(self) -> None:
        """log_level should reject unknown levels."""
        with pytest.raises(ValidationError):
            MonadsSettings(_env_file=None, log_level="verbose")

    def test_empty_path_separator(self) -> None:
        """path_separator should not be empty."""
        with pytest.raises(ValidationError):
            MonadsSettings(_env_file=None, path_separator="")


class TestGetSettings:
    """Tests for get_settings function."""

    def test_returns_settings(self) -> None:
        """get_settings should return a MonadsSettings instance."""
        assert isinstance(get_settings(), MonadsSettings)

    def test_is_cached(self) -> None:
        """get_settings should return the same instance."""
        assert get_settings() is get_settings()
