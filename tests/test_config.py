"""Tests for the env-based configuration module."""

import pytest
from pydantic import ValidationError

from colornope.core.config import ColornopeSettings


class TestDefaults:
    """ColornopeSettings loads defaults when no COLORNOPE_* vars are set."""

    def test_defaults(self):
        settings = ColornopeSettings()
        assert settings.disable_flag == "--no-color"
        assert settings.log_level == "warning"

    def test_term_and_no_color_are_not_settings(self, monkeypatch):
        """TERM / NO_COLOR are read by the decision, never by settings."""
        monkeypatch.setenv("TERM", "xterm")
        monkeypatch.setenv("NO_COLOR", "1")
        settings = ColornopeSettings()
        assert not hasattr(settings, "term")
        assert not hasattr(settings, "no_color")


class TestEnvOverrides:
    """COLORNOPE_-prefixed env vars override defaults."""

    def test_disable_flag(self, monkeypatch):
        monkeypatch.setenv("COLORNOPE_DISABLE_FLAG", "--plain")
        assert ColornopeSettings().disable_flag == "--plain"

    def test_disable_flag_stripped(self, monkeypatch):
        monkeypatch.setenv("COLORNOPE_DISABLE_FLAG", "  --plain ")
        assert ColornopeSettings().disable_flag == "--plain"

    def test_lowercase_env_name_accepted(self, monkeypatch):
        monkeypatch.setenv("colornope_log_level", "debug")
        assert ColornopeSettings().log_level == "debug"

    @pytest.mark.parametrize("raw", ["DEBUG", "Debug", " debug "])
    def test_log_level_case_insensitive(self, monkeypatch, raw):
        monkeypatch.setenv("COLORNOPE_LOG_LEVEL", raw)
        assert ColornopeSettings().log_level == "debug"

    def test_init_kwargs_win(self, monkeypatch):
        monkeypatch.setenv("COLORNOPE_DISABLE_FLAG", "--plain")
        assert ColornopeSettings(disable_flag="--mono").disable_flag == "--mono"


class TestValidation:
    """Invalid values fail at construction."""

    @pytest.mark.parametrize("raw", ["", "   "])
    def test_empty_disable_flag_rejected(self, monkeypatch, raw):
        monkeypatch.setenv("COLORNOPE_DISABLE_FLAG", raw)
        with pytest.raises(ValidationError, match="disable_flag must not be empty"):
            ColornopeSettings()

    def test_unknown_log_level_rejected(self, monkeypatch):
        monkeypatch.setenv("COLORNOPE_LOG_LEVEL", "verbose")
        with pytest.raises(ValidationError):
            ColornopeSettings()
