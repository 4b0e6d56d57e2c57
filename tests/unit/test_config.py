"""Unit tests for environment-driven settings"""

import pytest
from pydantic import ValidationError

from multipart_related.config import MAX_BOUNDARY_PREFIX_LENGTH, Settings, get_settings


class TestSettings:
    """Test Settings defaults and validation"""

    def test_defaults(self):
        settings = Settings()
        assert settings.LOG_LEVEL == "INFO"
        assert settings.LOG_JSON_FORMAT is True
        assert settings.BOUNDARY_PREFIX == "----=_Part_"
        assert settings.LINE_SEPARATOR == "crlf"
        assert settings.linesep == "\r\n"

    def test_env_prefix(self, monkeypatch):
        monkeypatch.setenv("MULTIPART_RELATED_LINE_SEPARATOR", "LF")
        monkeypatch.setenv("MULTIPART_RELATED_LOG_LEVEL", "debug")

        settings = Settings()

        assert settings.LINE_SEPARATOR == "lf"
        assert settings.linesep == "\n"
        assert settings.LOG_LEVEL == "DEBUG"

    def test_unprefixed_env_ignored(self, monkeypatch):
        monkeypatch.setenv("LINE_SEPARATOR", "lf")
        assert Settings().LINE_SEPARATOR == "crlf"

    def test_invalid_line_separator(self, monkeypatch):
        monkeypatch.setenv("MULTIPART_RELATED_LINE_SEPARATOR", "cr")
        with pytest.raises(ValidationError, match="LINE_SEPARATOR"):
            Settings()

    def test_boundary_prefix_too_long(self, monkeypatch):
        monkeypatch.setenv("MULTIPART_RELATED_BOUNDARY_PREFIX", "x" * (MAX_BOUNDARY_PREFIX_LENGTH + 1))
        with pytest.raises(ValidationError, match="BOUNDARY_PREFIX"):
            Settings()

    def test_get_settings_cached(self):
        assert get_settings() is get_settings()

    def test_cache_clear_reloads(self, monkeypatch):
        assert get_settings().linesep == "\r\n"

        monkeypatch.setenv("MULTIPART_RELATED_LINE_SEPARATOR", "lf")
        get_settings.cache_clear()

        assert get_settings().linesep == "\n"
