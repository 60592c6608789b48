"""Tests for Settings defaults and environment overrides."""

from __future__ import annotations

from uprotocol.config import Settings


class TestSettings:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("UPROTOCOL_LOG_LEVEL", raising=False)
        monkeypatch.delenv("UPROTOCOL_DEBUG", raising=False)
        s = Settings()
        assert s.log_level == "WARNING"
        assert s.debug is False

    def test_log_level_upper_cased(self, monkeypatch):
        monkeypatch.setenv("UPROTOCOL_LOG_LEVEL", "debug")
        assert Settings().log_level == "DEBUG"

    def test_debug_truthy_values(self, monkeypatch):
        for value in ("1", "true", "YES"):
            monkeypatch.setenv("UPROTOCOL_DEBUG", value)
            assert Settings().debug is True

    def test_debug_other_values(self, monkeypatch):
        monkeypatch.setenv("UPROTOCOL_DEBUG", "off")
        assert Settings().debug is False
