"""Tests for Settings."""

from __future__ import annotations

import pytest

from eia_feed.config import DEFAULT_BASE_URL, Settings


class TestSettings:
    def test_defaults(self, monkeypatch):
        for name in ("EIA_API_KEY", "EIA_BASE_URL", "EIA_STRICT_PARSING", "EIA_TIMEOUT"):
            monkeypatch.delenv(name, raising=False)
        settings = Settings()
        assert settings.eia_api_key == ""
        assert settings.base_url == DEFAULT_BASE_URL
        assert settings.strict_parsing is False
        assert settings.timeout == 30.0
        assert not settings.has_api_key()

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("EIA_API_KEY", "env-key")
        monkeypatch.setenv("EIA_BASE_URL", "http://localhost/series/")
        monkeypatch.setenv("EIA_STRICT_PARSING", "true")
        monkeypatch.setenv("EIA_TIMEOUT", "5")
        settings = Settings()
        assert settings.eia_api_key == "env-key"
        assert settings.base_url == "http://localhost/series/"
        assert settings.strict_parsing is True
        assert settings.timeout == 5.0

    @pytest.mark.parametrize("value", ["", "0", "no", "off"])
    def test_strict_flag_falsy(self, monkeypatch, value):
        monkeypatch.setenv("EIA_STRICT_PARSING", value)
        assert Settings().strict_parsing is False


class TestSetApiKey:
    def test_sets_key(self):
        settings = Settings(eia_api_key="")
        settings.set_api_key("abc")
        assert settings.eia_api_key == "abc"
        assert settings.has_api_key()

    def test_replaces_key(self):
        settings = Settings(eia_api_key="old")
        settings.set_api_key("new")
        assert settings.eia_api_key == "new"

    @pytest.mark.parametrize("value", ["", "   ", "\t\n", None])
    def test_blank_is_noop(self, value):
        settings = Settings(eia_api_key="kept")
        settings.set_api_key(value)
        assert settings.eia_api_key == "kept"


class TestValidate:
    def test_valid(self):
        Settings(base_url="http://x/", timeout=1.0).validate()

    def test_empty_base_url(self):
        with pytest.raises(ValueError, match="EIA_BASE_URL"):
            Settings(base_url="").validate()

    def test_non_positive_timeout(self):
        with pytest.raises(ValueError, match="EIA_TIMEOUT"):
            Settings(timeout=-1).validate()
