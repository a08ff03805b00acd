"""Tests for feedloader.core.config - Settings."""

from __future__ import annotations

import pytest

from feedloader import __version__
from feedloader.core.config import DEFAULT_FEED_URL, Settings, get_settings
from feedloader.core.exceptions import ConfigurationError


class TestSettings:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for name in ("FEEDLOADER_FEED_URL", "FEEDLOADER_LOG_LEVEL", "FEEDLOADER_REQUEST_TIMEOUT"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings(_env_file=None)

        assert settings.feed_url == DEFAULT_FEED_URL
        assert settings.request_timeout == 30.0
        assert settings.log_level == "INFO"
        assert settings.user_agent == f"FeedLoader/{__version__}"

    def test_reads_prefixed_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FEEDLOADER_FEED_URL", "https://example.com/feed")
        monkeypatch.setenv("FEEDLOADER_REQUEST_TIMEOUT", "5")

        settings = get_settings()

        assert settings.feed_url == "https://example.com/feed"
        assert settings.request_timeout == 5.0

    def test_log_level_is_normalized(self) -> None:
        assert get_settings(log_level=" warning ").log_level == "WARNING"

    def test_unknown_log_level_is_configuration_error(self) -> None:
        with pytest.raises(ConfigurationError):
            get_settings(log_level="chatty")

    def test_timeout_lower_bound(self) -> None:
        with pytest.raises(ConfigurationError):
            get_settings(request_timeout=0.1)
