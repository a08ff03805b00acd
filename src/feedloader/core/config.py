"""FeedLoader configuration.

Application settings loaded from environment variables with FEEDLOADER_ prefix.

Example:
    >>> from feedloader.core.config import get_settings
    >>> settings = get_settings(log_level="debug")
    >>> settings.log_level
    'DEBUG'
    >>> settings.request_timeout
    30.0
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from feedloader._version import __version__
from feedloader.core.exceptions import ConfigurationError

DEFAULT_USER_AGENT = f"FeedLoader/{__version__}"
DEFAULT_FEED_URL = "https://essentialdeveloper.com/feed-case-study/test-api/feed"


class Settings(BaseSettings):
    """Application settings.

    Loads from environment variables with FEEDLOADER_ prefix.

    Example:
        >>> from feedloader.core.config import Settings
        >>> s = Settings(feed_url="https://example.com/feed")
        >>> s.feed_url
        'https://example.com/feed'
        >>> s.user_agent.startswith("FeedLoader/")
        True
    """

    model_config = SettingsConfigDict(
        env_prefix="FEEDLOADER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Feed
    feed_url: str = Field(default=DEFAULT_FEED_URL, min_length=1, description="Feed endpoint URL")

    # HTTP
    request_timeout: float = Field(default=30.0, ge=1.0, description="Request timeout in seconds")
    user_agent: str = Field(default=DEFAULT_USER_AGENT, description="User-Agent header value")

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"unknown log level: {value!r}")
        return level


def get_settings(**overrides: Any) -> Settings:
    """Get settings with optional overrides.

    Raises:
        ConfigurationError: If the environment or overrides are invalid.

    Example:
        >>> from feedloader.core.config import get_settings
        >>> s = get_settings(request_timeout=5.0)
        >>> s.request_timeout
        5.0
    """
    try:
        return Settings(**overrides)
    except ValidationError as e:
        raise ConfigurationError(str(e)) from e
