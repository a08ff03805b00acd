"""Core configuration and exceptions."""

from feedloader.core.config import Settings, get_settings
from feedloader.core.exceptions import (
    ConfigurationError,
    FeedLoaderError,
    InvalidDataError,
    TransportError,
    UnexpectedRepresentationError,
)

__all__ = [
    # Configuration
    "Settings",
    "get_settings",
    # Exceptions
    "ConfigurationError",
    "FeedLoaderError",
    "InvalidDataError",
    "TransportError",
    "UnexpectedRepresentationError",
]
