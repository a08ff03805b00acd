"""
FeedLoader - Typed loading of remote JSON feeds.

FeedLoader fetches a feed over HTTP, validates the response and decodes it
into immutable ``FeedItem`` values. Every load ends in exactly one of two
results: the full item list, or a classified error kind.

Key Features:
- Protocol-based transport (swap the network stack without code changes)
- Strict payload validation (status 200 only, all-or-nothing decoding)
- Two caller-visible error kinds: CONNECTIVITY and INVALID_DATA
- Deterministic fake transport for simulating any network condition

Quick Start:
    >>> from feedloader import HttpxTransport, LoadSuccess, RemoteFeedLoader
    >>> async with HttpxTransport() as transport:
    ...     result = await RemoteFeedLoader("https://example.com/feed", transport).load()
    ...     if isinstance(result, LoadSuccess):
    ...         print(len(result.items))

Architecture:
    Transports: HttpxTransport, FakeTransport (feedloader.testing)
    Loaders: RemoteFeedLoader
"""

from feedloader._version import __version__
from feedloader.core.config import Settings, get_settings
from feedloader.core.exceptions import (
    ConfigurationError,
    FeedLoaderError,
    InvalidDataError,
    TransportError,
    UnexpectedRepresentationError,
)
from feedloader.http.client import HttpxTransport, classify_response
from feedloader.loader.mapper import map_feed_items
from feedloader.loader.remote import RemoteFeedLoader
from feedloader.models.feed_item import FeedItem
from feedloader.models.results import (
    ErrorKind,
    LoadFailure,
    LoadResult,
    LoadSuccess,
    TransportFailure,
    TransportOutcome,
    TransportSuccess,
)
from feedloader.protocols.loader import FeedLoader
from feedloader.protocols.transport import Transport


__all__ = [
    # Models
    "FeedItem",
    "ErrorKind",
    "LoadFailure",
    "LoadResult",
    "LoadSuccess",
    "TransportFailure",
    "TransportOutcome",
    "TransportSuccess",
    # Protocols
    "FeedLoader",
    "Transport",
    # Transports
    "HttpxTransport",
    "classify_response",
    # Loading
    "RemoteFeedLoader",
    "map_feed_items",
    # Configuration
    "Settings",
    "get_settings",
    # Exceptions
    "ConfigurationError",
    "FeedLoaderError",
    "InvalidDataError",
    "TransportError",
    "UnexpectedRepresentationError",
    # Version
    "__version__",
]
