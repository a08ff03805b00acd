"""FeedLoader data models."""

from feedloader.models.base import FeedLoaderModel
from feedloader.models.feed_item import AbsoluteUrl, FeedItem
from feedloader.models.results import (
    ErrorKind,
    LoadFailure,
    LoadResult,
    LoadSuccess,
    TransportFailure,
    TransportOutcome,
    TransportSuccess,
)

__all__ = [
    "FeedLoaderModel",
    "AbsoluteUrl",
    "FeedItem",
    # Outcomes
    "ErrorKind",
    "LoadFailure",
    "LoadResult",
    "LoadSuccess",
    "TransportFailure",
    "TransportOutcome",
    "TransportSuccess",
]
