"""Outcome types for transports and loaders.

Both outcomes are closed two-variant unions. Use ``isinstance`` to branch:

Example:
    >>> from feedloader.models.results import (
    ...     ErrorKind, LoadFailure, LoadSuccess, TransportSuccess,
    ... )
    >>> outcome = TransportSuccess(data=b"{}", status_code=200, url="https://a.com")
    >>> outcome.status_code
    200
    >>> result = LoadFailure(ErrorKind.CONNECTIVITY)
    >>> isinstance(result, LoadSuccess)
    False
    >>> result.error.value
    'connectivity'
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TypeAlias

from feedloader.models.feed_item import FeedItem


class ErrorKind(str, Enum):
    """Error kinds surfaced to loader callers.

    CONNECTIVITY: no usable response reached the client.
    INVALID_DATA: a response arrived but failed status or payload validation.
    """

    CONNECTIVITY = "connectivity"
    INVALID_DATA = "invalid_data"


@dataclass(frozen=True, slots=True)
class TransportSuccess:
    """Raw response body plus status metadata."""

    data: bytes
    status_code: int
    url: str


@dataclass(frozen=True, slots=True)
class TransportFailure:
    """Transport error; no usable response."""

    error: BaseException


TransportOutcome: TypeAlias = TransportSuccess | TransportFailure


@dataclass(frozen=True, slots=True)
class LoadSuccess:
    """Fully decoded feed, in source order. May be empty."""

    items: tuple[FeedItem, ...] = ()


@dataclass(frozen=True, slots=True)
class LoadFailure:
    """Classified load failure."""

    error: ErrorKind


LoadResult: TypeAlias = LoadSuccess | LoadFailure
