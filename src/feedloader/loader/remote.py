"""Remote feed loader.

Fetches a feed through a ``Transport`` and classifies the outcome.

Example:
    >>> from feedloader.http import HttpxTransport
    >>> from feedloader.loader.remote import RemoteFeedLoader
    >>>
    >>> async with HttpxTransport() as transport:
    ...     loader = RemoteFeedLoader("https://example.com/feed", transport)
    ...     result = await loader.load()
"""

from __future__ import annotations

import logging

from feedloader.core.exceptions import InvalidDataError
from feedloader.loader.mapper import map_feed_items
from feedloader.models.results import (
    ErrorKind,
    LoadFailure,
    LoadResult,
    LoadSuccess,
    TransportFailure,
)
from feedloader.protocols.transport import Transport

logger = logging.getLogger(__name__)


class RemoteFeedLoader:
    """Loads a feed from a fixed URL through a fixed transport.

    The (url, transport) pair is set at construction and never changes.
    Each ``load`` performs a single transport round-trip; concurrent calls
    are independent of each other.

    Example:
        >>> from feedloader.testing import FakeTransport, StubConfiguration
        >>> loader = RemoteFeedLoader("https://a.com/feed", FakeTransport(StubConfiguration()))
        >>> loader.url
        'https://a.com/feed'
    """

    __slots__ = ("_url", "_transport")

    def __init__(self, url: str, transport: Transport) -> None:
        """Initialize the loader.

        Args:
            url: Absolute feed URL.
            transport: Backend used to issue the request.
        """
        self._url = url
        self._transport = transport

    @property
    def url(self) -> str:
        """Feed URL."""
        return self._url

    @property
    def transport(self) -> Transport:
        """Transport used for requests."""
        return self._transport

    async def load(self) -> LoadResult:
        """Fetch and decode the feed once.

        Returns:
            LoadSuccess with all items in source order, or LoadFailure with
            CONNECTIVITY (no usable response) or INVALID_DATA (rejected
            status or payload).
        """
        logger.debug("Loading feed from %s", self._url)
        outcome = await self._transport.fetch(self._url)

        if isinstance(outcome, TransportFailure):
            logger.warning("Feed %s unreachable: %s", self._url, outcome.error)
            return LoadFailure(ErrorKind.CONNECTIVITY)

        try:
            items = map_feed_items(outcome.data, outcome.status_code)
        except InvalidDataError as e:
            logger.warning("Feed %s returned invalid data: %s", self._url, e)
            return LoadFailure(ErrorKind.INVALID_DATA)

        logger.debug("Loaded %d item(s) from %s", len(items), self._url)
        return LoadSuccess(items)
