"""httpx-backed transport.

Adapts ``httpx.AsyncClient`` to the ``Transport`` protocol. The HTTP stack's
outcome is reduced to three independently optional values (body, response,
error) and classified by ``classify_response`` into exactly one
``TransportOutcome``.

Example:
    >>> from feedloader.http import HttpxTransport
    >>>
    >>> async with HttpxTransport(timeout=10.0) as transport:
    ...     outcome = await transport.fetch("https://example.com/feed")
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from feedloader._version import __version__
from feedloader.core.exceptions import UnexpectedRepresentationError
from feedloader.models.results import TransportFailure, TransportOutcome, TransportSuccess

logger = logging.getLogger(__name__)


def _status_code_of(response: Any) -> int | None:
    """Return the integer status code of an HTTP-shaped response, else None."""
    status_code = getattr(response, "status_code", None)
    if isinstance(status_code, int) and not isinstance(status_code, bool):
        return status_code
    return None


def classify_response(
    data: bytes | None,
    response: Any,
    error: BaseException | None,
    *,
    url: str,
) -> TransportOutcome:
    """Classify a (data, response, error) triple into a transport outcome.

    Priority:
        1. An error always wins, even when data or a response is present.
        2. Data with an HTTP-shaped response is a success.
        3. An HTTP-shaped response without data is a success with an empty body.
        4. Anything else is an ``UnexpectedRepresentationError`` failure.

    A response is HTTP-shaped when it exposes an integer ``status_code``.

    Args:
        data: Response body, if any.
        response: Response metadata object, if any.
        error: Transport error, if any.
        url: Requested URL, used when the response carries no URL.

    Returns:
        TransportSuccess or TransportFailure.

    Example:
        >>> from types import SimpleNamespace
        >>> from feedloader.http.client import classify_response
        >>> ok = SimpleNamespace(status_code=200, url="https://a.com")
        >>> classify_response(None, ok, None, url="https://a.com").data
        b''
        >>> type(classify_response(None, None, None, url="https://a.com")).__name__
        'TransportFailure'
    """
    if error is not None:
        return TransportFailure(error)

    status_code = _status_code_of(response)
    if status_code is not None:
        response_url = getattr(response, "url", None)
        return TransportSuccess(
            data=bytes(data) if data is not None else b"",
            status_code=status_code,
            url=str(response_url) if response_url is not None else url,
        )

    return TransportFailure(
        UnexpectedRepresentationError(
            has_data=data is not None,
            response_type=type(response).__name__ if response is not None else None,
        )
    )


class HttpxTransport:
    """Transport backed by ``httpx.AsyncClient``.

    Each ``fetch`` issues exactly one GET. There is no retry, caching or
    authentication. Request errors raised by httpx are returned as
    ``TransportFailure``; anything else propagates.

    Example:
        >>> async with HttpxTransport(user_agent="Reader/2.0") as transport:
        ...     outcome = await transport.fetch("https://example.com/feed")

    Attributes:
        user_agent: User-Agent header value
        timeout: Request timeout in seconds
    """

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        *,
        timeout: float = 30.0,
        user_agent: str = f"FeedLoader/{__version__}",
        headers: dict[str, str] | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the transport.

        Args:
            client: Pre-configured client. The transport never closes it.
            timeout: Request timeout for an owned client.
            user_agent: User-Agent header for an owned client.
            headers: Additional default headers for an owned client.
            transport: Low-level httpx transport for an owned client
                (e.g. ``httpx.MockTransport`` in tests).
        """
        self._client = client
        self._owns_client = client is None
        self._timeout = timeout
        self._user_agent = user_agent
        self._extra_headers = headers or {}
        self._transport = transport

    @classmethod
    def from_settings(cls, settings: Any, **kwargs: Any) -> HttpxTransport:
        """Build a transport from ``Settings``."""
        return cls(
            timeout=settings.request_timeout,
            user_agent=settings.user_agent,
            **kwargs,
        )

    @property
    def user_agent(self) -> str:
        """User-Agent header value."""
        return self._user_agent

    @property
    def timeout(self) -> float:
        """Request timeout in seconds."""
        return self._timeout

    @property
    def headers(self) -> dict[str, str]:
        """Default headers for requests."""
        return {
            "User-Agent": self._user_agent,
            "Accept": "application/json",
            **self._extra_headers,
        }

    def _ensure_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None or (self._owns_client and self._client.is_closed):
            self._client = httpx.AsyncClient(
                headers=self.headers,
                timeout=httpx.Timeout(self._timeout),
                follow_redirects=True,
                transport=self._transport,
            )
            self._owns_client = True
        return self._client

    async def close(self) -> None:
        """Close the owned HTTP client. Injected clients are left open."""
        if self._owns_client and self._client is not None and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> HttpxTransport:
        """Async context manager entry."""
        self._ensure_client()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit."""
        await self.close()

    async def fetch(self, url: str) -> TransportOutcome:
        """GET ``url`` once and classify the result.

        Args:
            url: Absolute URL to request.

        Returns:
            TransportSuccess or TransportFailure.
        """
        client = self._ensure_client()

        data: bytes | None = None
        response: httpx.Response | None = None
        error: BaseException | None = None

        try:
            response = await client.get(url)
            data = response.content
        except httpx.HTTPError as e:
            logger.debug("GET %s failed: %s", url, e)
            error = e

        return classify_response(data, response, error, url=url)


__all__ = [
    "HttpxTransport",
    "classify_response",
]
