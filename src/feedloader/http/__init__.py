"""FeedLoader HTTP transport.

Example:
    >>> from feedloader.http import HttpxTransport
    >>>
    >>> async with HttpxTransport(timeout=10.0) as transport:
    ...     outcome = await transport.fetch("https://example.com/feed")
"""

from feedloader.http.client import HttpxTransport, classify_response

__all__ = [
    "HttpxTransport",
    "classify_response",
]
