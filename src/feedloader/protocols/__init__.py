"""Protocol definitions for FeedLoader.

Example:
    >>> from feedloader.protocols import FeedLoader, Transport
    >>> hasattr(Transport, "fetch") and hasattr(FeedLoader, "load")
    True
"""

from feedloader.protocols.loader import FeedLoader
from feedloader.protocols.transport import Transport

__all__ = [
    "FeedLoader",
    "Transport",
]
