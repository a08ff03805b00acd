"""Feed payload mapper.

Turns a response body and status code into ``FeedItem`` values. Decoding is
all-or-nothing: either every record is mapped or ``InvalidDataError`` is
raised.

Wire format::

    {"items": [{"id": "<uuid>", "description": "...", "location": "...", "image": "<url>"}]}

Example:
    >>> from feedloader.loader.mapper import map_feed_items
    >>> body = b'{"items": [{"id": "73A7F70C-75DA-4C2E-B5A3-EED40DC53AA6", "image": "https://url-1.com"}]}'
    >>> items = map_feed_items(body, 200)
    >>> len(items)
    1
    >>> map_feed_items(body, 201)  # doctest: +IGNORE_EXCEPTION_DETAIL
    Traceback (most recent call last):
    InvalidDataError: unexpected status code 201
"""

from __future__ import annotations

from typing import Annotated
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from feedloader.core.exceptions import InvalidDataError
from feedloader.models.feed_item import AbsoluteUrl, FeedItem

OK_STATUS_CODE = 200

# Hyphenated 8-4-4-4-12 form only; no braces, no urn prefix, no bare hex.
UUID_PATTERN = r"^[0-9A-Fa-f]{8}-[0-9A-Fa-f]{4}-[0-9A-Fa-f]{4}-[0-9A-Fa-f]{4}-[0-9A-Fa-f]{12}$"


class _RemoteItem(BaseModel):
    """One item record as it appears on the wire."""

    model_config = ConfigDict(extra="ignore")

    id: Annotated[str, Field(pattern=UUID_PATTERN)]
    description: str | None = None
    location: str | None = None
    image: AbsoluteUrl

    def to_feed_item(self) -> FeedItem:
        return FeedItem(
            id=UUID(self.id),
            description=self.description,
            location=self.location,
            image_url=self.image,
        )


class _Root(BaseModel):
    model_config = ConfigDict(extra="ignore")

    items: list[_RemoteItem]


def map_feed_items(data: bytes, status_code: int) -> tuple[FeedItem, ...]:
    """Decode a feed response.

    Only status 200 is accepted; other 2xx codes are rejected as well.

    Args:
        data: Raw response body.
        status_code: HTTP status code of the response.

    Returns:
        Items in source order, one per record. No filtering or deduplication.

    Raises:
        InvalidDataError: On a non-200 status or any decode/validation failure.
    """
    if status_code != OK_STATUS_CODE:
        raise InvalidDataError(f"unexpected status code {status_code}", status_code=status_code)

    try:
        root = _Root.model_validate_json(data)
    except ValidationError as e:
        raise InvalidDataError(
            f"invalid feed payload: {e.error_count()} error(s)",
            status_code=status_code,
            cause=e,
        ) from e

    return tuple(item.to_feed_item() for item in root.items)
