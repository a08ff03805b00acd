"""Feed item model - the decoded unit of a feed.

Example:
    >>> from uuid import UUID
    >>> from feedloader.models.feed_item import FeedItem
    >>> item = FeedItem(
    ...     id=UUID("73A7F70C-75DA-4C2E-B5A3-EED40DC53AA6"),
    ...     description="Description 1",
    ...     image_url="https://url-1.com",
    ... )
    >>> item.location is None
    True
    >>> item.image_url
    'https://url-1.com'
"""

from __future__ import annotations

from typing import Annotated
from uuid import UUID

from pydantic import AfterValidator, AnyUrl, Field, TypeAdapter, ValidationError

from feedloader.models.base import FeedLoaderModel

_any_url = TypeAdapter(AnyUrl)


def _check_absolute_url(value: str) -> str:
    """Reject anything that does not parse as an absolute URL; keep the text as given."""
    try:
        _any_url.validate_python(value)
    except ValidationError as e:
        raise ValueError(f"not an absolute URL: {value!r}") from e
    return value


AbsoluteUrl = Annotated[str, AfterValidator(_check_absolute_url)]


class FeedItem(FeedLoaderModel):
    """One entry of a remote feed.

    Equality compares every field, so two items with the same id but a
    different description are different items. ``image_url`` is stored
    exactly as received, so ``https://url-1.com`` and ``https://url-1.com/``
    are different values.
    """

    id: UUID = Field(..., description="Unique identifier within the feed")
    description: str | None = Field(default=None, description="Free-text description")
    location: str | None = Field(default=None, description="Free-text location")
    image_url: AbsoluteUrl = Field(..., description="Absolute URL of the item image")
