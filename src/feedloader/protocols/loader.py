"""Feed loader protocol."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from feedloader.models.results import LoadResult


@runtime_checkable
class FeedLoader(Protocol):
    """Anything that can load a feed and classify the outcome."""

    async def load(self) -> LoadResult:
        """Load the feed once.

        Returns:
            LoadSuccess with the decoded items, or LoadFailure with an ErrorKind.
        """
        ...
