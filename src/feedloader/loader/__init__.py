"""Feed loading: payload mapping and the remote loader."""

from feedloader.loader.mapper import OK_STATUS_CODE, map_feed_items
from feedloader.loader.remote import RemoteFeedLoader

__all__ = [
    "OK_STATUS_CODE",
    "RemoteFeedLoader",
    "map_feed_items",
]
