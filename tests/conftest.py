"""Shared fixtures for FeedLoader tests."""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any
from uuid import UUID, uuid4

import pytest

from feedloader.models.feed_item import FeedItem
from feedloader.testing import FakeTransport, StubConfiguration

FeedFactory = Callable[..., tuple[FeedItem, dict[str, Any]]]


@pytest.fixture
def feed_url() -> str:
    """A feed URL that is never contacted."""
    return "https://a-given-url.com/feed"


@pytest.fixture
def stub_config() -> StubConfiguration:
    """Fresh stub configuration per test."""
    return StubConfiguration()


@pytest.fixture
def fake_transport(stub_config: StubConfiguration) -> FakeTransport:
    """Fake transport bound to this test's configuration."""
    return FakeTransport(stub_config)


@pytest.fixture
def make_item() -> FeedFactory:
    """Build a FeedItem together with its wire representation.

    Optional fields left as None are omitted from the JSON.
    """

    def _make(
        id: UUID | None = None,
        description: str | None = None,
        location: str | None = None,
        image_url: str = "https://a-url.com",
    ) -> tuple[FeedItem, dict[str, Any]]:
        item = FeedItem(
            id=id or uuid4(),
            description=description,
            location=location,
            image_url=image_url,
        )
        wire: dict[str, Any] = {"id": str(item.id), "image": image_url}
        if description is not None:
            wire["description"] = description
        if location is not None:
            wire["location"] = location
        return item, wire

    return _make


@pytest.fixture
def make_items_json() -> Callable[[list[dict[str, Any]]], bytes]:
    """Serialize wire records into a feed body."""

    def _make(records: list[dict[str, Any]]) -> bytes:
        return json.dumps({"items": records}).encode("utf-8")

    return _make
