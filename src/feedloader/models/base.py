"""Base model configuration shared by FeedLoader models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class FeedLoaderModel(BaseModel):
    """Base model with standard configuration.

    Models are immutable value objects: equality is structural and
    instances are hashable.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )
