"""Testing utilities for feed loading.

This module provides a deterministic ``Transport`` that answers from
pre-programmed stubs instead of the network. Stubs are raw
(data, response, error) triples run through the same ``classify_response``
as the real transport, so every combination the HTTP stack could produce can
be simulated.

State lives in an explicit ``StubConfiguration`` passed to the fake; create
one per test.

Example:
    >>> import asyncio
    >>> from feedloader.testing import FakeTransport, HTTPResponseStub, StubConfiguration
    >>>
    >>> config = StubConfiguration()
    >>> config.stub(data=b"{}", response=HTTPResponseStub(status_code=200))
    >>> transport = FakeTransport(config)
    >>> outcome = asyncio.run(transport.fetch("https://a.com/feed"))
    >>> outcome.status_code
    200
    >>> config.requests[0].method
    'GET'
"""

from __future__ import annotations

import asyncio
from collections import deque
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from feedloader.http.client import classify_response
from feedloader.models.results import TransportOutcome


@dataclass(frozen=True)
class RequestRecord:
    """A request observed by ``FakeTransport``."""

    url: str
    method: str = "GET"


@dataclass(frozen=True)
class HTTPResponseStub:
    """HTTP-shaped response metadata (exposes ``status_code``)."""

    status_code: int = 200
    url: str | None = None


@dataclass(frozen=True)
class NonHTTPResponseStub:
    """Response metadata without a status code."""

    url: str | None = None


@dataclass(frozen=True)
class Stub:
    """Raw values the fake transport hands to ``classify_response``.

    Any combination is allowed, including ones a real stack should never
    produce.
    """

    data: bytes | None = None
    response: Any = None
    error: BaseException | None = None


@dataclass
class StubConfiguration:
    """Per-test configuration shared with a ``FakeTransport``.

    Answers come from the queue first (one stub per request, FIFO), then
    from the default stub. With neither, the fake answers with an empty
    stub, which classifies as a transport failure.

    Not thread-safe; intended for a single event loop in a single test.

    Example:
        >>> config = StubConfiguration()
        >>> config.enqueue(error=RuntimeError("offline"))
        >>> config.next_stub().error
        RuntimeError('offline')
        >>> config.next_stub() is None
        True
    """

    default: Stub | None = None
    observer: Callable[[RequestRecord], None] | None = None
    requests: list[RequestRecord] = field(default_factory=list)
    _queue: deque[Stub] = field(default_factory=deque, repr=False)

    def stub(
        self,
        data: bytes | None = None,
        response: Any = None,
        error: BaseException | None = None,
    ) -> None:
        """Set the stub used for every request not answered by the queue."""
        self.default = Stub(data=data, response=response, error=error)

    def enqueue(
        self,
        data: bytes | None = None,
        response: Any = None,
        error: BaseException | None = None,
    ) -> None:
        """Queue a stub for exactly one upcoming request."""
        self._queue.append(Stub(data=data, response=response, error=error))

    def succeed_with(self, data: bytes, status_code: int = 200) -> None:
        """Queue an HTTP response with ``data`` and ``status_code``."""
        self.enqueue(data=data, response=HTTPResponseStub(status_code=status_code))

    def fail_with(self, error: BaseException) -> None:
        """Queue a transport error."""
        self.enqueue(error=error)

    def observe_requests(self, observer: Callable[[RequestRecord], None]) -> None:
        """Call ``observer`` with every request as it is issued."""
        self.observer = observer

    def next_stub(self) -> Stub | None:
        """Pop the next queued stub, falling back to the default."""
        if self._queue:
            return self._queue.popleft()
        return self.default

    def reset(self) -> None:
        """Forget stubs, observer and recorded requests."""
        self.default = None
        self.observer = None
        self.requests.clear()
        self._queue.clear()


class FakeTransport:
    """Deterministic ``Transport`` driven by a ``StubConfiguration``.

    The stub for a request is chosen when ``fetch`` starts, and the result
    is delivered only after yielding to the event loop, so concurrent
    requests are genuinely in flight together.

    Args:
        config: Stubs and request log for this test.
    """

    def __init__(self, config: StubConfiguration) -> None:
        self.config = config

    @property
    def requests(self) -> list[RequestRecord]:
        """Requests observed so far, in issue order."""
        return self.config.requests

    async def fetch(self, url: str) -> TransportOutcome:
        """Record the request and answer from the configured stub."""
        request = RequestRecord(url=url)
        self.config.requests.append(request)
        if self.config.observer is not None:
            self.config.observer(request)

        stub = self.config.next_stub() or Stub()
        await asyncio.sleep(0)
        return classify_response(stub.data, stub.response, stub.error, url=url)


__all__ = [
    "FakeTransport",
    "HTTPResponseStub",
    "NonHTTPResponseStub",
    "RequestRecord",
    "Stub",
    "StubConfiguration",
]
