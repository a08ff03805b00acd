"""Transport protocol.

Defines the contract between the feed loader and any network backend.

Example:
    >>> from feedloader.protocols.transport import Transport
    >>> hasattr(Transport, "fetch")
    True
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from feedloader.models.results import TransportOutcome


@runtime_checkable
class Transport(Protocol):
    """Network backend issuing a single GET per call.

    Implementations: ``HttpxTransport`` (real network) and
    ``FakeTransport`` (deterministic test double).

    Contract:
        - ``fetch`` is a coroutine function: calling it does no work until
          the result is awaited, so no outcome can be observed before the
          call returns.
        - The awaitable resolves exactly once, to exactly one of
          ``TransportSuccess`` or ``TransportFailure``.
        - Network problems are returned as ``TransportFailure``, never raised.
    """

    async def fetch(self, url: str) -> TransportOutcome:
        """GET ``url`` and report the outcome.

        Args:
            url: Absolute URL to request.

        Returns:
            TransportSuccess with body and status, or TransportFailure.
        """
        ...
