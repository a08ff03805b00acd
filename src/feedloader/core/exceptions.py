"""Custom exceptions.

FeedLoader uses a small exception hierarchy for internal signalling. Callers
of ``RemoteFeedLoader.load`` never see these directly: they are collapsed
into an ``ErrorKind`` at the loader boundary.

Example:
    >>> from feedloader.core.exceptions import FeedLoaderError, InvalidDataError
    >>> isinstance(InvalidDataError("bad payload"), FeedLoaderError)
    True
    >>> try:
    ...     raise InvalidDataError("unexpected status", status_code=404)
    ... except FeedLoaderError as e:
    ...     print(f"Caught: {type(e).__name__}")
    Caught: InvalidDataError
"""

from __future__ import annotations


class FeedLoaderError(Exception):
    """Base exception for FeedLoader.

    Example:
        >>> from feedloader.core.exceptions import FeedLoaderError
        >>> e = FeedLoaderError("something went wrong")
        >>> str(e)
        'something went wrong'
    """


class TransportError(FeedLoaderError):
    """Transport-level failure: no usable response reached the client."""


class UnexpectedRepresentationError(TransportError):
    """The HTTP stack reported a combination of values it should never produce.

    Raised (as a value inside ``TransportFailure``) when there is no error
    but also no HTTP response, e.g. all three values are missing or the
    response does not expose a status code.

    Example:
        >>> from feedloader.core.exceptions import UnexpectedRepresentationError
        >>> err = UnexpectedRepresentationError(has_data=True, response_type="object")
        >>> err.has_data
        True
    """

    def __init__(self, *, has_data: bool = False, response_type: str | None = None) -> None:
        self.has_data = has_data
        self.response_type = response_type
        super().__init__(
            f"Unexpected values representation "
            f"(data={'present' if has_data else 'absent'}, response={response_type})"
        )


class InvalidDataError(FeedLoaderError):
    """A response was received but its status or payload failed validation.

    Example:
        >>> from feedloader.core.exceptions import InvalidDataError
        >>> err = InvalidDataError("unexpected status", status_code=201)
        >>> err.status_code
        201
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.cause = cause


class ConfigurationError(FeedLoaderError):
    """Configuration is invalid.

    Example:
        >>> from feedloader.core.exceptions import ConfigurationError
        >>> raise ConfigurationError("unknown log level")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ConfigurationError: unknown log level
    """
