"""Typed domain errors for the Woosmap geocoder.

Every failure the adapter can surface is one of these types. They are
raised at the point of detection and never swallowed inside the adapter,
so callers can tell "nothing found" (an empty collection) apart from
"request failed".

All errors inherit from GeocoderError and can optionally wrap a root
cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class GeocoderError(Exception):
    """Base error for the geocoder domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class UnsupportedOperation(GeocoderError):
    """The input class is categorically unsupported by the provider.

    Raised before any network call is made.
    """


@dataclass
class InvalidArgument(GeocoderError):
    """A query or model was given an invalid value.

    Attributes:
        argument: Name of the offending argument
    """

    argument: str = ""


@dataclass
class InvalidCredentials(GeocoderError):
    """The upstream API rejected the configured key.

    Attributes:
        url: The request URL that was rejected
    """

    url: Optional[str] = None


@dataclass
class InvalidServerResponse(GeocoderError):
    """The upstream response could not be used.

    Covers undecodable bodies, non-success HTTP statuses and request
    denials for reasons other than bad credentials.

    Attributes:
        url: The request URL
        status_code: HTTP status code when the failure came from the transport
    """

    url: Optional[str] = None
    status_code: Optional[int] = None

    @classmethod
    def create(
        cls, url: str, status_code: Optional[int] = None
    ) -> InvalidServerResponse:
        if status_code is None:
            message = f'The geocoder server returned an invalid response for query "{url}". We could not parse it.'
        else:
            message = f'The geocoder server returned an invalid response ({status_code}) for query "{url}". We could not parse it.'
        return cls(message, url=url, status_code=status_code)

    @classmethod
    def empty_response(cls, url: str) -> InvalidServerResponse:
        return cls(
            f'The geocoder server returned an empty response for query "{url}".',
            url=url,
        )


@dataclass
class QuotaExceeded(GeocoderError):
    """The upstream API signaled rate limiting (HTTP 429).

    Attributes:
        url: The request URL
    """

    url: Optional[str] = None


@dataclass
class CollectionIsEmpty(GeocoderError):
    """Tried to read the first address of an empty collection."""
