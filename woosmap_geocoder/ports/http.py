"""HTTP transport port - Injectable "fetch body for URL" abstraction.

Adapters never talk to the network directly; they receive a transport
implementing this protocol, which makes them testable with an in-memory
fake.
"""

from __future__ import annotations

from typing import Protocol


class HttpTransportPort(Protocol):
    """Port for HTTP GET transports.

    Implementation: adapters/http/requests_transport.py

    Status handling is part of the contract:
    - 401 / 403 raise InvalidCredentials
    - 429 raises QuotaExceeded
    - any other non-2xx status, an empty body or a network failure
      raises InvalidServerResponse
    """

    def fetch(self, url: str) -> str:
        """Issue a GET request and return the response body.

        Args:
            url: Fully assembled request URL.

        Returns:
            The decoded response body.
        """
        ...
