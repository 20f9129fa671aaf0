"""requests-based HTTP transport.

Implements HttpTransportPort on top of a ``requests.Session`` and maps
HTTP failures onto the domain error taxonomy.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

import requests

from ...config import HttpConfig, get_config
from ...domain.errors import InvalidCredentials, InvalidServerResponse, QuotaExceeded
from ...logging_config import mask_credentials


@dataclass
class RequestsHttpTransport:
    """Blocking HTTP transport with timeout and User-Agent from config.

    Attributes:
        config: HTTP configuration
        session: Session to reuse across requests (created if omitted)
    """

    config: HttpConfig = field(default_factory=lambda: get_config().http)
    session: Optional[requests.Session] = field(default=None, repr=False)

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)
        if self.session is None:
            self.session = requests.Session()
        self.session.headers.setdefault("User-Agent", self.config.user_agent)

    def fetch(self, url: str) -> str:
        """GET ``url`` and return its body.

        Raises:
            InvalidCredentials: On HTTP 401 or 403.
            QuotaExceeded: On HTTP 429.
            InvalidServerResponse: On any other non-2xx status, an empty
                body or a network failure.
        """
        assert self.session is not None
        safe_url = mask_credentials(url)

        try:
            response = self.session.get(url, timeout=self.config.timeout_seconds)
        except requests.RequestException as e:
            self._logger.warning(
                "HTTP request failed",
                extra={"url": safe_url, "error": str(e)},
            )
            raise InvalidServerResponse(
                f'Could not reach the geocoder server for query "{url}"',
                cause=e,
                url=url,
            ) from e

        status = response.status_code
        self._logger.debug(
            "HTTP response received",
            extra={"url": safe_url, "status_code": status},
        )

        if status in (401, 403):
            raise InvalidCredentials(
                f"Invalid credentials for query {url}", url=url
            )
        if status == 429:
            raise QuotaExceeded(f"Valid request but quota exceeded. {url}", url=url)
        if status >= 300:
            raise InvalidServerResponse.create(url, status)

        body = response.text
        if not body:
            raise InvalidServerResponse.empty_response(url)

        return body
