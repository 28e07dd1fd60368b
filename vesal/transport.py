"""HTTP transport used by the Vesal clients."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Protocol

import httpx

from .errors import BAD_RESPONSE, CONNECTION_FAILED, TransportError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 10.0


class HttpTransport(Protocol):
    """Interface for the component that performs the network exchange."""

    def request(
        self,
        method: str,
        url: str,
        *,
        headers: Mapping[str, str],
        body: Any | None = None,
    ) -> Any:
        """Send a request and return the parsed JSON response.

        Raises TransportError if the server can't be reached or the
        response body is not JSON.
        """
        ...

    def close(self) -> None:
        ...


class HttpxTransport:
    """Sends JSON requests with a reused ``httpx.Client``."""

    def __init__(self, *, timeout: float = DEFAULT_TIMEOUT_SECONDS) -> None:
        self._client = httpx.Client(timeout=timeout)

    def close(self) -> None:
        """Close the underlying HTTP client."""
        self._client.close()

    def __enter__(self) -> HttpxTransport:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def request(
        self,
        method: str,
        url: str,
        *,
        headers: Mapping[str, str],
        body: Any | None = None,
    ) -> Any:
        try:
            response = self._client.request(method, url, headers=dict(headers), json=body)
        except httpx.HTTPError as exc:
            logger.error("Vesal request %s %s failed: %s", method, url, exc)
            raise TransportError(CONNECTION_FAILED) from exc

        try:
            return response.json()
        except ValueError as exc:
            logger.error(
                "Vesal returned a non-JSON body. Status: %s, Body: %s",
                response.status_code,
                response.text,
            )
            raise TransportError(BAD_RESPONSE) from exc
