"""Mock HTTP transport for testing.

Records every request and replays scripted responses. Useful for unit
testing code that depends on a Vesal client without hitting the network.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any


@dataclass
class RecordedRequest:
    """Record of a request made through the MockTransport."""

    method: str
    url: str
    headers: dict[str, str]
    body: Any | None


class MockTransport:
    """Test transport that records requests and returns queued responses.

    Usage::

        transport = MockTransport([{"status": 0, "balance": 1200}])
        client = VesalClient(config, transport=transport)
        assert client.get_account_info().balance == 1200
        assert transport.requests[0].method == "GET"

    Queue an exception to simulate a transport failure::

        transport = MockTransport([TransportError("Server connection failed")])

    When the queue is empty, ``default_response`` is returned.
    """

    def __init__(
        self,
        responses: Iterable[Any] = (),
        *,
        default_response: Any = None,
    ) -> None:
        self.responses: deque[Any] = deque(responses)
        self.default_response = default_response
        self.requests: list[RecordedRequest] = []
        self.closed = False

    def request(
        self,
        method: str,
        url: str,
        *,
        headers: Mapping[str, str],
        body: Any | None = None,
    ) -> Any:
        self.requests.append(RecordedRequest(method=method, url=url, headers=dict(headers), body=body))
        response = self.responses.popleft() if self.responses else self.default_response
        if isinstance(response, BaseException):
            raise response
        return response

    def queue(self, *responses: Any) -> None:
        """Append responses to be returned by subsequent requests."""
        self.responses.extend(responses)

    def close(self) -> None:
        self.closed = True

    def reset(self) -> None:
        """Clear recorded requests and queued responses."""
        self.requests.clear()
        self.responses.clear()
