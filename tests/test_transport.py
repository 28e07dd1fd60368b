"""Tests for the httpx transport."""

from unittest.mock import MagicMock, patch

import httpx
import pytest

from vesal import HttpxTransport, TransportError, VesalClient, VesalConfig
from vesal.transport import DEFAULT_TIMEOUT_SECONDS


def _make_transport(mock_response: MagicMock | None = None) -> tuple[HttpxTransport, MagicMock]:
    """Create a transport with a mocked httpx client."""
    transport = HttpxTransport()
    mock_client = MagicMock()
    if mock_response is not None:
        mock_client.request = MagicMock(return_value=mock_response)
    transport._client = mock_client
    return transport, mock_client


def _json_response(payload) -> MagicMock:
    resp = MagicMock(status_code=200)
    resp.json.return_value = payload
    return resp


class TestHttpxTransportRequest:
    def test_returns_parsed_json(self):
        transport, _ = _make_transport(_json_response({"status": 0, "balance": 10}))

        data = transport.request("GET", "https://example.com/balance", headers={"Accept": "application/json"})

        assert data == {"status": 0, "balance": 10}

    def test_passes_method_url_headers_and_body(self):
        transport, mock_client = _make_transport(_json_response({"status": 0}))

        transport.request(
            "POST",
            "https://example.com/send",
            headers={"Authorization": "Basic abc"},
            body={"recipients": ["1"]},
        )

        call_args = mock_client.request.call_args
        assert call_args.args == ("POST", "https://example.com/send")
        assert call_args.kwargs["headers"] == {"Authorization": "Basic abc"}
        assert call_args.kwargs["json"] == {"recipients": ["1"]}

    def test_connection_error(self):
        transport = HttpxTransport()
        mock_client = MagicMock()
        mock_client.request = MagicMock(side_effect=httpx.ConnectError("refused"))
        transport._client = mock_client

        with pytest.raises(TransportError) as exc_info:
            transport.request("GET", "https://example.com/balance", headers={})

        assert exc_info.value.message == "Server connection failed"
        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)

    def test_timeout(self):
        transport = HttpxTransport()
        mock_client = MagicMock()
        mock_client.request = MagicMock(side_effect=httpx.ReadTimeout("slow"))
        transport._client = mock_client

        with pytest.raises(TransportError, match="Server connection failed"):
            transport.request("GET", "https://example.com/balance", headers={})

    def test_non_json_body(self):
        resp = MagicMock(status_code=502, text="<html>Bad Gateway</html>")
        resp.json.side_effect = ValueError("Expecting value")
        transport, _ = _make_transport(resp)

        with pytest.raises(TransportError, match="didn't respond correctly"):
            transport.request("GET", "https://example.com/balance", headers={})


class TestHttpxTransportLifecycle:
    def test_default_timeout(self):
        with patch("vesal.transport.httpx.Client") as mock_client_cls:
            HttpxTransport()
        mock_client_cls.assert_called_once_with(timeout=DEFAULT_TIMEOUT_SECONDS)

    def test_context_manager_calls_close(self):
        transport = HttpxTransport()
        transport.close = MagicMock()
        with transport:
            pass
        transport.close.assert_called_once()

    def test_client_uses_httpx_transport_by_default(self, vesal_config: VesalConfig):
        with patch("vesal.transport.httpx.Client"):
            client = VesalClient(vesal_config)
        assert isinstance(client._transport, HttpxTransport)


class TestHttpxTransportEndToEnd:
    def test_real_httpx_client_with_mock_transport(self):
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.url.path == "/v2/balance"
            return httpx.Response(200, json={"status": 0, "balance": 77})

        transport = HttpxTransport()
        transport._client = httpx.Client(transport=httpx.MockTransport(handler))

        data = transport.request("GET", "https://sms.example.com/v2/balance", headers={})

        assert data == {"status": 0, "balance": 77}

    def test_real_httpx_client_with_html_body(self):
        transport = HttpxTransport()
        transport._client = httpx.Client(
            transport=httpx.MockTransport(lambda request: httpx.Response(500, text="oops"))
        )

        with pytest.raises(TransportError, match="didn't respond correctly"):
            transport.request("GET", "https://sms.example.com/v2/balance", headers={})
