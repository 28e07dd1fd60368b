"""Client for the current Vesal HTTP API (v2).

Authenticates with a precomputed Basic header built from
``username/domain:password`` and always sends through the single bulk
``send`` endpoint, with messages, senders and extras expanded to one value
per recipient.
"""

from __future__ import annotations

import asyncio
import base64
import logging
from types import MappingProxyType
from typing import Any

from .catalog import ERRORS, get_status_text, success_text
from .errors import BAD_RESPONSE, InvalidArgument, TransportError, api_error, as_code
from .shaping import as_tuple, build_send_request, count_outcomes, expand
from .transport import HttpTransport, HttpxTransport
from .types import (
    AccountInfo,
    DeliveryReport,
    Encoding,
    OneOrMany,
    ReceivedMessage,
    ReceivedMessages,
    SendResult,
    SentMessage,
    StatusResult,
    VesalConfig,
)

logger = logging.getLogger(__name__)

VESAL_API_URL = "https://sms.vesal.com/api/http/sms/v2"
DEFAULT_RECEIVED_LIMIT = 100
SEND_ENDPOINT = "send"


def basic_auth_header(username: str, domain: str, password: str) -> str:
    """Build the ``Authorization`` value for ``username/domain:password``."""
    credentials = f"{username}/{domain}:{password}".encode()
    return "Basic " + base64.b64encode(credentials).decode("ascii")


class VesalClient:
    """Sends SMS through the Vesal v2 API.

    Usage::

        from vesal import VesalClient, VesalConfig

        with VesalClient(VesalConfig(
            username="user",
            password="secret",
            domain="example",
            from_number="50001234",
        )) as client:
            result = client.send(["09120000001", "09120000002"], "Hello!")
            print(result.success_count, result.ids)
    """

    def __init__(self, config: VesalConfig, transport: HttpTransport | None = None) -> None:
        if not config.username:
            raise ValueError("VesalConfig.username is required")
        if not config.password:
            raise ValueError("VesalConfig.password is required")
        if not config.domain:
            raise ValueError("VesalConfig.domain is required for the v2 API")
        if not config.from_number:
            raise ValueError("VesalConfig.from_number is required")
        self._config = config
        self._base_url = (config.base_url or VESAL_API_URL).rstrip("/")
        self._headers = MappingProxyType(
            {
                "Accept": "application/json",
                "Content-Type": "application/json",
                "Authorization": basic_auth_header(config.username, config.domain, config.password),
            }
        )
        self._transport = transport if transport is not None else HttpxTransport()

    def close(self) -> None:
        """Close the underlying transport."""
        self._transport.close()

    def __enter__(self) -> VesalClient:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    async def __aenter__(self) -> VesalClient:
        return self

    async def __aexit__(self, *args: Any) -> None:
        self.close()

    # ── Public API ────────────────────────────────────────────────

    def send(
        self,
        recipients: OneOrMany[str],
        messages: OneOrMany[str],
        senders: OneOrMany[str] | None = None,
        *,
        encodings: OneOrMany[Encoding] | None = None,
        uids: OneOrMany[int] | None = None,
        udhs: OneOrMany[str] | None = None,
    ) -> SendResult:
        """Send one message per recipient.

        A single message, sender, or extra value is repeated for every
        recipient. Sequences must have exactly one item per recipient.

        Raises:
            InvalidArgument: Before any request, if the arguments can't be shaped.
            TransportError: If the server can't be reached or answers malformed.
            KnownApiError: If the API rejects the request with a catalogued code.
            UnknownApiError: If the API rejects it with an uncatalogued code.
        """
        request = expand(
            build_send_request(
                recipients,
                messages,
                senders,
                default_sender=self._config.from_number,
                extras={"encodings": encodings, "uids": uids, "udhs": udhs},
            )
        )
        body: dict[str, Any] = {
            "recipients": list(request.recipients),
            "messages": list(request.messages),
            "senders": list(request.senders),
        }
        for name, values in request.extras.items():
            body[name] = list(values)

        data = self._request("POST", SEND_ENDPOINT, body)

        items = data.get("messages")
        if not isinstance(items, list) or len(items) != len(request.recipients):
            logger.error("Vesal send response has no per-recipient results: %s", data)
            raise TransportError(BAD_RESPONSE)

        sent = tuple(self._parse_sent(item, recipient) for item, recipient in zip(items, request.recipients))
        success_count, fail_count = count_outcomes(sent)
        logger.info(
            "Vesal send to %d recipient(s): %d succeeded, %d failed",
            len(sent),
            success_count,
            fail_count,
        )
        return SendResult(
            messages=sent,
            success_count=success_count,
            fail_count=fail_count,
            endpoint=SEND_ENDPOINT,
            envelope={key: value for key, value in data.items() if key != "messages"},
        )

    async def send_async(
        self,
        recipients: OneOrMany[str],
        messages: OneOrMany[str],
        senders: OneOrMany[str] | None = None,
        *,
        encodings: OneOrMany[Encoding] | None = None,
        uids: OneOrMany[int] | None = None,
        udhs: OneOrMany[str] | None = None,
    ) -> SendResult:
        """Send asynchronously (runs sync send in a thread)."""
        return await asyncio.to_thread(
            self.send,
            recipients,
            messages,
            senders,
            encodings=encodings,
            uids=uids,
            udhs=udhs,
        )

    def get_message_status(self, ids: OneOrMany[int]) -> StatusResult:
        """Fetch delivery-state codes; resolve them with ``get_message_status_text``."""
        id_list = as_tuple(ids)
        if not id_list:
            raise InvalidArgument("ids should not be empty")

        data = self._request("GET", "statuses/" + ",".join(str(mid) for mid in id_list))
        try:
            reports = tuple(
                DeliveryReport(id=item["mid"], status=item["status"], date=item.get("date"))
                for item in data.get("dlrs") or []
            )
        except (KeyError, TypeError, AttributeError) as exc:
            logger.error("Vesal status response is malformed: %s", data)
            raise TransportError(BAD_RESPONSE) from exc
        return StatusResult(
            reports=reports,
            envelope={key: value for key, value in data.items() if key != "dlrs"},
        )

    def get_message_id_by_external_id(self, uid: int) -> int | None:
        """Look up the message id assigned to a caller-supplied ``uid``."""
        data = self._request("GET", f"mid/{uid}")
        return data.get("mid") or None

    def get_account_info(self) -> AccountInfo:
        data = self._request("GET", "balance")
        return AccountInfo(balance=data.get("balance"), details=dict(data))

    def get_received_messages(self, limit: int = DEFAULT_RECEIVED_LIMIT) -> ReceivedMessages:
        """Fetch up to ``limit`` inbound messages."""
        if isinstance(limit, bool) or not isinstance(limit, int) or limit < 1:
            raise InvalidArgument("limit should be a positive integer")

        data = self._request("GET", f"messages/{limit}")
        try:
            received = tuple(
                ReceivedMessage(
                    body=item.get("body", ""),
                    sender=item.get("senderNumber", ""),
                    recipient=item.get("recipientNumber", ""),
                    date=item.get("date"),
                )
                for item in data.get("messages") or []
            )
        except (KeyError, TypeError, AttributeError, ValueError) as exc:
            logger.error("Vesal inbox response is malformed: %s", data)
            raise TransportError(BAD_RESPONSE) from exc
        return ReceivedMessages(
            messages=received,
            envelope={key: value for key, value in data.items() if key != "messages"},
        )

    # ── Private helpers ───────────────────────────────────────────

    def _request(self, method: str, path: str, body: dict[str, Any] | None = None) -> dict[str, Any]:
        """Call the API and unwrap the ``status`` envelope."""
        data = self._transport.request(
            method,
            f"{self._base_url}/{path}",
            headers=self._headers,
            body=body,
        )
        if not isinstance(data, dict) or "status" not in data:
            logger.error("Vesal response has no status envelope: %s", data)
            raise TransportError(BAD_RESPONSE)

        status = data["status"]
        if isinstance(status, bool) or not isinstance(status, (int, str)):
            logger.error("Vesal response has a malformed status: %s", data)
            raise TransportError(BAD_RESPONSE)
        if as_code(status) == 0:
            return data

        error = api_error(status, ERRORS, self._config.language)
        logger.error("Vesal API error: [%s] %s", status, error.message)
        raise error

    def _parse_sent(self, item: Any, recipient: str) -> SentMessage:
        if not isinstance(item, dict) or not isinstance(item.get("status"), int):
            logger.error("Vesal send result is malformed: %s", item)
            raise TransportError(BAD_RESPONSE)

        status = item["status"]
        language = self._config.language
        return SentMessage(
            recipient=item.get("recipient") or recipient,
            status=status,
            message=success_text(language) if status == 0 else get_status_text(status, language),
            id=item.get("id"),
            user_id=item.get("userId"),
            parts=item.get("parts"),
            tariff=item.get("tariff"),
            alphabet=item.get("alphabet"),
        )
