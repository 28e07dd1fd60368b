"""Client for the legacy Vesal REST API (vesal.armaghan.net).

The legacy API takes credentials inside every request body, wraps every
response in an ``errorModel`` envelope and uses negative error codes. It
has separate endpoints for broadcasting one message from one sender and
for sending a distinct message to each recipient; which one is used is
visible to the vendor and affects billing.
"""

from __future__ import annotations

import asyncio
import logging
from types import MappingProxyType
from typing import Any

from .catalog import LEGACY_ERRORS, get_legacy_status_text, success_text
from .errors import BAD_RESPONSE, InvalidArgument, TransportError, api_error, as_code
from .shaping import as_tuple, build_send_request, count_outcomes, expand
from .transport import HttpTransport, HttpxTransport
from .types import (
    AccountInfo,
    DeliveryReport,
    OneOrMany,
    ReceivedMessage,
    ReceivedMessages,
    SendRequest,
    SendResult,
    SentMessage,
    StatusResult,
    VesalConfig,
)

logger = logging.getLogger(__name__)

LEGACY_API_URL = "http://vesal.armaghan.net:8080/rest"
DEFAULT_RECEIVED_LIMIT = 100

ONE_TO_MANY_ENDPOINT = "SendMessage/OneToMany"
MANY_TO_MANY_ENDPOINT = "SendMessage/ManyToMany"

_SUCCESS_CODES = (0, "success")

_HEADERS = MappingProxyType({"Accept": "application/json", "Content-Type": "application/json"})


class LegacyVesalClient:
    """Sends SMS through the legacy Vesal REST API.

    Usage::

        from vesal import LegacyVesalClient, VesalConfig

        client = LegacyVesalClient(VesalConfig(
            username="user",
            password="secret",
            from_number="50001234",
        ))
        result = client.send(["09120000001", "09120000002"], "Hello!")
        assert result.endpoint == "SendMessage/OneToMany"
    """

    def __init__(self, config: VesalConfig, transport: HttpTransport | None = None) -> None:
        if not config.username:
            raise ValueError("VesalConfig.username is required")
        if not config.password:
            raise ValueError("VesalConfig.password is required")
        if not config.from_number:
            raise ValueError("VesalConfig.from_number is required")
        self._config = config
        self._base_url = (config.base_url or LEGACY_API_URL).rstrip("/")
        self._credentials = MappingProxyType({"username": config.username, "password": config.password})
        self._transport = transport if transport is not None else HttpxTransport()

    def close(self) -> None:
        """Close the underlying transport."""
        self._transport.close()

    def __enter__(self) -> LegacyVesalClient:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    async def __aenter__(self) -> LegacyVesalClient:
        return self

    async def __aexit__(self, *args: Any) -> None:
        self.close()

    # ── Public API ────────────────────────────────────────────────

    def send(
        self,
        recipients: OneOrMany[str],
        messages: OneOrMany[str],
        senders: OneOrMany[str] | None = None,
    ) -> SendResult:
        """Send messages, choosing the one-to-many or many-to-many endpoint.

        One message from one sender is sent as-is to the one-to-many
        endpoint. Anything else is expanded to one message and one sender
        per recipient and sent to the many-to-many endpoint.
        """
        request = build_send_request(
            recipients,
            messages,
            senders,
            default_sender=self._config.from_number,
        )
        endpoint, body = _send_payload(request)

        data = self._request(endpoint, body)

        references = data.get("references")
        if not isinstance(references, list) or len(references) != len(request.recipients):
            logger.error("Vesal legacy send response has no per-recipient references: %s", data)
            raise TransportError(BAD_RESPONSE)

        sent = tuple(self._parse_reference(ref, recipient) for ref, recipient in zip(references, request.recipients))
        success_count, fail_count = count_outcomes(sent)
        logger.info(
            "Vesal legacy send via %s to %d recipient(s): %d succeeded, %d failed",
            endpoint,
            len(sent),
            success_count,
            fail_count,
        )
        return SendResult(
            messages=sent,
            success_count=success_count,
            fail_count=fail_count,
            endpoint=endpoint,
            envelope={key: value for key, value in data.items() if key != "references"},
        )

    async def send_async(
        self,
        recipients: OneOrMany[str],
        messages: OneOrMany[str],
        senders: OneOrMany[str] | None = None,
    ) -> SendResult:
        """Send asynchronously (runs sync send in a thread)."""
        return await asyncio.to_thread(self.send, recipients, messages, senders)

    def get_message_status(self, ids: OneOrMany[int]) -> StatusResult:
        """Fetch delivery-state codes; resolve them with ``get_legacy_message_status_text``."""
        id_list = as_tuple(ids)
        if not id_list:
            raise InvalidArgument("ids should not be empty")

        data = self._request("MessageStatus/Status", {"referenceIds": list(id_list)})
        states = data.get("states")
        if not isinstance(states, list) or len(states) != len(id_list):
            logger.error("Vesal legacy status response does not match the requested ids: %s", data)
            raise TransportError(BAD_RESPONSE)

        return StatusResult(
            reports=tuple(DeliveryReport(id=mid, status=state) for mid, state in zip(id_list, states)),
            envelope={key: value for key, value in data.items() if key != "states"},
        )

    def get_received_messages(self, limit: int = DEFAULT_RECEIVED_LIMIT) -> ReceivedMessages:
        """Fetch every pending inbound message.

        The legacy API has no count parameter, so ``limit`` is ignored.
        """
        data = self._request("Receive/Messages")
        try:
            received = tuple(
                ReceivedMessage(
                    body=item.get("content", ""),
                    sender=item.get("originator", ""),
                    recipient=item.get("destination", ""),
                    date=item.get("receiveDate"),
                )
                for item in data.get("messageModels") or []
            )
        except (KeyError, TypeError, AttributeError, ValueError) as exc:
            logger.error("Vesal legacy inbox response is malformed: %s", data)
            raise TransportError(BAD_RESPONSE) from exc
        return ReceivedMessages(
            messages=received,
            envelope={key: value for key, value in data.items() if key != "messageModels"},
        )

    def get_received_messages_count(self) -> int:
        data = self._request("Receive/Count")
        count = data.get("count") or 0
        try:
            if isinstance(count, bool):
                raise TypeError(f"count is a boolean: {count!r}")
            return int(count)
        except (TypeError, ValueError) as exc:
            logger.error("Vesal legacy count response is malformed: %s", data)
            raise TransportError(BAD_RESPONSE) from exc

    def get_account_info(self) -> AccountInfo:
        data = self._request("Account/UserInfo")
        user = data.get("user") or {}
        try:
            return AccountInfo(
                balance=user.get("credit"),
                numbers=tuple(user.get("numbers") or ()),
                expiration_date=user.get("expirationDate"),
                active=user.get("active"),
                details=dict(user),
            )
        except (KeyError, TypeError, AttributeError, ValueError) as exc:
            logger.error("Vesal legacy account response is malformed: %s", data)
            raise TransportError(BAD_RESPONSE) from exc

    # ── Private helpers ───────────────────────────────────────────

    def _request(self, path: str, body: dict[str, Any] | None = None) -> dict[str, Any]:
        """POST with inline credentials and unwrap the ``errorModel`` envelope."""
        data = self._transport.request(
            "POST",
            f"{self._base_url}/{path}",
            headers=_HEADERS,
            body={**self._credentials, **(body or {})},
        )
        error_model = data.get("errorModel") if isinstance(data, dict) else None
        if not isinstance(error_model, dict) or "errorCode" not in error_model:
            logger.error("Vesal legacy response has no errorModel envelope: %s", data)
            raise TransportError(BAD_RESPONSE)

        code = error_model["errorCode"]
        if isinstance(code, bool) or not isinstance(code, (int, str)):
            logger.error("Vesal legacy response has a malformed errorCode: %s", data)
            raise TransportError(BAD_RESPONSE)
        if code in _SUCCESS_CODES or as_code(code) == 0:
            return data

        error = api_error(code, LEGACY_ERRORS, self._config.language)
        logger.error("Vesal legacy API error: [%s] %s", code, error.message)
        raise error

    def _parse_reference(self, reference: Any, recipient: str) -> SentMessage:
        # Positive references are message ids; negative ones are error codes.
        if isinstance(reference, bool) or not isinstance(reference, int) or reference == 0:
            logger.error("Vesal legacy send reference is malformed: %s", reference)
            raise TransportError(BAD_RESPONSE)

        language = self._config.language
        if reference > 0:
            return SentMessage(recipient=recipient, status=0, message=success_text(language), id=reference)
        return SentMessage(
            recipient=recipient,
            status=reference,
            message=get_legacy_status_text(reference, language),
        )


def _send_payload(request: SendRequest) -> tuple[str, dict[str, Any]]:
    """Pick the send endpoint and build its body (credentials excluded)."""
    if request.is_one_to_many:
        return ONE_TO_MANY_ENDPOINT, {
            "sourceAddress": request.senders[0],
            "destinationAddresses": list(request.recipients),
            "message": request.messages[0],
        }

    expanded = expand(request)
    return MANY_TO_MANY_ENDPOINT, {
        "sourceAddresses": list(expanded.senders),
        "destinationAddresses": list(expanded.recipients),
        "messages": list(expanded.messages),
    }
