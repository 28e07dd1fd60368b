"""
vesal: Client library for the Armaghan Vesal SMS API.

Builds requests for sending messages, checking delivery status, pulling
received messages and reading account details, and normalizes the
responses of both Vesal API generations into the same result types.
Vendor status and error codes resolve to Persian or English text.

Quick start: current API::

    from vesal import VesalClient, VesalConfig

    client = VesalClient(VesalConfig(
        username="user",
        password="secret",
        domain="example",
        from_number="50001234",
    ))
    result = client.send(["09120000001", "09120000002"], "Hello!")
    print(result.success_count, result.fail_count)
    for sent in result.messages:
        print(sent.recipient, sent.id, sent.message)

Quick start: legacy REST API::

    from vesal import LegacyVesalClient, VesalConfig

    client = LegacyVesalClient(VesalConfig(
        username="user",
        password="secret",
        from_number="50001234",
    ))
    result = client.send(["09120000001", "09120000002"], ["Hi Ali", "Hi Sara"])
    print(result.endpoint)  # SendMessage/ManyToMany

Error handling::

    from vesal import KnownApiError, TransportError

    try:
        client.get_account_info()
    except KnownApiError as exc:
        print(exc.status, exc.message)
    except TransportError:
        ...

For testing::

    from vesal import MockTransport

    transport = MockTransport([{"status": 0, "balance": 1200}])
    client = VesalClient(config, transport=transport)
    assert client.get_account_info().balance == 1200

Module overview
---------------
- ``types``      Config, request and result dataclasses
- ``client``     VesalClient (v2 API, Basic auth)
- ``legacy``     LegacyVesalClient (REST API, inline credentials)
- ``base``       SMSClient protocol shared by both clients
- ``shaping``    Scalar/sequence normalization and broadcast validation
- ``catalog``    Bilingual status and error code catalogs
- ``errors``     Exception hierarchy
- ``transport``  HttpTransport protocol and the httpx implementation
- ``mock``       MockTransport for tests
"""

from .base import SMSClient
from .catalog import (
    ERRORS,
    LEGACY_ERRORS,
    LEGACY_MESSAGE_STATUSES,
    MESSAGE_STATUSES,
    StatusCatalog,
    get_legacy_message_status_text,
    get_legacy_status_text,
    get_message_status_text,
    get_status_text,
    success_text,
)
from .client import VesalClient
from .errors import ApiError, InvalidArgument, KnownApiError, TransportError, UnknownApiError, VesalError
from .legacy import LegacyVesalClient
from .mock import MockTransport
from .transport import HttpTransport, HttpxTransport
from .types import (
    AccountInfo,
    DeliveryReport,
    Encoding,
    Language,
    ReceivedMessage,
    ReceivedMessages,
    SendRequest,
    SendResult,
    SentMessage,
    StatusResult,
    VesalConfig,
)

__all__ = [
    # Clients
    "SMSClient",
    "VesalClient",
    "LegacyVesalClient",
    # Transport
    "HttpTransport",
    "HttpxTransport",
    "MockTransport",
    # Types
    "AccountInfo",
    "DeliveryReport",
    "Encoding",
    "Language",
    "ReceivedMessage",
    "ReceivedMessages",
    "SendRequest",
    "SendResult",
    "SentMessage",
    "StatusResult",
    "VesalConfig",
    # Errors
    "VesalError",
    "InvalidArgument",
    "TransportError",
    "ApiError",
    "KnownApiError",
    "UnknownApiError",
    # Catalogs
    "StatusCatalog",
    "ERRORS",
    "MESSAGE_STATUSES",
    "LEGACY_ERRORS",
    "LEGACY_MESSAGE_STATUSES",
    "get_status_text",
    "get_message_status_text",
    "get_legacy_status_text",
    "get_legacy_message_status_text",
    "success_text",
]
