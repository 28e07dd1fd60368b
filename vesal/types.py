"""Core types for the Vesal SMS client library."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Any, TypeVar, Union

T = TypeVar("T")

# A bare value or an ordered sequence of values. Normalized to a tuple on entry.
OneOrMany = Union[T, Sequence[T]]


class Language(str, Enum):
    """Language used for catalog-resolved status text."""

    FA = "fa"
    EN = "en"


class Encoding(IntEnum):
    """Message encodings accepted by the ``send`` endpoint."""

    AUTO = 0  # detected from the message text
    PERSIAN = 2
    EIGHT_BIT = 5
    BINARY = 6


# ── Configuration ─────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class VesalConfig:
    """Credentials and defaults for a Vesal client."""

    username: str
    password: str
    from_number: str  # default sender for every message
    domain: str | None = None  # required by the current API generation only
    language: Language = Language.FA
    base_url: str | None = None


# ── Requests ──────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class SendRequest:
    """A validated outbound request.

    Every sequence has either one element or exactly one element per
    recipient. Single-element sequences are broadcast to all recipients.
    """

    recipients: tuple[str, ...]
    messages: tuple[str, ...]
    senders: tuple[str, ...]
    extras: Mapping[str, tuple[Any, ...]] = field(default_factory=dict)

    @property
    def is_one_to_many(self) -> bool:
        """True when one message from one sender goes to every recipient."""
        return len(self.messages) == 1 and len(self.senders) == 1


# ── Results ───────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class SentMessage:
    """Outcome of a send for a single recipient."""

    recipient: str
    status: int
    message: str
    id: int | None = None
    user_id: int | None = None
    parts: int | None = None
    tariff: float | None = None
    alphabet: str | None = None  # "DEFAULT" for ASCII, "UCS2" for Persian

    @property
    def succeeded(self) -> bool:
        return self.status == 0


@dataclass(frozen=True, slots=True)
class SendResult:
    """Normalized result of a send call."""

    messages: tuple[SentMessage, ...]
    success_count: int
    fail_count: int
    endpoint: str
    envelope: dict[str, Any] = field(default_factory=dict)

    @property
    def succeeded(self) -> bool:
        return self.fail_count == 0

    @property
    def ids(self) -> list[int]:
        """Message ids of the recipients that were accepted."""
        return [m.id for m in self.messages if m.succeeded and m.id is not None]


@dataclass(frozen=True, slots=True)
class DeliveryReport:
    """Delivery state of a previously sent message."""

    id: int
    status: int
    date: str | None = None  # yyyy-mm-dd hh:mm:ss


@dataclass(frozen=True, slots=True)
class StatusResult:
    reports: tuple[DeliveryReport, ...]
    envelope: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class ReceivedMessage:
    """An inbound message."""

    body: str
    sender: str
    recipient: str
    date: str | None = None


@dataclass(frozen=True, slots=True)
class ReceivedMessages:
    messages: tuple[ReceivedMessage, ...]
    envelope: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class AccountInfo:
    """Account balance and, where the API reports them, account details."""

    balance: float | None
    numbers: tuple[str, ...] = ()
    expiration_date: str | None = None
    active: bool | None = None
    details: dict[str, Any] = field(default_factory=dict)
