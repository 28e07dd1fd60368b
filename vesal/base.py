"""Base protocol for Vesal SMS clients."""

from __future__ import annotations

from typing import Protocol

from .types import AccountInfo, OneOrMany, ReceivedMessages, SendResult, StatusResult


class SMSClient(Protocol):
    """Interface implemented by both Vesal API generations."""

    def send(
        self,
        recipients: OneOrMany[str],
        messages: OneOrMany[str],
        senders: OneOrMany[str] | None = None,
    ) -> SendResult:
        """Send messages and return the per-recipient outcomes."""
        ...

    def get_message_status(self, ids: OneOrMany[int]) -> StatusResult:
        """Fetch delivery-state codes for previously sent messages."""
        ...

    def get_received_messages(self, limit: int = ...) -> ReceivedMessages:
        """Fetch inbound messages.

        ``limit`` is honoured only where the API accepts a count.
        """
        ...

    def get_account_info(self) -> AccountInfo:
        ...

    def close(self) -> None:
        ...
