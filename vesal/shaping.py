"""Request shaping shared by both client generations.

Inputs that may be a single value or a sequence are converted to tuples
once, here, and validated against the recipient count. Nothing past this
module needs to ask whether a value was a scalar.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from .errors import InvalidArgument
from .types import OneOrMany, SendRequest, SentMessage, T


def as_tuple(value: OneOrMany[T] | None) -> tuple[T, ...]:
    """Normalize a scalar-or-sequence value; ``None`` becomes ``()``.

    Any non-string iterable (list, tuple, set, generator) is consumed into
    a tuple in iteration order.
    """
    if value is None:
        return ()
    if isinstance(value, (str, bytes, Mapping)) or not isinstance(value, Iterable):
        return (value,)  # type: ignore[return-value]
    return tuple(value)


def broadcast(values: tuple[T, ...], count: int) -> tuple[T, ...]:
    """Repeat a single value ``count`` times; full-length tuples pass through."""
    if len(values) == 1 and count != 1:
        return values * count
    return values


def _check_length(name: str, values: tuple[Any, ...], count: int) -> None:
    if len(values) not in (1, count):
        raise InvalidArgument(f"recipients and {name} should have the same length")


def build_send_request(
    recipients: OneOrMany[str],
    messages: OneOrMany[str],
    senders: OneOrMany[str] | None,
    *,
    default_sender: str,
    extras: Mapping[str, Any] | None = None,
) -> SendRequest:
    """Validate send arguments and return them as a :class:`SendRequest`.

    Raises:
        InvalidArgument: recipients or messages are empty, or a sequence
            has a length that is neither 1 nor the number of recipients.
    """
    recipient_list = as_tuple(recipients)
    message_list = as_tuple(messages)
    if not recipient_list or not message_list or not all(recipient_list) or not all(message_list):
        raise InvalidArgument("recipients and messages should not be empty")

    count = len(recipient_list)
    _check_length("messages", message_list, count)

    sender_list = as_tuple(senders) if senders is not None else (default_sender,)
    if not sender_list or not all(sender_list):
        raise InvalidArgument("senders should not be empty")
    _check_length("senders", sender_list, count)

    extra_lists: dict[str, tuple[Any, ...]] = {}
    for name, value in (extras or {}).items():
        if value is None:
            continue
        values = as_tuple(value)
        _check_length(name, values, count)
        extra_lists[name] = values

    return SendRequest(
        recipients=recipient_list,
        messages=message_list,
        senders=sender_list,
        extras=extra_lists,
    )


def expand(request: SendRequest) -> SendRequest:
    """Broadcast every field of ``request`` to one value per recipient."""
    count = len(request.recipients)
    return SendRequest(
        recipients=request.recipients,
        messages=broadcast(request.messages, count),
        senders=broadcast(request.senders, count),
        extras={name: broadcast(values, count) for name, values in request.extras.items()},
    )


def count_outcomes(messages: Iterable[SentMessage]) -> tuple[int, int]:
    """Return ``(success_count, fail_count)`` in a single pass."""
    success = fail = 0
    for message in messages:
        if message.succeeded:
            success += 1
        else:
            fail += 1
    return success, fail
