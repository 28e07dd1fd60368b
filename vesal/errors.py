"""Exceptions raised by the Vesal clients."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .catalog import StatusCatalog
    from .types import Language

CONNECTION_FAILED = "Server connection failed"
BAD_RESPONSE = "The server didn't respond correctly"
UNKNOWN_ERROR = "Unknown Vesal error"


class VesalError(RuntimeError):
    """Base class for every error raised by this library."""

    def __init__(self, message: str, *, status: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status = status


class InvalidArgument(VesalError, ValueError):
    """Raised before transmission when a request cannot be shaped."""


class TransportError(VesalError):
    """Raised when the server can't be reached or its response is malformed."""


class ApiError(VesalError):
    """Raised when the API reports a failure in a well-formed response."""


class KnownApiError(ApiError):
    """API failure whose code has a catalog entry."""


class UnknownApiError(ApiError):
    """API failure whose code has no catalog entry."""

    def __init__(self, message: str = UNKNOWN_ERROR, *, code: Any = None) -> None:
        super().__init__(message)
        self.code = code


def as_code(value: Any) -> int | None:
    """Return ``value`` as an integer code; numeric strings like ``"-104"`` count."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return None
    return None


def api_error(code: Any, catalog: StatusCatalog, language: Language) -> ApiError:
    """Build the error for a non-success envelope code.

    The message comes from ``catalog`` when it knows the code; otherwise
    an :class:`UnknownApiError` with a generic message is returned.
    """
    status = as_code(code)
    text = catalog.get(status, language) if status is not None else None
    if text is None:
        return UnknownApiError(code=code)
    return KnownApiError(text, status=status)
