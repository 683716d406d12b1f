"""Error types raised by the tagfleet client."""

from __future__ import annotations

from typing import Optional

NETWORK_ERROR_MESSAGE = "Network error. Please try again."


class TagFleetError(Exception):
    """Base class for tagfleet request failures."""


class TransportError(TagFleetError):
    """The request never produced a usable HTTP response."""


class ServerError(TagFleetError):
    """The API answered with an error status.

    ``message`` holds the server-provided text when the response body had one.
    """

    def __init__(self, description: str, *, message: Optional[str] = None, status_code: Optional[int] = None) -> None:
        super().__init__(description)
        self.message = message
        self.status_code = status_code


def user_message(exc: BaseException, fallback: str) -> str:
    """Return the inline text shown to the user for a failed operation.

    Parameters
    ----------
    exc
        The failure raised by the client or a response normalizer.
    fallback
        Generic text for the operation (e.g. ``"Failed to update tag"``).

    Returns
    -------
    str
        The server message verbatim when present, a network hint for
        transport failures, otherwise ``fallback``.
    """
    if isinstance(exc, ServerError) and exc.message:
        return exc.message
    if isinstance(exc, TransportError):
        return NETWORK_ERROR_MESSAGE
    return fallback


__all__ = [
    "NETWORK_ERROR_MESSAGE",
    "ServerError",
    "TagFleetError",
    "TransportError",
    "user_message",
]
