"""
Closed error taxonomy for calls against the OpenAI API.

Every failure surfaced by ``Client.create`` is one of the four subclasses of
ResponseError below. The wrapped exception (when there is one) is kept on
``error`` and chained as ``__cause__``. Nothing is retried.
"""

from __future__ import annotations

from http import HTTPStatus


class ResponseError(Exception):
    """Base class for every error returned by the client."""


class ResponseIOError(ResponseError):
    """Local I/O failure while sending the request or reading the reply."""

    def __init__(self, error: OSError) -> None:
        super().__init__(f"IO error: {error}")
        self.error = error


class TransportError(ResponseError):
    """Network, connection or TLS failure raised by the HTTP transport."""

    def __init__(self, error: Exception) -> None:
        super().__init__(f"Transport error: {error}")
        self.error = error


class StatusCodeError(ResponseError):
    """The API answered with a non-2xx status."""

    def __init__(self, status_code: int, body: str = "") -> None:
        self.status_code = status_code
        self.reason = _reason_phrase(status_code)
        self.body = body
        super().__init__(f"Error code: {status_code} {self.reason}".rstrip())


class SerializationError(ResponseError):
    """The reply body is not valid JSON or does not match the response schema."""

    def __init__(self, error: Exception) -> None:
        super().__init__(f"Serialization error: {error}")
        self.error = error


def _reason_phrase(status_code: int) -> str:
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return ""
