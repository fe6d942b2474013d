"""Errors surfaced by request invocation. Every failure a caller sees is a RestyError."""
from __future__ import annotations


class RestyError(Exception):
    """Base error for request building and invocation failures."""


class TransportError(RestyError):
    """The transport failed or did not produce a usable HTTP response."""


class TransportTimeoutError(TransportError):
    """The transport gave up after the request's timeout."""


class StatusValidationError(RestyError):
    """The response status fell outside the expected range."""

    def __init__(self, status_code: int, url: str = "", body: bytes = b"") -> None:
        super().__init__(f"unexpected status {status_code} for {url}".rstrip())
        self.status_code = status_code
        self.url = url
        self.body = body


class EncodingError(RestyError):
    """A structured request body could not be encoded."""


class DecodingError(RestyError):
    """A response payload could not be decoded into the requested type."""
