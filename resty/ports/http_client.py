"""HTTP client port: contract for submitting a fully built request.

Request descriptors depend on this port; infrastructure (e.g. httpx)
implements it. Keeps the builder free of transport imports.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Mapping, Protocol, runtime_checkable

if TYPE_CHECKING:
    from resty.domain.models import WireRequest


class HttpClientError(Exception):
    """Base for transport failures (network, protocol, etc.)."""


class HttpClientTimeoutError(HttpClientError):
    """Raised when the request times out."""


@runtime_checkable
class HttpResponse(Protocol):
    """Minimal read-only view of an HTTP response."""

    @property
    def status_code(self) -> int: ...

    @property
    def headers(self) -> Mapping[str, str]: ...

    @property
    def content(self) -> bytes: ...

    @property
    def url(self) -> str: ...


@runtime_checkable
class AbstractHttpClient(Protocol):
    """Port: send one request, get one response. Implementations live in infrastructure."""

    async def send(self, request: WireRequest) -> HttpResponse:
        """Send the request once; raise HttpClientTimeoutError or HttpClientError on failure."""
        ...

    async def close(self) -> None:
        """Release resources (e.g. connection pool). No-op allowed if nothing to close."""
        ...
