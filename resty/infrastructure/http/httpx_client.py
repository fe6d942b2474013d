"""Concrete HTTP client implementation using httpx (injected where AbstractHttpClient is needed)."""
from __future__ import annotations

import httpx

from resty.domain.models import WireRequest
from resty.ports.http_client import (
    AbstractHttpClient,
    HttpClientError,
    HttpClientTimeoutError,
    HttpResponse,
)


class _HttpxResponseAdapter:
    """Adapts httpx.Response to the HttpResponse protocol."""

    def __init__(self, response: httpx.Response) -> None:
        self._response = response

    @property
    def status_code(self) -> int:
        return self._response.status_code

    @property
    def headers(self) -> dict[str, str]:
        return dict(self._response.headers)

    @property
    def content(self) -> bytes:
        return self._response.content

    @property
    def url(self) -> str:
        return str(self._response.url)


class HttpxHttpClient(AbstractHttpClient):
    """AbstractHttpClient implementation using httpx.AsyncClient."""

    def __init__(self, client: httpx.AsyncClient) -> None:
        self._client = client

    async def send(self, request: WireRequest) -> HttpResponse:
        # content is attached after headers
        httpx_request = self._client.build_request(
            request.method.value,
            request.url,
            headers=request.headers,
            timeout=httpx.Timeout(request.timeout_seconds),
            content=request.body,
        )
        try:
            response = await self._client.send(httpx_request)
            return _HttpxResponseAdapter(response)
        except httpx.TimeoutException as exc:
            raise HttpClientTimeoutError(
                f"timeout after {request.timeout_seconds}s for {request.method.value} {request.url}"
            ) from exc
        except httpx.HTTPError as exc:
            raise HttpClientError(f"{request.method.value} {request.url} failed: {exc}") from exc

    async def close(self) -> None:
        await self._client.aclose()
