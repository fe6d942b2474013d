"""HTTP client factory: builds AbstractHttpClient from settings (no provider logic in the façade)."""
from __future__ import annotations

import httpx

from resty.config.settings import RestySettings
from resty.infrastructure.http.httpx_client import HttpxHttpClient
from resty.infrastructure.http.inmemory.in_memory_client import InMemoryHttpClient
from resty.ports.http_client import AbstractHttpClient


def create_http_client(settings: RestySettings) -> AbstractHttpClient:
    """Build an HTTP client from settings. Timeouts are applied per-request by the adapter."""
    backend = settings.http_backend.strip().lower()

    if backend == "httpx":
        headers = {"User-Agent": settings.user_agent} if settings.user_agent else None
        async_client = httpx.AsyncClient(
            follow_redirects=settings.follow_redirects,
            verify=settings.verify_ssl,
            headers=headers,
        )
        return HttpxHttpClient(async_client)

    if backend == "inmemory":
        return InMemoryHttpClient()

    raise ValueError(f"Unsupported http backend: {backend}")
