from __future__ import annotations

import asyncio
from typing import Any

import pytest

from resty import API, ContentType, JsonCodec, RestySettings
from resty.domain.models import WireRequest
from resty.infrastructure.http.inmemory.in_memory_client import InMemoryHttpClient


class ExampleAPI(API):
    base_address = "https://api.example.com"


class AuthorizedAPI(API):
    base_address = "https://api.example.com/v1/"
    authorization_header = {"Authorization": "Bearer token-123"}


class BlockingHttpClient:
    """Implements AbstractHttpClient; send() never resolves until cancelled."""

    def __init__(self) -> None:
        self.started = asyncio.Event()
        self.cancelled = False
        self.requests: list[WireRequest] = []

    async def send(self, request: WireRequest) -> Any:
        self.requests.append(request)
        self.started.set()
        try:
            await asyncio.Event().wait()
        except asyncio.CancelledError:
            self.cancelled = True
            raise

    async def close(self) -> None:
        return


class SpyCodec(JsonCodec):
    """JsonCodec that counts decode calls."""

    def __init__(self) -> None:
        self.decode_calls = 0

    def decode(self, data: bytes, type_: Any) -> Any:
        self.decode_calls += 1
        return super().decode(data, type_)


@pytest.fixture()
def settings() -> RestySettings:
    return RestySettings(http_backend="inmemory")


@pytest.fixture()
def http_client() -> InMemoryHttpClient:
    return InMemoryHttpClient()


@pytest.fixture()
def api(http_client: InMemoryHttpClient, settings: RestySettings) -> ExampleAPI:
    return ExampleAPI(http_client, settings=settings)


class ValueErrorCodec:
    """Implements Codec the way a third-party codec might: plain ValueError/TypeError."""

    content_type = ContentType.JSON

    def encode(self, value):
        raise ValueError("unsupported value")

    def decode(self, data, type_):
        raise TypeError("unsupported type")

