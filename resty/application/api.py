"""Endpoint façade: base class for describing one remote service.

Subclasses supply `base_address` and, optionally, `authorization_header`,
`encoder` and `decoder`. The verb factories build `Request` descriptors rooted
at the base address; no network activity happens until a descriptor's terminal
coroutine is awaited.

    class Reddit(API):
        base_address = "https://api.reddit.com"
        authorization_header = {"Authorization": "Bearer ..."}

        async def front_page(self) -> list[Post]:
            return await self.get("/front-page").decode(list[Post])
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Any, Mapping
from urllib.parse import urlsplit, urlunsplit

from loguru import logger

from resty.codec.json_codec import JsonCodec
from resty.config.settings import RestySettings
from resty.constants import EncodingPolicy, Method
from resty.core import LIBRARY_NAME
from resty.domain.request import Request
from resty.infrastructure.http.factory import create_http_client
from resty.ports.codec import Codec
from resty.ports.http_client import AbstractHttpClient


def _log(event: str, **kwargs: Any) -> None:
    logger.bind(library_name=LIBRARY_NAME, event=event, **kwargs).debug(event)


def join_path(base_address: str, path: str) -> str:
    """Append path to the base address's path component; query and fragment of the base are kept.

    "/" yields the base path with a trailing slash.
    """
    parts = urlsplit(base_address)
    joined = f"{parts.path.rstrip('/')}/{path.lstrip('/')}"
    return urlunsplit(parts._replace(path=joined))


class API:
    base_address: str = ""
    authorization_header: Mapping[str, str] = MappingProxyType({})
    encoder: Codec = JsonCodec()
    decoder: Codec = JsonCodec()

    def __init__(
        self,
        client: AbstractHttpClient | None = None,
        *,
        settings: RestySettings | None = None,
    ) -> None:
        if not self.base_address:
            raise TypeError(f"{type(self).__name__} must define base_address")
        self._settings = settings or RestySettings()
        self._client = client or create_http_client(self._settings)
        self._encoding_policy = (
            EncodingPolicy.STRICT if self._settings.strict_body_encoding else EncodingPolicy.LENIENT
        )

    @property
    def settings(self) -> RestySettings:
        return self._settings

    @property
    def client(self) -> AbstractHttpClient:
        return self._client

    async def close(self) -> None:
        await self._client.close()
        _log("api_closed", base_address=self.base_address)

    async def __aenter__(self) -> "API":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    def request(self, method: Method, path: str = "/") -> Request:
        return Request(
            method=method,
            url=join_path(self.base_address, path),
            header_fields=dict(self.authorization_header),
            timeout_seconds=self._settings.default_timeout_seconds,
            client=self._client,
            encoder=self.encoder,
            decoder=self.decoder,
            encoding_policy=self._encoding_policy,
        )

    def get(self, path: str = "/") -> Request:
        return self.request(Method.GET, path)

    def post(self, path: str = "/") -> Request:
        return self.request(Method.POST, path)

    def put(self, path: str = "/") -> Request:
        return self.request(Method.PUT, path)

    def patch(self, path: str = "/") -> Request:
        return self.request(Method.PATCH, path)

    def delete(self, path: str = "/") -> Request:
        return self.request(Method.DELETE, path)
