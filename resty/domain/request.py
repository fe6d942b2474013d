"""Request descriptor: an immutable, chainable description of one pending HTTP call.

Descriptors are normally obtained from an `API` verb factory, refined with
modifiers (each returns a new descriptor) and consumed by one of the terminal
coroutines (`data`, `decode`, `execute`, `response`). Building a descriptor
never performs I/O; only the terminal coroutines talk to the transport.
"""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any, Mapping, TypeVar
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

from loguru import logger

from resty.codec.json_codec import JsonCodec
from resty.constants import DEFAULT_TIMEOUT_SECONDS, ContentType, EncodingPolicy, Method
from resty.core import LIBRARY_NAME
from resty.domain.errors import (
    DecodingError,
    EncodingError,
    RestyError,
    StatusValidationError,
    TransportError,
    TransportTimeoutError,
)
from resty.domain.models import StatusRange, StatusRangeLike, WireRequest
from resty.ports.codec import Codec, CodecError
from resty.ports.http_client import (
    AbstractHttpClient,
    HttpClientError,
    HttpClientTimeoutError,
    HttpResponse,
)

T = TypeVar("T")

_RAW_BODY_TYPES = (bytes, bytearray, memoryview)
# Third-party codecs may raise plain ValueError/TypeError instead of CodecError.
_CODEC_FAILURES = (CodecError, ValueError, TypeError)


def _log(event: str, level: str = "DEBUG", **kwargs: Any) -> None:
    logger.bind(library_name=LIBRARY_NAME, event=event, **kwargs).log(level, event)


def _frozen_mapping(values: Mapping[str, str] | None) -> Mapping[str, str]:
    return MappingProxyType(dict(values or {}))


@dataclass(frozen=True)
class Request:
    """One pending HTTP call.

    Value fields take part in equality; the transport, codecs and encoding
    policy are collaborators injected by the façade and do not.
    """

    method: Method
    url: str
    accept_header: ContentType | None = None
    content_type_header: ContentType | None = None
    payload: bytes | None = None
    header_fields: Mapping[str, str] = field(default_factory=dict)
    status_range: StatusRange = field(default_factory=StatusRange)
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    query: Mapping[str, str] = field(default_factory=dict)

    client: AbstractHttpClient | None = field(default=None, compare=False, repr=False)
    encoder: Codec = field(default_factory=JsonCodec, compare=False, repr=False)
    decoder: Codec = field(default_factory=JsonCodec, compare=False, repr=False)
    encoding_policy: EncodingPolicy = field(default=EncodingPolicy.STRICT, compare=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "method", Method(self.method))
        object.__setattr__(self, "header_fields", _frozen_mapping(self.header_fields))
        object.__setattr__(self, "query", _frozen_mapping(self.query))
        object.__setattr__(self, "status_range", StatusRange.coerce(self.status_range))
        if self.timeout_seconds <= 0:
            raise ValueError("timeout must be positive")

    # ---- modifiers ----

    def accept(self, content_type: ContentType | None) -> Request:
        return replace(self, accept_header=content_type)

    def content_type(self, content_type: ContentType | None) -> Request:
        return replace(self, content_type_header=content_type)

    def body(self, value: Any, encoder: Codec | None = None) -> Request:
        """Replace the body.

        Raw bytes (or None) are used as-is when no encoder is given. Anything
        else, including str, goes through `encoder` or the descriptor's default
        encoder. A value that fails to encode raises EncodingError, unless the
        descriptor was built with the lenient policy, which drops the body.
        """
        if encoder is None and (value is None or isinstance(value, _RAW_BODY_TYPES)):
            return replace(self, payload=None if value is None else bytes(value))

        codec = encoder or self.encoder
        try:
            data = codec.encode(value)
        except _CODEC_FAILURES as exc:
            if self.encoding_policy is EncodingPolicy.LENIENT:
                _log("body_encoding_dropped", level="WARNING", url=self.url, error=str(exc))
                return replace(self, payload=None)
            raise EncodingError(f"could not encode body for {self.url}: {exc}") from exc
        return replace(self, payload=data)

    def headers(self, values: Mapping[str, str]) -> Request:
        return replace(self, header_fields={**self.header_fields, **values})

    def authorization(self, values: Mapping[str, str]) -> Request:
        return self.headers(values)

    def expected_status_code(self, status_range: StatusRangeLike) -> Request:
        return replace(self, status_range=StatusRange.coerce(status_range))

    def timeout(self, seconds: float) -> Request:
        return replace(self, timeout_seconds=seconds)

    def query_items(self, values: Mapping[str, str]) -> Request:
        return replace(self, query={**self.query, **values})

    # ---- wire conversion ----

    def resolved_url(self) -> str:
        if not self.query:
            return self.url
        parts = urlsplit(self.url)
        pairs = [
            (key, value)
            for key, value in parse_qsl(parts.query, keep_blank_values=True)
            if key not in self.query
        ]
        pairs.extend(self.query.items())
        return urlunsplit(parts._replace(query=urlencode(pairs)))

    def to_wire_request(self) -> WireRequest:
        # Keyed by lowercased name; explicit headers replace Accept/Content-Type.
        fields: dict[str, tuple[str, str]] = {}
        if self.accept_header is not None:
            fields["accept"] = ("Accept", self.accept_header.value)
        if self.content_type_header is not None:
            fields["content-type"] = ("Content-Type", self.content_type_header.value)
        for name, value in self.header_fields.items():
            fields[name.lower()] = (name, value)

        return WireRequest(
            method=self.method,
            url=self.resolved_url(),
            headers={name: value for name, value in fields.values()},
            timeout_seconds=self.timeout_seconds,
            # body goes last
            body=self.payload,
        )

    # ---- terminal invocation ----

    async def response(self) -> HttpResponse:
        """Submit once and return the validated response."""
        if self.client is None:
            raise RestyError(f"no transport bound to request for {self.url}")

        wire = self.to_wire_request()
        _log("request_submitted", method=wire.method.value, url=wire.url)
        try:
            response = await self.client.send(wire)
        except HttpClientTimeoutError as exc:
            raise TransportTimeoutError(str(exc)) from exc
        except HttpClientError as exc:
            raise TransportError(str(exc)) from exc

        if not isinstance(response, HttpResponse):
            raise TransportError(f"transport returned a non-HTTP response for {wire.url}")

        if not self.status_range.contains(response.status_code):
            _log(
                "status_rejected",
                level="INFO",
                url=wire.url,
                status_code=response.status_code,
                expected=f"[{self.status_range.minimum}, {self.status_range.maximum})",
            )
            raise StatusValidationError(response.status_code, url=wire.url, body=response.content)

        _log("request_completed", url=wire.url, status_code=response.status_code)
        return response

    async def data(self) -> bytes:
        """Submit once and return the raw payload."""
        response = await self.response()
        return response.content

    async def decode(self, type_: type[T] | None) -> T | None:
        """Submit once and decode the payload into type_. None means no content is expected."""
        content = await self.data()
        if type_ is None or type_ is type(None):
            return None
        try:
            return self.decoder.decode(content, type_)
        except _CODEC_FAILURES as exc:
            _log("decode_failed", level="INFO", url=self.url, error=str(exc))
            raise DecodingError(f"could not decode response from {self.url}: {exc}") from exc

    async def execute(self) -> None:
        """Submit once, validate the status and discard the payload."""
        await self.response()
