"""JSON codecs backed by pydantic.

Encoding accepts anything pydantic can serialize (dicts, lists, dataclasses,
BaseModel instances, datetimes...). Decoding validates into the requested type
through a cached TypeAdapter, so `decode(data, User)` works for models,
dataclasses, TypedDicts and plain containers alike.
"""
from __future__ import annotations

from functools import lru_cache
from typing import Any, TypeVar

import pydantic_core
from pydantic import TypeAdapter

from resty.codec.naming import camelize_keys, snakeize_keys
from resty.constants import ContentType
from resty.ports.codec import CodecError

T = TypeVar("T")

_CODEC_FAILURES = (pydantic_core.PydanticSerializationError, ValueError, TypeError)


@lru_cache(maxsize=256)
def _adapter(type_: Any) -> TypeAdapter[Any]:
    return TypeAdapter(type_)


class JsonCodec:
    """Standard JSON codec."""

    content_type = ContentType.JSON

    def encode(self, value: Any) -> bytes:
        try:
            return pydantic_core.to_json(value)
        except _CODEC_FAILURES as exc:
            raise CodecError(f"cannot encode {type(value).__name__} as JSON: {exc}") from exc

    def decode(self, data: bytes, type_: type[T]) -> T:
        try:
            return _adapter(type_).validate_json(data)
        except _CODEC_FAILURES as exc:
            raise CodecError(f"cannot decode JSON into {type_!r}: {exc}") from exc


class CamelCaseJsonCodec(JsonCodec):
    """JSON codec for services speaking camelCase to snake_case Python models.

    Outgoing keys are camelCased, incoming keys snake_cased before validation.
    """

    def encode(self, value: Any) -> bytes:
        try:
            plain = pydantic_core.to_jsonable_python(value)
            return pydantic_core.to_json(camelize_keys(plain))
        except _CODEC_FAILURES as exc:
            raise CodecError(f"cannot encode {type(value).__name__} as JSON: {exc}") from exc

    def decode(self, data: bytes, type_: type[T]) -> T:
        try:
            plain = pydantic_core.from_json(data)
            return _adapter(type_).validate_python(snakeize_keys(plain))
        except _CODEC_FAILURES as exc:
            raise CodecError(f"cannot decode JSON into {type_!r}: {exc}") from exc
