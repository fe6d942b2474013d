"""Codec port: turns structured values into request bytes and response bytes into values."""
from __future__ import annotations

from typing import Any, Protocol, TypeVar, runtime_checkable

from resty.constants import ContentType

T = TypeVar("T")


class CodecError(Exception):
    """Raised by codecs when a value cannot be encoded or bytes cannot be decoded."""


@runtime_checkable
class Codec(Protocol):
    @property
    def content_type(self) -> ContentType: ...

    def encode(self, value: Any) -> bytes:
        """Encode value to bytes; raise CodecError (or ValueError/TypeError) on failure."""
        ...

    def decode(self, data: bytes, type_: type[T]) -> T:
        """Decode bytes into an instance of type_; raise CodecError (or ValueError/TypeError) on failure."""
        ...
