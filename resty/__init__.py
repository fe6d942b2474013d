"""Declarative, immutable request builders over an async HTTP transport."""
from loguru import logger

from resty.application.api import API
from resty.codec.json_codec import CamelCaseJsonCodec, JsonCodec
from resty.config.settings import RestySettings
from resty.constants import ContentType, EncodingPolicy, Method
from resty.core import LIBRARY_NAME
from resty.domain.errors import (
    DecodingError,
    EncodingError,
    RestyError,
    StatusValidationError,
    TransportError,
    TransportTimeoutError,
)
from resty.domain.models import StatusRange, WireRequest
from resty.domain.request import Request
from resty.infrastructure.http.factory import create_http_client

# Applications opt in with logger.enable("resty").
logger.disable(LIBRARY_NAME)

__all__ = [
    "API",
    "CamelCaseJsonCodec",
    "ContentType",
    "DecodingError",
    "EncodingError",
    "EncodingPolicy",
    "JsonCodec",
    "Method",
    "Request",
    "RestyError",
    "RestySettings",
    "StatusRange",
    "StatusValidationError",
    "TransportError",
    "TransportTimeoutError",
    "WireRequest",
    "create_http_client",
]
