"""Library-level constants shared across modules."""
from __future__ import annotations

from enum import Enum


class Method(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"


class ContentType(str, Enum):
    JSON = "application/json"
    XML = "application/xml"
    URLENCODED = "application/x-www-form-urlencoded"


class EncodingPolicy(str, Enum):
    """What `Request.body` does when a structured value fails to encode."""

    STRICT = "STRICT"
    LENIENT = "LENIENT"


DEFAULT_TIMEOUT_SECONDS = 10.0
DEFAULT_STATUS_MIN = 200
DEFAULT_STATUS_MAX = 300
