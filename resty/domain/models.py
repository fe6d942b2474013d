"""Domain models."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from resty.constants import DEFAULT_STATUS_MAX, DEFAULT_STATUS_MIN, Method


@dataclass(frozen=True)
class StatusRange:
    """Half-open interval [minimum, maximum) of status codes treated as success."""

    minimum: int = DEFAULT_STATUS_MIN
    maximum: int = DEFAULT_STATUS_MAX

    def __post_init__(self) -> None:
        if not isinstance(self.minimum, int) or not isinstance(self.maximum, int):
            raise TypeError("status range bounds must be ints")
        if self.maximum <= self.minimum:
            raise ValueError(f"empty status range [{self.minimum}, {self.maximum})")

    def contains(self, status_code: int) -> bool:
        return self.minimum <= status_code < self.maximum

    def __contains__(self, status_code: int) -> bool:
        return self.contains(status_code)

    @staticmethod
    def coerce(value: "StatusRangeLike") -> "StatusRange":
        if isinstance(value, StatusRange):
            return value
        if isinstance(value, range):
            if value.step != 1:
                raise ValueError("status range must be contiguous")
            return StatusRange(value.start, value.stop)
        raise TypeError(f"expected StatusRange or range, got {type(value).__name__}")


StatusRangeLike = Union[StatusRange, range]


@dataclass(frozen=True)
class WireRequest:
    """A fully materialized request, ready for the transport (value object)."""

    method: Method
    url: str
    headers: dict[str, str] = field(default_factory=dict)
    timeout_seconds: float = 10.0
    body: bytes | None = None
