"""In-memory HTTP client for testing and local mode.

Records every request it is handed and answers from a queue of canned
responses (or a default 200 with an empty body). Lets API wrappers be
exercised without a network.
"""
from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field

from resty.domain.models import WireRequest
from resty.ports.http_client import HttpClientError


@dataclass(frozen=True)
class CannedResponse:
    status_code: int = 200
    content: bytes = b""
    headers: dict[str, str] = field(default_factory=dict)
    url: str = ""


class InMemoryHttpClient:
    def __init__(self, responses: list[CannedResponse | Exception] | None = None) -> None:
        self.requests: list[WireRequest] = []
        self._responses: deque[CannedResponse | Exception] = deque(responses or [])
        self.closed = False

    def enqueue(self, response: CannedResponse | Exception) -> None:
        self._responses.append(response)

    async def send(self, request: WireRequest) -> CannedResponse:
        if self.closed:
            raise HttpClientError("in-memory client is closed")
        self.requests.append(request)
        if not self._responses:
            return CannedResponse(url=request.url)
        outcome = self._responses.popleft()
        if isinstance(outcome, Exception):
            raise outcome
        if not outcome.url:
            return CannedResponse(outcome.status_code, outcome.content, dict(outcome.headers), request.url)
        return outcome

    async def close(self) -> None:
        self.closed = True
