from __future__ import annotations

import json
from typing import Any, Callable

import httpx
import pytest

from tidio_mcp.client import TidioClient


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it served"""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self.requests: list[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(_record)


def json_response(payload: Any, status_code: int = 200) -> httpx.Response:
    return httpx.Response(status_code, content=json.dumps(payload).encode(), headers={"Content-Type": "application/json"})


@pytest.fixture
def make_client() -> Callable[..., tuple[TidioClient, RecordingTransport]]:
    def _make(handler: Callable[[httpx.Request], httpx.Response]) -> tuple[TidioClient, RecordingTransport]:
        transport = RecordingTransport(handler)
        client = TidioClient(
            "https://api.tidio.test",
            "client-id-123",
            "client-secret-456",
            transport=transport,
        )
        return client, transport

    return _make
