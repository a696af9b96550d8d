"""Pytest configuration and fixtures."""

import json
from typing import Any, Callable, Optional

import httpx
import pytest
import pytest_asyncio

from openocean import ClientConfig, OpenOceanClient

BASE_URL = "https://api.test"


class RecordingTransport(httpx.MockTransport):
    """Mock transport that records requests and replies with a canned response."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self._handler: Callable[[httpx.Request], httpx.Response] = lambda request: httpx.Response(
            200, json={"code": 200, "data": None}
        )
        super().__init__(self._dispatch)

    def _dispatch(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._handler(request)

    def reply(
        self,
        payload: Any = None,
        *,
        status: int = 200,
        text: Optional[str] = None,
        headers: Optional[dict] = None,
    ) -> None:
        """Serve the same response to every following request."""
        body = text if text is not None else json.dumps(payload)
        self._handler = lambda request: httpx.Response(
            status, text=body, headers=headers or {"content-type": "application/json"}
        )

    def raise_error(self, error: Exception) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise error

        self._handler = handler

    def route(self, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self._handler = handler

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last.content)


@pytest.fixture
def transport() -> RecordingTransport:
    return RecordingTransport()


@pytest_asyncio.fixture
async def client(transport):
    """Client bound to the recording transport."""
    config = ClientConfig(base_url=BASE_URL, timeout=5)
    async with OpenOceanClient(config, transport=transport) as c:
        yield c

