# tests/conftest.py

from pathlib import Path
from typing import Callable, Optional

import httpx
import pytest
import pytest_asyncio

from todo_api_client.api.client import TodoApiClient
from todo_api_client.net.transport import HttpxTransport, TransportResponse

BASE_URL = "http://jsonplaceholder.typicode.com"
RESOURCES = Path(__file__).parent / "resources"


class StubServer:
    """
    httpx.MockTransport handler.

    - Answers every request with the configured status/body
    - Raises the configured httpx error instead, when set
    - Records requests for assertions
    """

    def __init__(self) -> None:
        self.status_code = 200
        self.body = b""
        self.error: Optional[Exception] = None
        self.requests: list[httpx.Request] = []

    def respond(self, status_code: int, body: bytes = b"") -> None:
        self.status_code = status_code
        self.body = body
        self.error = None

    def fail_with(self, error: Exception) -> None:
        self.error = error

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return httpx.Response(self.status_code, content=self.body)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]


class FakeTransport:
    """Transport double that returns a canned TransportResponse and records calls."""

    def __init__(self, response: TransportResponse) -> None:
        self.response = response
        self.calls: list[tuple[str, str, dict, Optional[bytes]]] = []

    async def execute(self, method, url, headers, body=None) -> TransportResponse:
        self.calls.append((method, url, dict(headers), body))
        return self.response


@pytest.fixture()
def load_json() -> Callable[[str], bytes]:
    def _load(name: str) -> bytes:
        return (RESOURCES / f"{name}.json").read_bytes()

    return _load


@pytest.fixture()
def stub_server() -> StubServer:
    return StubServer()


@pytest_asyncio.fixture()
async def http_client(stub_server: StubServer):
    async with httpx.AsyncClient(transport=httpx.MockTransport(stub_server)) as client:
        yield client


@pytest.fixture()
def api_client(http_client: httpx.AsyncClient) -> TodoApiClient:
    return TodoApiClient(base_url=BASE_URL, transport=HttpxTransport(client=http_client))


@pytest.fixture()
def fake_transport_client() -> Callable[[TransportResponse], tuple[TodoApiClient, FakeTransport]]:
    def _make(response: TransportResponse) -> tuple[TodoApiClient, FakeTransport]:
        transport = FakeTransport(response)
        return TodoApiClient(base_url=BASE_URL, transport=transport), transport

    return _make
