"""
HTTP transport for the TODO API and it does:
- Sends one request over httpx.AsyncClient
- Reports status + body, or the fault that stopped the exchange
- Never raises for network-level problems

Main purpose:
The only place that touches the network.
"""


from typing import Literal, Mapping, Optional, Protocol

import httpx
from pydantic import BaseModel, ConfigDict

from todo_api_client.core.config import settings
from todo_api_client.core.logging import get_logger

log = get_logger(__name__)

Method = Literal["GET", "POST", "PUT", "DELETE"]


class TransportResponse(BaseModel):
    # fault set => status_code is None
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    status_code: Optional[int] = None
    body: bytes = b""
    fault: Optional[Exception] = None


class Transport(Protocol):
    async def execute(
        self,
        method: Method,
        url: str,
        headers: Mapping[str, str],
        body: Optional[bytes] = None,
    ) -> TransportResponse:
        ...


def default_timeout() -> httpx.Timeout:
    return httpx.Timeout(
        settings.TODO_API_TIMEOUT_SECONDS,
        connect=settings.TODO_API_CONNECT_TIMEOUT_SECONDS,
    )


class HttpxTransport:
    """
    Transport backed by httpx.AsyncClient.
    An injected client is reused and left open; without one, a client is
    opened and closed around every request.
    """

    def __init__(self, client: httpx.AsyncClient | None = None, timeout: httpx.Timeout | None = None):
        self.client = client
        self.timeout = timeout or default_timeout()

    async def execute(
        self,
        method: Method,
        url: str,
        headers: Mapping[str, str],
        body: Optional[bytes] = None,
    ) -> TransportResponse:
        try:
            if self.client is not None:
                r = await self.client.request(method, url, headers=dict(headers), content=body)
            else:
                async with httpx.AsyncClient(timeout=self.timeout) as client:
                    r = await client.request(method, url, headers=dict(headers), content=body)
        except httpx.HTTPError as e:
            log.warning(f"{method} {url} failed: {e.__class__.__name__}: {e}")
            return TransportResponse(fault=e)

        return TransportResponse(status_code=r.status_code, body=r.content)
