"""
TODO API client and it does:
- Builds requests for the five /todos operations
- Dispatches them over the injected transport
- Classifies (status, body, fault) into a typed Result
- Delivers the Result once (return value, and on_complete if given)

Main purpose:
Callers never see a raw exception, only Success or Failure.
"""


import asyncio
from typing import Any, Callable, Coroutine, Optional, TypeVar
from urllib.parse import quote

from todo_api_client.api.codec import (
    DecodeFault,
    decode_task,
    decode_tasks,
    encode_new_task,
    encode_task,
)
from todo_api_client.api.errors import ItemNotFound, NetworkError, UnknownError
from todo_api_client.api.result import Failure, Result, Success
from todo_api_client.api.types import NewTask, Task
from todo_api_client.core.config import settings
from todo_api_client.core.logging import get_logger
from todo_api_client.net.transport import HttpxTransport, Method, Transport, TransportResponse

log = get_logger(__name__)

T = TypeVar("T")

JSON_HEADERS = {
    "Content-Type": "application/json",
    "Accept": "application/json",
}

TODOS_PATH = "/todos"

# httpx drops "." and ".." path segments; keep them as literal ids
DOT_SEGMENTS = {".": "%2E", "..": "%2E%2E"}


def _ignore_body(body: bytes) -> None:
    return None


def classify(response: TransportResponse, decode: Callable[[bytes], T]) -> Result[T]:
    """
    Map one transport outcome to a Result.
    - fault            -> NetworkError
    - 2xx + decodable  -> Success
    - 2xx + bad body   -> NetworkError
    - 404              -> ItemNotFound
    - anything else    -> UnknownError(code)
    """
    if response.fault is not None or response.status_code is None:
        return Failure(error=NetworkError())

    status = response.status_code
    if 200 <= status <= 299:
        try:
            return Success(value=decode(response.body))
        except DecodeFault as e:
            # reported as NetworkError; keep the cause in the log
            log.warning(f"Undecodable {status} response: {e}")
            return Failure(error=NetworkError())

    if status == 404:
        return Failure(error=ItemNotFound())

    return Failure(error=UnknownError(code=status))


class TodoApiClient:
    def __init__(self, base_url: str | None = None, transport: Transport | None = None):
        url = (settings.TODO_API_BASE_URL if base_url is None else base_url).strip()
        if not url:
            raise ValueError("TODO API base URL is empty. Set TODO_API_BASE_URL or pass base_url.")
        self.base_url = url.rstrip("/")
        self.transport = transport or HttpxTransport()

    def _todos_url(self, task_id: str | None = None) -> str:
        if task_id is None:
            return f"{self.base_url}{TODOS_PATH}"
        if not task_id:
            raise ValueError("Task id must not be empty.")
        segment = DOT_SEGMENTS.get(task_id) or quote(task_id, safe="")
        return f"{self.base_url}{TODOS_PATH}/{segment}"

    async def _call(
        self,
        method: Method,
        url: str,
        decode: Callable[[bytes], T],
        body: bytes | None = None,
        on_complete: Optional[Callable[[Result[T]], None]] = None,
    ) -> Result[T]:
        log.debug(f"{method} {url}")
        try:
            response = await self.transport.execute(method, url, JSON_HEADERS, body)
        except Exception as e:
            # transports must not raise; a misbehaving one still ends as NetworkError
            log.warning(f"Transport raised on {method} {url}: {e!r}")
            response = TransportResponse(fault=e)

        result = classify(response, decode)
        if isinstance(result, Failure):
            log.debug(f"{method} {url} -> {result.error!r}")
        if on_complete is not None:
            on_complete(result)
        return result

    async def get_all_tasks(
        self, *, on_complete: Optional[Callable[[Result[list[Task]]], None]] = None
    ) -> Result[list[Task]]:
        return await self._call("GET", self._todos_url(), decode_tasks, on_complete=on_complete)

    async def get_task_by_id(
        self, task_id: str, *, on_complete: Optional[Callable[[Result[Task]], None]] = None
    ) -> Result[Task]:
        return await self._call("GET", self._todos_url(task_id), decode_task, on_complete=on_complete)

    async def add_task_to_user(
        self,
        user_id: str,
        title: str,
        completed: bool,
        *,
        on_complete: Optional[Callable[[Result[Task]], None]] = None,
    ) -> Result[Task]:
        new_task = NewTask(user_id=user_id, title=title, completed=completed)
        return await self._call(
            "POST",
            self._todos_url(),
            decode_task,
            body=encode_new_task(new_task),
            on_complete=on_complete,
        )

    async def update_task(
        self, task: Task, *, on_complete: Optional[Callable[[Result[Task]], None]] = None
    ) -> Result[Task]:
        return await self._call(
            "PUT",
            self._todos_url(task.id),
            decode_task,
            body=encode_task(task),
            on_complete=on_complete,
        )

    async def delete_task_by_id(
        self, task_id: str, *, on_complete: Optional[Callable[[Result[None]], None]] = None
    ) -> Result[None]:
        return await self._call("DELETE", self._todos_url(task_id), _ignore_body, on_complete=on_complete)

    def submit(
        self,
        call: Coroutine[Any, Any, Result[T]],
        on_complete: Optional[Callable[[Result[T]], None]] = None,
    ) -> "asyncio.Task[Result[T]]":
        """
        Schedule an operation on the running loop and return at once.
        The returned task resolves to the Result; on_complete (if given) gets it
        once the call finishes. A cancelled call delivers nothing.
        """
        fut = asyncio.create_task(call)

        if on_complete is not None:
            def _deliver(done: "asyncio.Future[Result[T]]") -> None:
                if not done.cancelled():
                    on_complete(done.result())

            fut.add_done_callback(_deliver)
        return fut
