"""Shared fixtures: a `Client` wired to an in-memory httpx transport."""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any

import httpx
import pytest

from opsmngr import Client

BASE_URL = "https://opsmanager.example.com:8443/"


class Recorder:
    """Queue of canned responses plus a log of the requests that hit it."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._responses: list[httpx.Response | Callable[[httpx.Request], httpx.Response]] = []

    def reply(
        self,
        status_code: int = 200,
        payload: Any = None,
        *,
        text: str | None = None,
        headers: dict[str, str] | None = None,
    ) -> None:
        if text is not None:
            self._responses.append(httpx.Response(status_code, text=text, headers=headers))
        elif payload is not None:
            self._responses.append(httpx.Response(status_code, json=payload, headers=headers))
        else:
            self._responses.append(httpx.Response(status_code, headers=headers))

    def reply_with(self, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self._responses.append(handler)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if not self._responses:
            raise AssertionError(f"unexpected request {request.method} {request.url}")
        response = self._responses.pop(0)
        if callable(response) and not isinstance(response, httpx.Response):
            return response(request)
        return response

    @property
    def calls(self) -> int:
        return len(self.requests)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last.content)


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()


@pytest.fixture
def client_factory(recorder: Recorder) -> Callable[..., Client]:
    def _make(**kwargs: Any) -> Client:
        http_client = httpx.AsyncClient(
            base_url=BASE_URL,
            transport=httpx.MockTransport(recorder),
        )
        return Client(http_client, **kwargs)

    return _make


@pytest.fixture
async def client(client_factory: Callable[..., Client]):
    api = client_factory()
    yield api
    await api.aclose()
