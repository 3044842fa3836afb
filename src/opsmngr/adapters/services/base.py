"""Common base of the resource services."""

from __future__ import annotations

from typing import Any

from opsmngr.core.domain.response import Response
from opsmngr.core.interfaces.transport import RequestDoer


class Service:
    """Holds the injected transport; no other state."""

    def __init__(self, client: RequestDoer) -> None:
        self._client = client

    async def _send(self, method: str, path: str, *, body: Any = None, target: Any = None) -> tuple[Any, Response]:
        request = self._client.new_request(method, path, body)
        return await self._client.do(request, target)
