"""Contract between resource services and the shared transport.

Services only ever call these two methods, so any object providing them
(the real `Transport`, a test double) can be injected.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

import httpx

from opsmngr.core.domain.response import Response


@runtime_checkable
class RequestDoer(Protocol):
    """Builds and executes API requests."""

    def new_request(self, method: str, path: str, body: Any = None) -> httpx.Request:
        """Build a request for `path` (relative to the base URL); no I/O."""

        ...

    async def do(self, request: httpx.Request, target: Any = None) -> tuple[Any, Response]:
        """Send `request`; decode the body into `target` when given."""

        ...
