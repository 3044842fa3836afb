"""Shared transport: request factory and response decoder.

Responsibilities:
- `new_request` turns (method, path, body) into an `httpx.Request` bound to
  the base URL. No I/O.
- `do` sends it, maps failures onto the package errors, decodes the body
  into the requested type (an empty body gives an empty root of that type)
  and copies root `links` onto the `Response`.

One call is one exchange: there are no retries here. Cancellation comes from
the awaiting task (`asyncio.timeout`, `Task.cancel`) and propagates as
`asyncio.CancelledError`.
"""

from __future__ import annotations

import json
import logging
from functools import lru_cache
from typing import Any, Callable, get_origin

import httpx
from pydantic import BaseModel, TypeAdapter, ValidationError

from opsmngr.adapters.http_client import MEDIA_TYPE
from opsmngr.core.domain.common import OpsManagerModel
from opsmngr.core.domain.response import Response
from opsmngr.core.errors import DecodeError, EncodingError, ErrorResponse, TransportError
from opsmngr.core.interfaces.transport import RequestDoer

logger = logging.getLogger(__name__)

RequestCompletionCallback = Callable[[httpx.Request, httpx.Response], None]


@lru_cache(maxsize=256)
def _adapter(target: Any) -> TypeAdapter[Any]:
    return TypeAdapter(target)


def _empty_document(target: Any) -> Any:
    """JSON value standing in for an empty body: `[]` for list targets, `{}` otherwise."""

    return [] if get_origin(target) is list or target is list else {}


def encode_body(body: Any) -> bytes:
    """Serialize a request body to JSON bytes."""

    if isinstance(body, OpsManagerModel):
        payload: Any = body.to_payload()
    elif isinstance(body, BaseModel):
        payload = body.model_dump(mode="json", by_alias=True, exclude_none=True)
    else:
        payload = body
    try:
        return json.dumps(payload, ensure_ascii=False).encode("utf-8")
    except (TypeError, ValueError) as exc:
        raise EncodingError(f"request body is not JSON serializable: {exc}") from exc


def _error_response(request: httpx.Request, raw: httpx.Response, response: Response) -> ErrorResponse:
    data: dict[str, Any] = {}
    try:
        parsed = raw.json()
    except ValueError:
        # Proxies and load balancers answer with HTML or plain text.
        parsed = None
    if isinstance(parsed, dict):
        data = parsed

    detail = data.get("detail")
    if not data:
        detail = raw.text.strip() or None

    return ErrorResponse(
        method=request.method,
        url=str(request.url),
        response=response,
        error_code=data.get("errorCode"),
        reason=data.get("reason"),
        detail=detail,
        parameters=data.get("parameters"),
    )


class Transport(RequestDoer):
    """Executes API requests through one shared `httpx.AsyncClient`.

    Holds no per-call state, so one instance serves concurrent callers.
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        *,
        user_agent: str | None = None,
        on_request_completed: RequestCompletionCallback | None = None,
    ) -> None:
        self._http = http_client
        self._user_agent = user_agent
        self._on_request_completed = on_request_completed

    @property
    def base_url(self) -> httpx.URL:
        return self._http.base_url

    def on_request_completed(self, callback: RequestCompletionCallback | None) -> None:
        """Register a callback invoked after every completed exchange."""

        self._on_request_completed = callback

    def new_request(self, method: str, path: str, body: Any = None) -> httpx.Request:
        headers = {"Accept": MEDIA_TYPE}
        content: bytes | None = None
        if body is not None:
            content = encode_body(body)
            headers["Content-Type"] = MEDIA_TYPE
        if self._user_agent:
            headers["User-Agent"] = self._user_agent

        try:
            return self._http.build_request(method, path, content=content, headers=headers)
        except httpx.InvalidURL as exc:
            raise EncodingError(f"invalid request path {path!r}: {exc}") from exc

    async def do(self, request: httpx.Request, target: Any = None) -> tuple[Any, Response]:
        logger.debug("%s %s", request.method, request.url)
        try:
            raw = await self._http.send(request)
        except httpx.HTTPError as exc:
            logger.warning("%s %s failed: %s", request.method, request.url, exc)
            raise TransportError(f"{request.method} {request.url}: {exc}") from exc

        if self._on_request_completed is not None:
            self._on_request_completed(request, raw)

        response = Response.from_httpx(raw)
        logger.debug("%s %s -> %s", request.method, request.url, response.status_code)

        if not response.ok:
            raise _error_response(request, raw, response)

        if target is None:
            return None, response

        try:
            if raw.content.strip():
                root = _adapter(target).validate_json(raw.content)
            else:
                root = _adapter(target).validate_python(_empty_document(target))
        except ValidationError as exc:
            raise DecodeError(
                f"{request.method} {request.url}: cannot decode response: {exc}",
                response=response,
            ) from exc

        links = getattr(root, "links", None)
        if links:
            response.links = list(links)
        return root, response

    async def aclose(self) -> None:
        await self._http.aclose()
