"""Error taxonomy of the client.

- `ArgumentError`: local, raised before any network call (empty identifier,
  missing body).
- `EncodingError`: query string or request body could not be serialized.
- `TransportError`: network failure, timeout or non-success status.
  `ErrorResponse` is the non-2xx flavour and carries the parsed API error.
- `DecodeError`: the response body does not match the expected shape.

Nothing here is retried or recovered; every error reaches the caller.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from opsmngr.core.domain.response import Response

MUST_BE_SET = "must be set"
CANNOT_BE_NONE = "cannot be None"


class OpsManagerError(Exception):
    """Base class for every error raised by this package."""


class ArgumentError(OpsManagerError, ValueError):
    """A required argument is empty or missing."""

    def __init__(self, name: str, reason: str) -> None:
        self.name = name
        self.reason = reason
        super().__init__(f"{name} is invalid because {reason}")


class EncodingError(OpsManagerError):
    """Options or body could not be encoded for the wire."""


class TransportError(OpsManagerError):
    """The request did not complete successfully at the HTTP level.

    `response` holds whatever metadata was captured (status, headers); it is
    `None` when no response was received at all.
    """

    def __init__(self, message: str, *, response: Response | None = None) -> None:
        self.response = response
        super().__init__(message)

    @property
    def status_code(self) -> int | None:
        return self.response.status_code if self.response is not None else None


class ErrorResponse(TransportError):
    """Non-2xx response, with the error document returned by Ops Manager."""

    def __init__(
        self,
        *,
        method: str,
        url: str,
        response: Response,
        error_code: str | None = None,
        reason: str | None = None,
        detail: str | None = None,
        parameters: list[Any] | None = None,
    ) -> None:
        self.method = method
        self.url = url
        self.error_code = error_code
        self.reason = reason
        self.detail = detail
        self.parameters = parameters or []
        message = f"{method} {url}: {response.status_code}"
        if error_code:
            message += f" (request {error_code!r})"
        if detail:
            message += f" {detail}"
        super().__init__(message, response=response)


class DecodeError(OpsManagerError):
    """The response body could not be decoded into the expected type."""

    def __init__(self, message: str, *, response: Response | None = None) -> None:
        self.response = response
        super().__init__(message)
