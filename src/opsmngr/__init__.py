"""Typed async client for the MongoDB Ops Manager REST API."""

from __future__ import annotations

__version__ = "0.1.0"

from opsmngr.client import Client  # noqa: E402
from opsmngr.core.config import ClientSettings  # noqa: E402
from opsmngr.core.domain.common import EventListOptions, Link, ListOptions  # noqa: E402
from opsmngr.core.domain.response import Response  # noqa: E402
from opsmngr.core.errors import (  # noqa: E402
    ArgumentError,
    DecodeError,
    EncodingError,
    ErrorResponse,
    OpsManagerError,
    TransportError,
)

__all__ = [
    "ArgumentError",
    "Client",
    "ClientSettings",
    "DecodeError",
    "EncodingError",
    "ErrorResponse",
    "EventListOptions",
    "Link",
    "ListOptions",
    "OpsManagerError",
    "Response",
    "TransportError",
    "__version__",
]
