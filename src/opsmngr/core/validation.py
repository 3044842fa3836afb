"""Argument validation, run before any request is built.

Callers check parameters in declaration order; the first failure wins.
"""

from __future__ import annotations

from typing import Any

from opsmngr.core.errors import CANNOT_BE_NONE, MUST_BE_SET, ArgumentError


def require_id(name: str, value: str | None) -> str:
    if not value:
        raise ArgumentError(name, MUST_BE_SET)
    return value


def require_body(name: str, value: Any) -> Any:
    if value is None:
        raise ArgumentError(name, CANNOT_BE_NONE)
    return value
