"""Shared shapes of the Ops Manager API (Pydantic v2).

- `OpsManagerModel` fixes the wire conventions once: camelCase keys,
  snake_case attributes, unknown keys ignored.
- `Page` is the `{links, results, totalCount}` envelope returned by list
  endpoints.
- `ListOptions` and friends are encoded into the query string by
  `opsmngr.core.paths.set_query_params`.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Generic, TypeVar
from urllib.parse import parse_qs, urlsplit

from pydantic import BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel
from pydantic.config import ConfigDict

T = TypeVar("T")


class OpsManagerModel(BaseModel):
    """Base for every request/response document."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    def to_payload(self) -> dict[str, Any]:
        """JSON-ready dict using wire names; `None` fields are not sent."""

        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class Link(OpsManagerModel):
    """Relation to a sub-resource or related resource."""

    rel: str | None = Field(default=None, description="Relation name (e.g. 'self', 'next').")
    href: str | None = Field(default=None, description="Absolute URL of the related resource.")

    def href_query_param(self, name: str) -> str | None:
        """Value of query parameter `name` in `href`, if any."""

        if not self.href:
            return None
        values = parse_qs(urlsplit(self.href).query).get(name)
        return values[0] if values else None


class ListOptions(OpsManagerModel):
    """Pagination options. `None` everywhere means server defaults."""

    page_num: int | None = Field(default=None, ge=1)
    items_per_page: int | None = Field(default=None, ge=1)
    include_count: bool | None = None
    envelope: bool | None = None


class EventListOptions(ListOptions):
    event_type: list[str] | None = None
    min_date: datetime | str | None = None
    max_date: datetime | str | None = None


class Page(OpsManagerModel, Generic[T]):
    """List envelope. `results` is always a list, even on zero matches."""

    links: list[Link] = Field(default_factory=list)
    results: list[T] = Field(default_factory=list)
    total_count: int = 0

    @field_validator("links", "results", mode="before")
    @classmethod
    def _null_as_empty(cls, value: Any) -> Any:
        return [] if value is None else value
