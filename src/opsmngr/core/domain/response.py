"""Response metadata returned next to every decoded result."""

from __future__ import annotations

from dataclasses import dataclass, field

import httpx

from opsmngr.core.domain.common import Link


@dataclass
class Response:
    """Status, headers and links of one HTTP exchange.

    `links` is filled from the decoded root document when it carries links,
    so pagination can be read here whatever the resource shape.
    """

    status_code: int
    headers: httpx.Headers = field(default_factory=httpx.Headers)
    links: list[Link] = field(default_factory=list)
    raw: httpx.Response | None = field(default=None, repr=False)

    @classmethod
    def from_httpx(cls, response: httpx.Response) -> Response:
        return cls(status_code=response.status_code, headers=response.headers, raw=response)

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    @property
    def request_id(self) -> str | None:
        return self.headers.get("X-Request-Id")

    @property
    def rate_limit_remaining(self) -> int | None:
        value = self.headers.get("X-RateLimit-Remaining")
        if value is None or not value.strip().isdigit():
            return None
        return int(value)

    def _link(self, rel: str) -> Link | None:
        for link in self.links:
            if link.rel == rel:
                return link
        return None

    def current_page(self) -> int:
        """Page number taken from the `self` link; 1 when absent."""

        link = self._link("self")
        if link is None:
            return 1
        page = link.href_query_param("pageNum")
        if page is None or not page.isdigit():
            return 1
        return int(page)

    def is_last_page(self) -> bool:
        return self._link("next") is None
