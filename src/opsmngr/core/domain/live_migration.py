from __future__ import annotations

from pydantic import Field

from opsmngr.core.domain.common import OpsManagerModel


class LinkToken(OpsManagerModel):
    link_token: str = Field(
        ...,
        min_length=1,
        description="Token generated by Atlas that links the source organization to the target.",
    )


class ConnectionStatus(OpsManagerModel):
    status: str | None = Field(
        default=None,
        description="State of the link between this organization and the target (e.g. SYNCED).",
    )
