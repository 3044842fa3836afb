"""Programmatic API keys (organization, project and global) and the global
access list."""

from __future__ import annotations

from pydantic import Field

from opsmngr.core.domain.common import OpsManagerModel, Page


class Role(OpsManagerModel):
    group_id: str | None = None
    org_id: str | None = None
    role_name: str | None = None


class APIKey(OpsManagerModel):
    id: str | None = None
    desc: str | None = None
    private_key: str | None = None
    public_key: str | None = None
    roles: list[Role] = Field(default_factory=list)


class APIKeys(Page[APIKey]):
    pass


class APIKeyInput(OpsManagerModel):
    """Body of create/update calls. Roles are plain role names."""

    desc: str | None = None
    roles: list[str] | None = None


class AssignAPIKey(OpsManagerModel):
    roles: list[str] = Field(default_factory=list)


class GlobalWhitelistAPIKey(OpsManagerModel):
    id: str | None = None
    cidr_block: str | None = None
    created: str | None = None
    description: str | None = None
    type: str | None = None
    updated: str | None = None


class GlobalWhitelistAPIKeys(Page[GlobalWhitelistAPIKey]):
    pass


class WhitelistAPIKeysReq(OpsManagerModel):
    cidr_block: str = Field(..., min_length=1, description="Address or CIDR block allowed to use global keys.")
    description: str = Field(..., description="Free-form description of the entry.")
