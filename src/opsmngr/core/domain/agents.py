"""Agents, agent versions and agent API keys."""

from __future__ import annotations

from pydantic import Field

from opsmngr.core.domain.common import Link, OpsManagerModel, Page


class Agent(OpsManagerModel):
    type_name: str | None = Field(default=None, description="MONITORING, BACKUP or AUTOMATION.")
    hostname: str | None = None
    conf_count: int | None = None
    last_conf: str | None = None
    state_name: str | None = None
    ping_count: int | None = None
    is_managed: bool | None = None
    last_ping: str | None = None
    tag: str | None = None


class Agents(Page[Agent]):
    pass


class AgentVersion(OpsManagerModel):
    hostname: str | None = None
    type_name: str | None = None
    version: str | None = None
    is_managed: bool | None = None
    is_version_deprecated: bool | None = None
    is_version_old: bool | None = None
    last_conf: str | None = None


class AgentVersions(OpsManagerModel):
    """Agent versions running in one project."""

    count: int = 0
    entries: list[AgentVersion] = Field(default_factory=list)
    is_any_agent_not_managed: bool | None = None
    is_any_agent_version_deprecated: bool | None = None
    is_any_agent_version_old: bool | None = None
    latest_version: str | None = None
    minimum_agent_version_detected: str | None = None
    minimum_version: str | None = None
    links: list[Link] = Field(default_factory=list)


class SoftwareVersions(OpsManagerModel):
    """Latest versions of the software components known to the server."""

    automation_version: str | None = None
    automation_minimum_version: str | None = None
    bi_connector_version: str | None = None
    bi_connector_minimum_version: str | None = None
    mongo_db_tools_version: str | None = None
    links: list[Link] = Field(default_factory=list)


class AgentAPIKey(OpsManagerModel):
    id: str | None = Field(default=None, alias="_id")
    key: str | None = None
    desc: str | None = None
    created_time: int | None = None
    created_user_id: str | None = None
    created_ip_addr: str | None = None
    created_by: str | None = None


class AgentAPIKeysRequest(OpsManagerModel):
    desc: str = Field(..., description="Description of the new agent API key.")
