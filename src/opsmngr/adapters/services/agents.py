"""Agents and agent API keys.

See: https://docs.opsmanager.mongodb.com/current/reference/api/agents/
"""

from __future__ import annotations

from opsmngr.adapters.services.base import Service
from opsmngr.core.domain.agents import (
    AgentAPIKey,
    AgentAPIKeysRequest,
    Agents,
    AgentVersions,
    SoftwareVersions,
)
from opsmngr.core.domain.common import ListOptions
from opsmngr.core.domain.response import Response
from opsmngr.core.interfaces.services import AgentAPIKeysService, AgentsService
from opsmngr.core.paths import API_PUBLIC_V1_PATH, build_path, set_query_params
from opsmngr.core.validation import require_body, require_id

AGENTS_PATH = API_PUBLIC_V1_PATH + "groups/%s/agents"
SOFTWARE_VERSIONS_PATH = API_PUBLIC_V1_PATH + "softwareComponents/versions"
AGENT_API_KEYS_PATH = API_PUBLIC_V1_PATH + "groups/%s/agentapikeys"


class AgentsServiceOp(Service, AgentsService):
    async def list_agent_links(self, group_id: str) -> tuple[Agents, Response]:
        """Links to the agent listings of a project (one per agent type)."""

        require_id("group_id", group_id)
        path = build_path(AGENTS_PATH, group_id)
        return await self._send("GET", path, target=Agents)

    async def list_agents_by_type(
        self, group_id: str, agent_type: str, options: ListOptions | None = None
    ) -> tuple[Agents, Response]:
        """Agents of one type (MONITORING, BACKUP, AUTOMATION) in a project."""

        require_id("group_id", group_id)
        require_id("agent_type", agent_type)
        path = set_query_params(build_path(AGENTS_PATH + "/%s", group_id, agent_type), options)
        return await self._send("GET", path, target=Agents)

    async def project_versions(self, group_id: str) -> tuple[AgentVersions, Response]:
        require_id("group_id", group_id)
        path = build_path(AGENTS_PATH, group_id, suffix="versions")
        return await self._send("GET", path, target=AgentVersions)

    async def global_versions(self) -> tuple[SoftwareVersions, Response]:
        return await self._send("GET", SOFTWARE_VERSIONS_PATH, target=SoftwareVersions)


class AgentAPIKeysServiceOp(Service, AgentAPIKeysService):
    """Keys agents use to authenticate against a project.

    The list endpoint answers with a bare JSON array, not an envelope.
    """

    async def list(self, group_id: str) -> tuple[list[AgentAPIKey], Response]:
        require_id("group_id", group_id)
        path = build_path(AGENT_API_KEYS_PATH, group_id)
        root, response = await self._send("GET", path, target=list[AgentAPIKey])
        return root or [], response

    async def create(self, group_id: str, request: AgentAPIKeysRequest) -> tuple[AgentAPIKey, Response]:
        require_id("group_id", group_id)
        require_body("request", request)
        path = build_path(AGENT_API_KEYS_PATH, group_id)
        return await self._send("POST", path, body=request, target=AgentAPIKey)

    async def delete(self, group_id: str, agent_api_key_id: str) -> Response:
        require_id("group_id", group_id)
        require_id("agent_api_key_id", agent_api_key_id)
        path = build_path(AGENT_API_KEYS_PATH + "/%s", group_id, agent_api_key_id)
        _, response = await self._send("DELETE", path)
        return response
