"""Programmatic API keys and the global API key access list.

- Organization keys: `orgs/{org_id}/apiKeys`
- Project assignments: `groups/{group_id}/apiKeys`
- Global keys: `admin/apiKeys`
- Global access list: `admin/whitelist`

Updates are partial (PATCH).
"""

from __future__ import annotations

from opsmngr.adapters.services.base import Service
from opsmngr.core.domain.api_keys import (
    APIKey,
    APIKeyInput,
    APIKeys,
    AssignAPIKey,
    GlobalWhitelistAPIKey,
    GlobalWhitelistAPIKeys,
    WhitelistAPIKeysReq,
)
from opsmngr.core.domain.common import ListOptions
from opsmngr.core.domain.response import Response
from opsmngr.core.interfaces.services import (
    GlobalAPIKeysService,
    GlobalAPIKeyWhitelistsService,
    OrganizationAPIKeysService,
    ProjectAPIKeysService,
)
from opsmngr.core.paths import API_PUBLIC_V1_PATH, build_path, set_query_params
from opsmngr.core.validation import require_body, require_id

ORG_API_KEYS_PATH = API_PUBLIC_V1_PATH + "orgs/%s/apiKeys"
PROJECT_API_KEYS_PATH = API_PUBLIC_V1_PATH + "groups/%s/apiKeys"
GLOBAL_API_KEYS_PATH = API_PUBLIC_V1_PATH + "admin/apiKeys"
GLOBAL_WHITELIST_PATH = API_PUBLIC_V1_PATH + "admin/whitelist"


class OrganizationAPIKeysServiceOp(Service, OrganizationAPIKeysService):
    async def list(self, org_id: str, options: ListOptions | None = None) -> tuple[APIKeys, Response]:
        require_id("org_id", org_id)
        path = set_query_params(build_path(ORG_API_KEYS_PATH, org_id), options)
        return await self._send("GET", path, target=APIKeys)

    async def get(self, org_id: str, api_key_id: str) -> tuple[APIKey, Response]:
        require_id("org_id", org_id)
        require_id("api_key_id", api_key_id)
        path = build_path(ORG_API_KEYS_PATH + "/%s", org_id, api_key_id)
        return await self._send("GET", path, target=APIKey)

    async def create(self, org_id: str, api_key: APIKeyInput) -> tuple[APIKey, Response]:
        require_id("org_id", org_id)
        require_body("api_key", api_key)
        path = build_path(ORG_API_KEYS_PATH, org_id)
        return await self._send("POST", path, body=api_key, target=APIKey)

    async def update(self, org_id: str, api_key_id: str, api_key: APIKeyInput) -> tuple[APIKey, Response]:
        require_id("org_id", org_id)
        require_id("api_key_id", api_key_id)
        require_body("api_key", api_key)
        path = build_path(ORG_API_KEYS_PATH + "/%s", org_id, api_key_id)
        return await self._send("PATCH", path, body=api_key, target=APIKey)

    async def delete(self, org_id: str, api_key_id: str) -> Response:
        require_id("org_id", org_id)
        require_id("api_key_id", api_key_id)
        path = build_path(ORG_API_KEYS_PATH + "/%s", org_id, api_key_id)
        _, response = await self._send("DELETE", path)
        return response


class ProjectAPIKeysServiceOp(Service, ProjectAPIKeysService):
    """Keys assigned to a project.

    `create` makes a new organization key already assigned to the project;
    `unassign` only removes the assignment, the key itself survives.
    """

    async def list(self, group_id: str, options: ListOptions | None = None) -> tuple[APIKeys, Response]:
        require_id("group_id", group_id)
        path = set_query_params(build_path(PROJECT_API_KEYS_PATH, group_id), options)
        return await self._send("GET", path, target=APIKeys)

    async def create(self, group_id: str, api_key: APIKeyInput) -> tuple[APIKey, Response]:
        require_id("group_id", group_id)
        require_body("api_key", api_key)
        path = build_path(PROJECT_API_KEYS_PATH, group_id)
        return await self._send("POST", path, body=api_key, target=APIKey)

    async def assign(self, group_id: str, api_key_id: str, assignment: AssignAPIKey) -> Response:
        require_id("group_id", group_id)
        require_id("api_key_id", api_key_id)
        require_body("assignment", assignment)
        path = build_path(PROJECT_API_KEYS_PATH + "/%s", group_id, api_key_id)
        _, response = await self._send("PATCH", path, body=assignment)
        return response

    async def unassign(self, group_id: str, api_key_id: str) -> Response:
        require_id("group_id", group_id)
        require_id("api_key_id", api_key_id)
        path = build_path(PROJECT_API_KEYS_PATH + "/%s", group_id, api_key_id)
        _, response = await self._send("DELETE", path)
        return response


class GlobalAPIKeysServiceOp(Service, GlobalAPIKeysService):
    async def list(self, options: ListOptions | None = None) -> tuple[APIKeys, Response]:
        path = set_query_params(GLOBAL_API_KEYS_PATH, options)
        return await self._send("GET", path, target=APIKeys)

    async def get(self, api_key_id: str) -> tuple[APIKey, Response]:
        require_id("api_key_id", api_key_id)
        path = build_path(GLOBAL_API_KEYS_PATH + "/%s", api_key_id)
        return await self._send("GET", path, target=APIKey)

    async def create(self, api_key: APIKeyInput) -> tuple[APIKey, Response]:
        require_body("api_key", api_key)
        return await self._send("POST", GLOBAL_API_KEYS_PATH, body=api_key, target=APIKey)

    async def update(self, api_key_id: str, api_key: APIKeyInput) -> tuple[APIKey, Response]:
        require_id("api_key_id", api_key_id)
        require_body("api_key", api_key)
        path = build_path(GLOBAL_API_KEYS_PATH + "/%s", api_key_id)
        return await self._send("PATCH", path, body=api_key, target=APIKey)

    async def delete(self, api_key_id: str) -> Response:
        require_id("api_key_id", api_key_id)
        path = build_path(GLOBAL_API_KEYS_PATH + "/%s", api_key_id)
        _, response = await self._send("DELETE", path)
        return response


class GlobalAPIKeyWhitelistsServiceOp(Service, GlobalAPIKeyWhitelistsService):
    """Addresses allowed to call the API with global keys."""

    async def list(self, options: ListOptions | None = None) -> tuple[GlobalWhitelistAPIKeys, Response]:
        path = set_query_params(GLOBAL_WHITELIST_PATH, options)
        return await self._send("GET", path, target=GlobalWhitelistAPIKeys)

    async def get(self, entry_id: str) -> tuple[GlobalWhitelistAPIKey, Response]:
        require_id("entry_id", entry_id)
        path = build_path(GLOBAL_WHITELIST_PATH + "/%s", entry_id)
        return await self._send("GET", path, target=GlobalWhitelistAPIKey)

    async def create(self, entry: WhitelistAPIKeysReq) -> tuple[GlobalWhitelistAPIKey, Response]:
        require_body("entry", entry)
        return await self._send("POST", GLOBAL_WHITELIST_PATH, body=entry, target=GlobalWhitelistAPIKey)

    async def delete(self, entry_id: str) -> Response:
        require_id("entry_id", entry_id)
        path = build_path(GLOBAL_WHITELIST_PATH + "/%s", entry_id)
        _, response = await self._send("DELETE", path)
        return response
