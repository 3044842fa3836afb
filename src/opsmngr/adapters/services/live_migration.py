"""Link between an Ops Manager organization and an Atlas organization, used
by live migrations.

See: https://docs.opsmanager.mongodb.com/current/reference/api/live-migration/
"""

from __future__ import annotations

import warnings

from opsmngr.adapters.services.base import Service
from opsmngr.core.domain.live_migration import ConnectionStatus, LinkToken
from opsmngr.core.domain.response import Response
from opsmngr.core.interfaces.services import LiveMigrationService
from opsmngr.core.paths import API_PUBLIC_V1_PATH, build_path
from opsmngr.core.validation import require_body, require_id

LIVE_MIGRATION_PATH = API_PUBLIC_V1_PATH + "orgs/%s/liveExport/migrationLink"


def _deprecated(old: str, new: str) -> None:
    warnings.warn(
        f"LiveMigrationServiceOp.{old} is deprecated, use {new} instead",
        DeprecationWarning,
        stacklevel=3,
    )


class LiveMigrationServiceOp(Service, LiveMigrationService):
    async def connect_organizations(
        self, org_id: str, link_token: LinkToken
    ) -> tuple[ConnectionStatus, Response]:
        require_id("org_id", org_id)
        require_body("link_token", link_token)
        path = build_path(LIVE_MIGRATION_PATH, org_id)
        return await self._send("POST", path, body=link_token, target=ConnectionStatus)

    async def connection_status(self, org_id: str) -> tuple[ConnectionStatus, Response]:
        require_id("org_id", org_id)
        path = build_path(LIVE_MIGRATION_PATH, org_id, suffix="status")
        return await self._send("GET", path, target=ConnectionStatus)

    async def delete_connection(self, org_id: str) -> Response:
        require_id("org_id", org_id)
        path = build_path(LIVE_MIGRATION_PATH, org_id)
        _, response = await self._send("DELETE", path)
        return response

    # Older names.

    async def create(self, org_id: str, link_token: LinkToken) -> tuple[ConnectionStatus, Response]:
        _deprecated("create", "connect_organizations")
        return await self.connect_organizations(org_id, link_token)

    async def get(self, org_id: str) -> tuple[ConnectionStatus, Response]:
        _deprecated("get", "connection_status")
        return await self.connection_status(org_id)

    async def delete(self, org_id: str) -> Response:
        _deprecated("delete", "delete_connection")
        return await self.delete_connection(org_id)
