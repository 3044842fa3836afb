"""Backup daemon configurations.

See: https://docs.opsmanager.mongodb.com/current/reference/api/admin/backup/backup-daemon-config/
"""

from __future__ import annotations

from opsmngr.adapters.services.backup_stores import BACKUP_ADMINISTRATOR_PATH
from opsmngr.adapters.services.base import Service
from opsmngr.core.domain.backup import Daemon, Daemons
from opsmngr.core.domain.common import ListOptions
from opsmngr.core.domain.response import Response
from opsmngr.core.interfaces.services import DaemonConfigService
from opsmngr.core.paths import build_path, set_query_params
from opsmngr.core.validation import require_body, require_id

DAEMON_PATH = BACKUP_ADMINISTRATOR_PATH + "/daemon/configs"


class DaemonConfigServiceOp(Service, DaemonConfigService):
    """Daemons register themselves; there is no create call."""

    async def list(self, options: ListOptions | None = None) -> tuple[Daemons, Response]:
        path = set_query_params(DAEMON_PATH, options)
        return await self._send("GET", path, target=Daemons)

    async def get(self, daemon_id: str) -> tuple[Daemon, Response]:
        require_id("daemon_id", daemon_id)
        path = build_path(DAEMON_PATH + "/%s", daemon_id)
        return await self._send("GET", path, target=Daemon)

    async def update(self, daemon_id: str, daemon: Daemon) -> tuple[Daemon, Response]:
        require_id("daemon_id", daemon_id)
        require_body("daemon", daemon)
        path = build_path(DAEMON_PATH + "/%s", daemon_id)
        return await self._send("PUT", path, body=daemon, target=Daemon)

    async def delete(self, daemon_id: str) -> Response:
        require_id("daemon_id", daemon_id)
        path = build_path(DAEMON_PATH + "/%s", daemon_id)
        _, response = await self._send("DELETE", path)
        return response
