"""Snapshot schedule of a cluster.

See: https://docs.opsmanager.mongodb.com/current/reference/api/backup/snapshot-schedule/
"""

from __future__ import annotations

from opsmngr.adapters.services.base import Service
from opsmngr.core.domain.response import Response
from opsmngr.core.domain.snapshots import SnapshotSchedule
from opsmngr.core.interfaces.services import SnapshotScheduleService
from opsmngr.core.paths import API_PUBLIC_V1_PATH, build_path
from opsmngr.core.validation import require_body, require_id

SNAPSHOT_SCHEDULE_PATH = API_PUBLIC_V1_PATH + "groups/%s/backupConfigs/%s/snapshotSchedule"


class SnapshotScheduleServiceOp(Service, SnapshotScheduleService):
    async def get(self, group_id: str, cluster_id: str) -> tuple[SnapshotSchedule, Response]:
        require_id("group_id", group_id)
        require_id("cluster_id", cluster_id)
        path = build_path(SNAPSHOT_SCHEDULE_PATH, group_id, cluster_id)
        return await self._send("GET", path, target=SnapshotSchedule)

    async def update(
        self, group_id: str, cluster_id: str, schedule: SnapshotSchedule
    ) -> tuple[SnapshotSchedule, Response]:
        """Partial update: fields left as `None` keep their server value."""

        require_id("group_id", group_id)
        require_id("cluster_id", cluster_id)
        require_body("schedule", schedule)
        path = build_path(SNAPSHOT_SCHEDULE_PATH, group_id, cluster_id)
        return await self._send("PATCH", path, body=schedule, target=SnapshotSchedule)
