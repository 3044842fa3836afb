from __future__ import annotations

from pydantic import Field

from opsmngr.core.domain.common import Link, OpsManagerModel


class SnapshotSchedule(OpsManagerModel):
    """Snapshot creation and retention parameters of one cluster.

    Optional retention values are tri-state: `None` leaves the server value
    untouched on update, `0` is sent as-is.
    """

    cluster_id: str | None = None
    group_id: str | None = None
    reference_time_zone_offset: str | None = None
    daily_snapshot_retention_days: int | None = None
    cluster_checkpoint_interval_min: int | None = None
    links: list[Link] | None = None
    monthly_snapshot_retention_months: int | None = None
    point_in_time_window_hours: int | None = None
    reference_hour_of_day: int | None = Field(default=None, ge=0, le=23)
    reference_minute_of_hour: int | None = Field(default=None, ge=0, le=59)
    snapshot_interval_hours: int | None = None
    snapshot_retention_days: int | None = None
    weekly_snapshot_retention_weeks: int | None = None
