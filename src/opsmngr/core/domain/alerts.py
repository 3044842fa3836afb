"""Alert configurations and the alerts they open.

Every field of `AlertConfiguration` is optional so that a partial document
(e.g. only `enabled`) serializes to exactly the keys that were set.
"""

from __future__ import annotations

from pydantic import Field

from opsmngr.core.domain.common import Link, OpsManagerModel, Page
from opsmngr.core.domain.events import CurrentValue


class Matcher(OpsManagerModel):
    field_name: str | None = None
    operator: str | None = None
    value: str | None = None


class MetricThreshold(OpsManagerModel):
    metric_name: str | None = None
    operator: str | None = None
    threshold: float | None = None
    units: str | None = None
    mode: str | None = None


class Threshold(OpsManagerModel):
    operator: str | None = None
    units: str | None = None
    threshold: float | None = None


class Notification(OpsManagerModel):
    type_name: str | None = None
    interval_min: int | None = None
    delay_min: int | None = None
    email_address: str | None = None
    email_enabled: bool | None = None
    sms_enabled: bool | None = None
    username: str | None = None
    team_id: str | None = None
    roles: list[str] | None = None
    channel_name: str | None = None
    webhook_url: str | None = None


class AlertConfiguration(OpsManagerModel):
    id: str | None = None
    group_id: str | None = None
    event_type_name: str | None = None
    created: str | None = None
    updated: str | None = None
    enabled: bool | None = None
    matchers: list[Matcher] | None = None
    metric_threshold: MetricThreshold | None = None
    threshold: Threshold | None = None
    notifications: list[Notification] | None = None
    links: list[Link] | None = None


class AlertConfigurations(Page[AlertConfiguration]):
    pass


class Alert(OpsManagerModel):
    id: str | None = None
    group_id: str | None = None
    alert_config_id: str | None = None
    event_type_name: str | None = None
    created: str | None = None
    updated: str | None = None
    resolved: str | None = None
    status: str | None = Field(default=None, description="OPEN, TRACKING or CLOSED.")
    last_notified: str | None = None
    hostname_and_port: str | None = None
    metric_name: str | None = None
    current_value: CurrentValue | None = None
    replica_set_name: str | None = None
    cluster_name: str | None = None
    links: list[Link] = Field(default_factory=list)


class Alerts(Page[Alert]):
    pass
