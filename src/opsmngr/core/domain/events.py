from __future__ import annotations

from typing import Any

from pydantic import Field, model_validator

from opsmngr.core.domain.common import Link, OpsManagerModel, Page


class CurrentValue(OpsManagerModel):
    number: float | None = None
    units: str | None = None


class Event(OpsManagerModel):
    """One audit/activity event of a project or organization.

    The document shape varies with `event_type_name`; the most common keys
    are typed, anything else is still reachable through `raw`.
    """

    id: str | None = None
    created: str | None = None
    event_type_name: str | None = None
    group_id: str | None = None
    org_id: str | None = None
    alert_id: str | None = None
    alert_config_id: str | None = None
    api_key_id: str | None = None
    collection: str | None = None
    database: str | None = None
    hostname: str | None = None
    port: int | None = None
    metric_name: str | None = None
    current_value: CurrentValue | None = None
    op_type: str | None = None
    public_key: str | None = None
    remote_address: str | None = None
    replica_set_name: str | None = None
    shard_name: str | None = None
    target_public_key: str | None = None
    target_username: str | None = None
    team_id: str | None = None
    user_id: str | None = None
    username: str | None = None
    whitelist_entry: str | None = None
    is_global_admin: bool | None = None
    links: list[Link] = Field(default_factory=list)
    raw: dict[str, Any] | None = None

    @model_validator(mode="before")
    @classmethod
    def _keep_raw(cls, data: Any) -> Any:
        if isinstance(data, dict) and "raw" not in data:
            return {**data, "raw": dict(data)}
        return data


class Events(Page[Event]):
    pass
