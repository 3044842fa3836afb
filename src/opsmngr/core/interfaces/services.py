"""Contracts of the resource services.

Each concrete service in `opsmngr.adapters.services` subclasses its
protocol explicitly, so a missing or renamed method is caught when the
class is defined and checked (`isinstance`) in the test suite.

Conventions:
- every method is a coroutine and validates identifiers before any I/O;
- results come back as `(result, Response)`; deletes return `Response`.
"""

from __future__ import annotations

from typing import Generic, Protocol, TypeVar, runtime_checkable

from opsmngr.core.domain.agents import (
    AgentAPIKey,
    AgentAPIKeysRequest,
    Agents,
    AgentVersions,
    SoftwareVersions,
)
from opsmngr.core.domain.alerts import AlertConfiguration, AlertConfigurations, Alerts
from opsmngr.core.domain.api_keys import (
    APIKey,
    APIKeyInput,
    APIKeys,
    AssignAPIKey,
    GlobalWhitelistAPIKey,
    GlobalWhitelistAPIKeys,
    WhitelistAPIKeysReq,
)
from opsmngr.core.domain.backup import Daemon, Daemons, ProjectJob, ProjectJobs
from opsmngr.core.domain.common import EventListOptions, ListOptions
from opsmngr.core.domain.events import Event, Events
from opsmngr.core.domain.live_migration import ConnectionStatus, LinkToken
from opsmngr.core.domain.response import Response
from opsmngr.core.domain.snapshots import SnapshotSchedule

StoreT = TypeVar("StoreT")
PageT = TypeVar("PageT")


@runtime_checkable
class AgentsService(Protocol):
    async def list_agent_links(self, group_id: str) -> tuple[Agents, Response]: ...

    async def list_agents_by_type(
        self, group_id: str, agent_type: str, options: ListOptions | None = None
    ) -> tuple[Agents, Response]: ...

    async def project_versions(self, group_id: str) -> tuple[AgentVersions, Response]: ...

    async def global_versions(self) -> tuple[SoftwareVersions, Response]: ...


@runtime_checkable
class AgentAPIKeysService(Protocol):
    async def list(self, group_id: str) -> tuple[list[AgentAPIKey], Response]: ...

    async def create(self, group_id: str, request: AgentAPIKeysRequest) -> tuple[AgentAPIKey, Response]: ...

    async def delete(self, group_id: str, agent_api_key_id: str) -> Response: ...


@runtime_checkable
class AlertConfigurationsService(Protocol):
    async def list(
        self, group_id: str, options: ListOptions | None = None
    ) -> tuple[AlertConfigurations, Response]: ...

    async def get(self, group_id: str, alert_config_id: str) -> tuple[AlertConfiguration, Response]: ...

    async def create(
        self, group_id: str, alert_config: AlertConfiguration
    ) -> tuple[AlertConfiguration, Response]: ...

    async def update(
        self, group_id: str, alert_config_id: str, alert_config: AlertConfiguration
    ) -> tuple[AlertConfiguration, Response]: ...

    async def enable(
        self, group_id: str, alert_config_id: str, enabled: bool
    ) -> tuple[AlertConfiguration, Response]: ...

    async def delete(self, group_id: str, alert_config_id: str) -> Response: ...

    async def list_open_alerts(self, group_id: str, alert_config_id: str) -> tuple[Alerts, Response]: ...

    async def list_matcher_fields(self) -> tuple[list[str], Response]: ...


@runtime_checkable
class EventsService(Protocol):
    async def list_organization_events(
        self, org_id: str, options: EventListOptions | None = None
    ) -> tuple[Events, Response]: ...

    async def get_organization_event(self, org_id: str, event_id: str) -> tuple[Event, Response]: ...

    async def list_project_events(
        self, group_id: str, options: EventListOptions | None = None
    ) -> tuple[Events, Response]: ...

    async def get_project_event(self, group_id: str, event_id: str) -> tuple[Event, Response]: ...


@runtime_checkable
class OrganizationAPIKeysService(Protocol):
    async def list(self, org_id: str, options: ListOptions | None = None) -> tuple[APIKeys, Response]: ...

    async def get(self, org_id: str, api_key_id: str) -> tuple[APIKey, Response]: ...

    async def create(self, org_id: str, api_key: APIKeyInput) -> tuple[APIKey, Response]: ...

    async def update(self, org_id: str, api_key_id: str, api_key: APIKeyInput) -> tuple[APIKey, Response]: ...

    async def delete(self, org_id: str, api_key_id: str) -> Response: ...


@runtime_checkable
class ProjectAPIKeysService(Protocol):
    async def list(self, group_id: str, options: ListOptions | None = None) -> tuple[APIKeys, Response]: ...

    async def create(self, group_id: str, api_key: APIKeyInput) -> tuple[APIKey, Response]: ...

    async def assign(self, group_id: str, api_key_id: str, assignment: AssignAPIKey) -> Response: ...

    async def unassign(self, group_id: str, api_key_id: str) -> Response: ...


@runtime_checkable
class GlobalAPIKeysService(Protocol):
    async def list(self, options: ListOptions | None = None) -> tuple[APIKeys, Response]: ...

    async def get(self, api_key_id: str) -> tuple[APIKey, Response]: ...

    async def create(self, api_key: APIKeyInput) -> tuple[APIKey, Response]: ...

    async def update(self, api_key_id: str, api_key: APIKeyInput) -> tuple[APIKey, Response]: ...

    async def delete(self, api_key_id: str) -> Response: ...


@runtime_checkable
class GlobalAPIKeyWhitelistsService(Protocol):
    async def list(self, options: ListOptions | None = None) -> tuple[GlobalWhitelistAPIKeys, Response]: ...

    async def get(self, entry_id: str) -> tuple[GlobalWhitelistAPIKey, Response]: ...

    async def create(self, entry: WhitelistAPIKeysReq) -> tuple[GlobalWhitelistAPIKey, Response]: ...

    async def delete(self, entry_id: str) -> Response: ...


@runtime_checkable
class StoreConfigService(Protocol, Generic[StoreT, PageT]):
    """CRUD over one family of backup store configurations."""

    async def list(self, options: ListOptions | None = None) -> tuple[PageT, Response]: ...

    async def get(self, store_id: str) -> tuple[StoreT, Response]: ...

    async def create(self, store: StoreT) -> tuple[StoreT, Response]: ...

    async def update(self, store_id: str, store: StoreT) -> tuple[StoreT, Response]: ...

    async def delete(self, store_id: str) -> Response: ...


@runtime_checkable
class DaemonConfigService(Protocol):
    async def list(self, options: ListOptions | None = None) -> tuple[Daemons, Response]: ...

    async def get(self, daemon_id: str) -> tuple[Daemon, Response]: ...

    async def update(self, daemon_id: str, daemon: Daemon) -> tuple[Daemon, Response]: ...

    async def delete(self, daemon_id: str) -> Response: ...


@runtime_checkable
class ProjectJobConfigService(Protocol):
    async def list(self, options: ListOptions | None = None) -> tuple[ProjectJobs, Response]: ...

    async def get(self, project_job_id: str) -> tuple[ProjectJob, Response]: ...

    async def update(self, project_job_id: str, project_job: ProjectJob) -> tuple[ProjectJob, Response]: ...


@runtime_checkable
class SnapshotScheduleService(Protocol):
    async def get(self, group_id: str, cluster_id: str) -> tuple[SnapshotSchedule, Response]: ...

    async def update(
        self, group_id: str, cluster_id: str, schedule: SnapshotSchedule
    ) -> tuple[SnapshotSchedule, Response]: ...


@runtime_checkable
class LiveMigrationService(Protocol):
    async def connect_organizations(
        self, org_id: str, link_token: LinkToken
    ) -> tuple[ConnectionStatus, Response]: ...

    async def connection_status(self, org_id: str) -> tuple[ConnectionStatus, Response]: ...

    async def delete_connection(self, org_id: str) -> Response: ...
