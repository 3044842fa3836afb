"""`Client` facade: one transport, one attribute per resource service.

Usage:

    async with Client.from_settings(base_url="https://opsmanager.example.com:8443/") as client:
        versions, _ = await client.agents.global_versions()
"""

from __future__ import annotations

from typing import Any

import httpx

from opsmngr.adapters.http_client import build_async_client
from opsmngr.adapters.services import (
    AgentAPIKeysServiceOp,
    AgentsServiceOp,
    AlertConfigurationsServiceOp,
    BlockstoreConfigServiceOp,
    DaemonConfigServiceOp,
    EventsServiceOp,
    FileSystemStoreConfigServiceOp,
    GlobalAPIKeysServiceOp,
    GlobalAPIKeyWhitelistsServiceOp,
    LiveMigrationServiceOp,
    OplogStoreConfigServiceOp,
    OrganizationAPIKeysServiceOp,
    ProjectAPIKeysServiceOp,
    ProjectJobConfigServiceOp,
    S3BlockstoreConfigServiceOp,
    SnapshotScheduleServiceOp,
    SyncStoreConfigServiceOp,
)
from opsmngr.adapters.transport import RequestCompletionCallback, Transport
from opsmngr.core.config import ClientSettings


class Client:
    """Entry point of the library.

    When `http_client` is given it is adopted as is (base URL, auth and TLS
    included) and closed with the client; otherwise one is built from
    `settings` (or from the environment).
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient | None = None,
        *,
        settings: ClientSettings | None = None,
        on_request_completed: RequestCompletionCallback | None = None,
    ) -> None:
        if http_client is None:
            settings = settings or ClientSettings()
            http_client = build_async_client(settings)

        self.settings = settings
        self.transport = Transport(
            http_client,
            user_agent=settings.user_agent if settings is not None else None,
            on_request_completed=on_request_completed,
        )

        self.agents = AgentsServiceOp(self.transport)
        self.agent_api_keys = AgentAPIKeysServiceOp(self.transport)
        self.alert_configurations = AlertConfigurationsServiceOp(self.transport)
        self.events = EventsServiceOp(self.transport)
        self.organization_api_keys = OrganizationAPIKeysServiceOp(self.transport)
        self.project_api_keys = ProjectAPIKeysServiceOp(self.transport)
        self.global_api_keys = GlobalAPIKeysServiceOp(self.transport)
        self.global_api_key_whitelists = GlobalAPIKeyWhitelistsServiceOp(self.transport)
        self.blockstore_config = BlockstoreConfigServiceOp(self.transport)
        self.s3_blockstore_config = S3BlockstoreConfigServiceOp(self.transport)
        self.file_system_store_config = FileSystemStoreConfigServiceOp(self.transport)
        self.oplog_store_config = OplogStoreConfigServiceOp(self.transport)
        self.sync_store_config = SyncStoreConfigServiceOp(self.transport)
        self.daemon_config = DaemonConfigServiceOp(self.transport)
        self.project_job_config = ProjectJobConfigServiceOp(self.transport)
        self.snapshot_schedule = SnapshotScheduleServiceOp(self.transport)
        self.live_migration = LiveMigrationServiceOp(self.transport)

    @classmethod
    def from_settings(cls, **overrides: Any) -> Client:
        """Build a client from the environment, overriding selected settings."""

        return cls(settings=ClientSettings(**overrides))

    @property
    def base_url(self) -> httpx.URL:
        return self.transport.base_url

    def on_request_completed(self, callback: RequestCompletionCallback | None) -> None:
        self.transport.on_request_completed(callback)

    async def aclose(self) -> None:
        await self.transport.aclose()

    async def __aenter__(self) -> Client:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
