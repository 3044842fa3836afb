"""Concrete resource services, one class per API resource."""

from opsmngr.adapters.services.agents import AgentAPIKeysServiceOp, AgentsServiceOp
from opsmngr.adapters.services.alert_configurations import AlertConfigurationsServiceOp
from opsmngr.adapters.services.api_keys import (
    GlobalAPIKeysServiceOp,
    GlobalAPIKeyWhitelistsServiceOp,
    OrganizationAPIKeysServiceOp,
    ProjectAPIKeysServiceOp,
)
from opsmngr.adapters.services.backup_stores import (
    BlockstoreConfigServiceOp,
    FileSystemStoreConfigServiceOp,
    OplogStoreConfigServiceOp,
    S3BlockstoreConfigServiceOp,
    StoreConfigServiceOp,
    SyncStoreConfigServiceOp,
)
from opsmngr.adapters.services.daemon_config import DaemonConfigServiceOp
from opsmngr.adapters.services.events import EventsServiceOp
from opsmngr.adapters.services.live_migration import LiveMigrationServiceOp
from opsmngr.adapters.services.project_job_config import ProjectJobConfigServiceOp
from opsmngr.adapters.services.snapshot_schedule import SnapshotScheduleServiceOp

__all__ = [
    "AgentAPIKeysServiceOp",
    "AgentsServiceOp",
    "AlertConfigurationsServiceOp",
    "BlockstoreConfigServiceOp",
    "DaemonConfigServiceOp",
    "EventsServiceOp",
    "FileSystemStoreConfigServiceOp",
    "GlobalAPIKeysServiceOp",
    "GlobalAPIKeyWhitelistsServiceOp",
    "LiveMigrationServiceOp",
    "OplogStoreConfigServiceOp",
    "OrganizationAPIKeysServiceOp",
    "ProjectAPIKeysServiceOp",
    "ProjectJobConfigServiceOp",
    "S3BlockstoreConfigServiceOp",
    "SnapshotScheduleServiceOp",
    "StoreConfigServiceOp",
    "SyncStoreConfigServiceOp",
]
