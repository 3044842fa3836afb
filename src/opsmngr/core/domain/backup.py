"""Backup administration documents.

Store documents share one family of fields, mirrored here by inheritance:

    AdminBackupConfig
    ├── BackupStore            (blockstore, oplog store, sync store)
    │   ├── S3Blockstore
    │   └── FileSystemStoreConfiguration
    ├── Daemon
    └── ProjectJob

Inherited fields are flattened on the wire. `Blockstore` is kept as an alias
name of `BackupStore`; new code should use `BackupStore`.
"""

from __future__ import annotations

from pydantic import Field

from opsmngr.core.domain.common import OpsManagerModel, Page


class AdminBackupConfig(OpsManagerModel):
    id: str | None = None
    uri: str | None = None
    write_concern: str | None = None
    labels: list[str] | None = None
    ssl: bool | None = None
    assignment_enabled: bool | None = None
    encrypted_credentials: bool | None = None
    used_size: int | None = None


class BackupStore(AdminBackupConfig):
    load_factor: int | None = None
    max_capacity_gb: int | None = Field(default=None, alias="maxCapacityGB")
    provisioned: bool | None = None
    sync_source: str | None = None
    username: str | None = None


# Deprecated alias name.
Blockstore = BackupStore


class BackupStores(Page[BackupStore]):
    pass


class S3Blockstore(BackupStore):
    aws_access_key: str | None = None
    aws_secret_key: str | None = None
    s3_auth_method: str | None = Field(default=None, description="KEYS or IAM_ROLE.")
    s3_bucket_endpoint: str | None = None
    s3_bucket_name: str | None = None
    s3_max_connections: int | None = None
    disable_proxy_s3: bool | None = None
    accepted_tos: bool | None = None
    sse_enabled: bool | None = None
    path_style_access_enabled: bool | None = None


class S3Blockstores(Page[S3Blockstore]):
    pass


class FileSystemStoreConfiguration(BackupStore):
    mmapv1_compression_setting: str | None = None
    store_path: str | None = None
    wt_compression_setting: str | None = None


class FileSystemStoreConfigurations(Page[FileSystemStoreConfiguration]):
    pass


class Machine(OpsManagerModel):
    machine: str | None = None
    head_root_directory: str | None = None


class Daemon(AdminBackupConfig):
    backup_jobs_enabled: bool = False
    configured: bool = False
    garbage_collection_enabled: bool = False
    resource_usage_enabled: bool = False
    restore_queryable_jobs_enabled: bool = False
    head_disk_type: str | None = None
    num_workers: int | None = None
    machine: Machine | None = None


class Daemons(Page[Daemon]):
    pass


class StoreFilter(OpsManagerModel):
    id: str | None = None
    type: str | None = None


class ProjectJob(AdminBackupConfig):
    kmip_client_cert_password: str | None = None
    kmip_client_cert_path: str | None = None
    label_filter: list[str] | None = None
    sync_store_filter: list[str] | None = None
    daemon_filter: list[Machine] | None = None
    oplog_store_filter: list[StoreFilter] | None = None
    snapshot_store_filter: list[StoreFilter] | None = None


class ProjectJobs(Page[ProjectJob]):
    pass
