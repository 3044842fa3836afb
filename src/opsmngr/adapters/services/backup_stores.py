"""Backup store administration (blockstores, S3, file system, oplog, sync).

Every store family exposes the same five calls over its own collection, so
one generic implementation is specialised by path and document type.
"""

from __future__ import annotations

from typing import ClassVar, TypeVar

from opsmngr.adapters.services.base import Service
from opsmngr.core.domain.backup import (
    BackupStore,
    BackupStores,
    FileSystemStoreConfiguration,
    FileSystemStoreConfigurations,
    S3Blockstore,
    S3Blockstores,
)
from opsmngr.core.domain.common import ListOptions, OpsManagerModel
from opsmngr.core.domain.response import Response
from opsmngr.core.interfaces.services import StoreConfigService
from opsmngr.core.paths import API_PUBLIC_V1_PATH, build_path, set_query_params
from opsmngr.core.validation import require_body, require_id

BACKUP_ADMINISTRATOR_PATH = API_PUBLIC_V1_PATH + "admin/backup"
BLOCKSTORE_PATH = BACKUP_ADMINISTRATOR_PATH + "/snapshot/mongoConfigs"
S3_BLOCKSTORE_PATH = BACKUP_ADMINISTRATOR_PATH + "/snapshot/s3Configs"
FILE_SYSTEM_STORE_PATH = BACKUP_ADMINISTRATOR_PATH + "/snapshot/fileSystemConfigs"
OPLOG_STORE_PATH = BACKUP_ADMINISTRATOR_PATH + "/oplog/mongoConfigs"
SYNC_STORE_PATH = BACKUP_ADMINISTRATOR_PATH + "/sync/mongoConfigs"

StoreT = TypeVar("StoreT", bound=OpsManagerModel)
PageT = TypeVar("PageT", bound=OpsManagerModel)


class StoreConfigServiceOp(Service, StoreConfigService[StoreT, PageT]):
    """CRUD over `base_path`; subclasses set the path and document types."""

    base_path: ClassVar[str]
    store_type: ClassVar[type[OpsManagerModel]]
    page_type: ClassVar[type[OpsManagerModel]]

    async def list(self, options: ListOptions | None = None) -> tuple[PageT, Response]:
        path = set_query_params(self.base_path, options)
        return await self._send("GET", path, target=self.page_type)

    async def get(self, store_id: str) -> tuple[StoreT, Response]:
        require_id("store_id", store_id)
        path = build_path(self.base_path + "/%s", store_id)
        return await self._send("GET", path, target=self.store_type)

    async def create(self, store: StoreT) -> tuple[StoreT, Response]:
        require_body("store", store)
        return await self._send("POST", self.base_path, body=store, target=self.store_type)

    async def update(self, store_id: str, store: StoreT) -> tuple[StoreT, Response]:
        require_id("store_id", store_id)
        require_body("store", store)
        path = build_path(self.base_path + "/%s", store_id)
        return await self._send("PUT", path, body=store, target=self.store_type)

    async def delete(self, store_id: str) -> Response:
        require_id("store_id", store_id)
        path = build_path(self.base_path + "/%s", store_id)
        _, response = await self._send("DELETE", path)
        return response


class BlockstoreConfigServiceOp(StoreConfigServiceOp[BackupStore, BackupStores]):
    """MongoDB-backed snapshot stores."""

    base_path = BLOCKSTORE_PATH
    store_type = BackupStore
    page_type = BackupStores


class S3BlockstoreConfigServiceOp(StoreConfigServiceOp[S3Blockstore, S3Blockstores]):
    base_path = S3_BLOCKSTORE_PATH
    store_type = S3Blockstore
    page_type = S3Blockstores


class FileSystemStoreConfigServiceOp(
    StoreConfigServiceOp[FileSystemStoreConfiguration, FileSystemStoreConfigurations]
):
    base_path = FILE_SYSTEM_STORE_PATH
    store_type = FileSystemStoreConfiguration
    page_type = FileSystemStoreConfigurations


class OplogStoreConfigServiceOp(StoreConfigServiceOp[BackupStore, BackupStores]):
    base_path = OPLOG_STORE_PATH
    store_type = BackupStore
    page_type = BackupStores


class SyncStoreConfigServiceOp(StoreConfigServiceOp[BackupStore, BackupStores]):
    base_path = SYNC_STORE_PATH
    store_type = BackupStore
    page_type = BackupStores
