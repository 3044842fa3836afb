"""Per-project backup job configuration (admin)."""

from __future__ import annotations

from opsmngr.adapters.services.backup_stores import BACKUP_ADMINISTRATOR_PATH
from opsmngr.adapters.services.base import Service
from opsmngr.core.domain.backup import ProjectJob, ProjectJobs
from opsmngr.core.domain.common import ListOptions
from opsmngr.core.domain.response import Response
from opsmngr.core.interfaces.services import ProjectJobConfigService
from opsmngr.core.paths import build_path, set_query_params
from opsmngr.core.validation import require_body, require_id

PROJECT_JOB_PATH = BACKUP_ADMINISTRATOR_PATH + "/groups"


class ProjectJobConfigServiceOp(Service, ProjectJobConfigService):
    async def list(self, options: ListOptions | None = None) -> tuple[ProjectJobs, Response]:
        path = set_query_params(PROJECT_JOB_PATH, options)
        return await self._send("GET", path, target=ProjectJobs)

    async def get(self, project_job_id: str) -> tuple[ProjectJob, Response]:
        require_id("project_job_id", project_job_id)
        path = build_path(PROJECT_JOB_PATH + "/%s", project_job_id)
        return await self._send("GET", path, target=ProjectJob)

    async def update(self, project_job_id: str, project_job: ProjectJob) -> tuple[ProjectJob, Response]:
        require_id("project_job_id", project_job_id)
        require_body("project_job", project_job)
        path = build_path(PROJECT_JOB_PATH + "/%s", project_job_id)
        return await self._send("PUT", path, body=project_job, target=ProjectJob)
