"""Organization and project events.

See: https://docs.opsmanager.mongodb.com/current/reference/api/events/
"""

from __future__ import annotations

from opsmngr.adapters.services.base import Service
from opsmngr.core.domain.common import EventListOptions
from opsmngr.core.domain.events import Event, Events
from opsmngr.core.domain.response import Response
from opsmngr.core.interfaces.services import EventsService
from opsmngr.core.paths import API_PUBLIC_V1_PATH, build_path, set_query_params
from opsmngr.core.validation import require_id

PROJECT_EVENTS_PATH = API_PUBLIC_V1_PATH + "groups/%s/events"
ORGANIZATION_EVENTS_PATH = API_PUBLIC_V1_PATH + "orgs/%s/events"


class EventsServiceOp(Service, EventsService):
    async def list_organization_events(
        self, org_id: str, options: EventListOptions | None = None
    ) -> tuple[Events, Response]:
        require_id("org_id", org_id)
        path = set_query_params(build_path(ORGANIZATION_EVENTS_PATH, org_id), options)
        return await self._send("GET", path, target=Events)

    async def get_organization_event(self, org_id: str, event_id: str) -> tuple[Event, Response]:
        require_id("org_id", org_id)
        require_id("event_id", event_id)
        path = build_path(ORGANIZATION_EVENTS_PATH + "/%s", org_id, event_id)
        return await self._send("GET", path, target=Event)

    async def list_project_events(
        self, group_id: str, options: EventListOptions | None = None
    ) -> tuple[Events, Response]:
        require_id("group_id", group_id)
        path = set_query_params(build_path(PROJECT_EVENTS_PATH, group_id), options)
        return await self._send("GET", path, target=Events)

    async def get_project_event(self, group_id: str, event_id: str) -> tuple[Event, Response]:
        require_id("group_id", group_id)
        require_id("event_id", event_id)
        path = build_path(PROJECT_EVENTS_PATH + "/%s", group_id, event_id)
        return await self._send("GET", path, target=Event)
