"""Alert configurations of a project.

See: https://docs.opsmanager.mongodb.com/current/reference/api/alert-configurations/
"""

from __future__ import annotations

from opsmngr.adapters.services.base import Service
from opsmngr.core.domain.alerts import AlertConfiguration, AlertConfigurations, Alerts
from opsmngr.core.domain.common import ListOptions
from opsmngr.core.domain.response import Response
from opsmngr.core.interfaces.services import AlertConfigurationsService
from opsmngr.core.paths import API_PUBLIC_V1_PATH, build_path, set_query_params
from opsmngr.core.validation import require_body, require_id

ALERT_CONFIGS_PATH = API_PUBLIC_V1_PATH + "groups/%s/alertConfigs"
ALERT_CONFIG_PATH = ALERT_CONFIGS_PATH + "/%s"
MATCHER_FIELD_NAMES_PATH = API_PUBLIC_V1_PATH + "alertConfigs/matchers/fieldNames"


class AlertConfigurationsServiceOp(Service, AlertConfigurationsService):
    async def list(
        self, group_id: str, options: ListOptions | None = None
    ) -> tuple[AlertConfigurations, Response]:
        require_id("group_id", group_id)
        path = set_query_params(build_path(ALERT_CONFIGS_PATH, group_id), options)
        return await self._send("GET", path, target=AlertConfigurations)

    async def get(self, group_id: str, alert_config_id: str) -> tuple[AlertConfiguration, Response]:
        require_id("group_id", group_id)
        require_id("alert_config_id", alert_config_id)
        path = build_path(ALERT_CONFIG_PATH, group_id, alert_config_id)
        return await self._send("GET", path, target=AlertConfiguration)

    async def create(
        self, group_id: str, alert_config: AlertConfiguration
    ) -> tuple[AlertConfiguration, Response]:
        require_id("group_id", group_id)
        require_body("alert_config", alert_config)
        path = build_path(ALERT_CONFIGS_PATH, group_id)
        return await self._send("POST", path, body=alert_config, target=AlertConfiguration)

    async def update(
        self, group_id: str, alert_config_id: str, alert_config: AlertConfiguration
    ) -> tuple[AlertConfiguration, Response]:
        """Replace the whole configuration (PUT)."""

        require_id("group_id", group_id)
        require_id("alert_config_id", alert_config_id)
        require_body("alert_config", alert_config)
        path = build_path(ALERT_CONFIG_PATH, group_id, alert_config_id)
        return await self._send("PUT", path, body=alert_config, target=AlertConfiguration)

    async def enable(
        self, group_id: str, alert_config_id: str, enabled: bool
    ) -> tuple[AlertConfiguration, Response]:
        """Enable or disable a configuration; only `enabled` is sent (PATCH)."""

        require_id("group_id", group_id)
        require_id("alert_config_id", alert_config_id)
        require_body("enabled", enabled)
        path = build_path(ALERT_CONFIG_PATH, group_id, alert_config_id)
        return await self._send("PATCH", path, body=AlertConfiguration(enabled=enabled), target=AlertConfiguration)

    async def delete(self, group_id: str, alert_config_id: str) -> Response:
        require_id("group_id", group_id)
        require_id("alert_config_id", alert_config_id)
        path = build_path(ALERT_CONFIG_PATH, group_id, alert_config_id)
        _, response = await self._send("DELETE", path)
        return response

    async def list_open_alerts(self, group_id: str, alert_config_id: str) -> tuple[Alerts, Response]:
        """Open alerts raised by one configuration."""

        require_id("group_id", group_id)
        require_id("alert_config_id", alert_config_id)
        path = build_path(ALERT_CONFIG_PATH, group_id, alert_config_id, suffix="alerts")
        return await self._send("GET", path, target=Alerts)

    async def list_matcher_fields(self) -> tuple[list[str], Response]:
        """Field names accepted by `matchers[].fieldName`."""

        root, response = await self._send("GET", MATCHER_FIELD_NAMES_PATH, target=list[str])
        return root or [], response
