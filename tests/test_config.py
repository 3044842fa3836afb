"""Settings, httpx client construction and the `Client` facade."""

from __future__ import annotations

import sys
from pathlib import Path

import httpx
import pytest

from opsmngr import Client, ClientSettings
from opsmngr.adapters.http_client import build_async_client, build_verify
from opsmngr.core.config import (
    CLOUD_URL,
    _parse_env_lines,
    get_user_config_dir,
    get_user_env_file,
    write_user_env_vars,
)
from opsmngr.core.interfaces.services import (
    AgentAPIKeysService,
    AgentsService,
    AlertConfigurationsService,
    DaemonConfigService,
    EventsService,
    GlobalAPIKeysService,
    GlobalAPIKeyWhitelistsService,
    LiveMigrationService,
    OrganizationAPIKeysService,
    ProjectAPIKeysService,
    ProjectJobConfigService,
    SnapshotScheduleService,
    StoreConfigService,
)
from tests.conftest import Recorder

pytestmark = pytest.mark.unit


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    for name in (
        "OPSMNGR_BASE_URL",
        "OPSMNGR_PUBLIC_KEY",
        "OPSMNGR_PRIVATE_KEY",
        "OPSMNGR_SKIP_VERIFY",
        "OPSMNGR_CA_CERT_PATH",
        "OPSMNGR_HTTP_TIMEOUT_SECONDS",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_settings_defaults(clean_env: Path) -> None:
    settings = ClientSettings(_env_file=None)

    assert settings.base_url == CLOUD_URL
    assert settings.http_timeout_seconds == 30
    assert not settings.has_credentials
    assert settings.user_agent.startswith("opsmngr-python/")


def test_settings_from_environment(clean_env: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("OPSMNGR_BASE_URL", "https://om.example.com:8443/")
    monkeypatch.setenv("OPSMNGR_PUBLIC_KEY", "pub")
    monkeypatch.setenv("OPSMNGR_PRIVATE_KEY", "priv")
    monkeypatch.setenv("OPSMNGR_SKIP_VERIFY", "true")

    settings = ClientSettings(_env_file=None)

    assert settings.base_url == "https://om.example.com:8443/"
    assert settings.has_credentials
    assert build_verify(settings) is False


def test_write_user_env_vars_merges(tmp_path: Path) -> None:
    env_path = tmp_path / "cfg" / ".env"
    write_user_env_vars({"OPSMNGR_PUBLIC_KEY": "old", "OPSMNGR_BASE_URL": "https://a/"}, env_path=env_path)
    write_user_env_vars({"OPSMNGR_PUBLIC_KEY": "new", "OPSMNGR_PRIVATE_KEY": None}, env_path=env_path)

    lines = env_path.read_text(encoding="utf-8").splitlines()

    assert lines[0].startswith("#")
    assert lines[1:] == ["OPSMNGR_BASE_URL=https://a/", "OPSMNGR_PUBLIC_KEY=new"]


def test_parse_env_lines_skips_comments_and_malformed_lines() -> None:
    text = "\n".join(
        [
            "# opsmngr",
            "",
            "OPSMNGR_PUBLIC_KEY = pub ",
            "OPSMNGR_PRIVATE_KEY=\"se=cret\"",
            "OPSMNGR_BASE_URL='https://om.example.com/'",
            "not a pair",
            "=orphan",
        ]
    )

    assert _parse_env_lines(text) == {
        "OPSMNGR_PUBLIC_KEY": "pub",
        "OPSMNGR_PRIVATE_KEY": "se=cret",
        "OPSMNGR_BASE_URL": "https://om.example.com/",
    }


@pytest.mark.skipif(sys.platform != "linux", reason="XDG layout")
def test_user_config_dir_follows_xdg(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    assert get_user_config_dir() == tmp_path / "opsmngr"
    assert get_user_env_file() == tmp_path / "opsmngr" / ".env"

    monkeypatch.delenv("XDG_CONFIG_HOME")
    assert get_user_config_dir() == Path.home() / ".config" / "opsmngr"


async def test_build_async_client_applies_settings(clean_env: Path) -> None:
    settings = ClientSettings(
        _env_file=None,
        base_url="https://om.example.com:8443/",
        public_key="pub",
        private_key="priv",
        http_timeout_seconds=5,
    )

    http_client = build_async_client(settings)
    try:
        assert str(http_client.base_url) == "https://om.example.com:8443/"
        assert isinstance(http_client.auth, httpx.DigestAuth)
        assert http_client.timeout.read == 5
        assert http_client.headers["Accept"] == "application/json"
        assert http_client.headers["User-Agent"] == settings.user_agent
    finally:
        await http_client.aclose()


async def test_client_from_settings(clean_env: Path) -> None:
    async with Client.from_settings(_env_file=None, base_url="https://om.example.com/") as client:
        assert str(client.base_url) == "https://om.example.com/"
        assert client.settings is not None


async def test_client_services_implement_their_protocols(client: Client) -> None:
    expected = {
        "agents": AgentsService,
        "agent_api_keys": AgentAPIKeysService,
        "alert_configurations": AlertConfigurationsService,
        "events": EventsService,
        "organization_api_keys": OrganizationAPIKeysService,
        "project_api_keys": ProjectAPIKeysService,
        "global_api_keys": GlobalAPIKeysService,
        "global_api_key_whitelists": GlobalAPIKeyWhitelistsService,
        "blockstore_config": StoreConfigService,
        "s3_blockstore_config": StoreConfigService,
        "file_system_store_config": StoreConfigService,
        "oplog_store_config": StoreConfigService,
        "sync_store_config": StoreConfigService,
        "daemon_config": DaemonConfigService,
        "project_job_config": ProjectJobConfigService,
        "snapshot_schedule": SnapshotScheduleService,
        "live_migration": LiveMigrationService,
    }

    for attr, protocol in expected.items():
        assert isinstance(getattr(client, attr), protocol), attr


async def test_services_share_one_transport(client: Client) -> None:
    assert client.agents._client is client.transport
    assert client.live_migration._client is client.transport


async def test_client_level_completion_callback(client_factory, recorder: Recorder) -> None:
    seen: list[str] = []
    recorder.reply(200, {"status": "SYNCED"})

    async with client_factory() as client:
        client.on_request_completed(lambda request, response: seen.append(request.url.path))
        await client.live_migration.connection_status("o1")

    assert seen == ["/api/public/v1.0/orgs/o1/liveExport/migrationLink/status"]
