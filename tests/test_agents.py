"""Agents and agent API keys."""

from __future__ import annotations

import pytest

from opsmngr import ArgumentError, Client, ListOptions
from opsmngr.core.domain.agents import AgentAPIKeysRequest
from tests.conftest import Recorder

pytestmark = pytest.mark.unit

PROJECT_ID = "5e66185d917b220fbd8bb4d1"
GROUP_URL = f"http://mms:9080/api/public/v1.0/groups/{PROJECT_ID}"


async def test_list_agent_links_keeps_links_in_order(client: Client, recorder: Recorder) -> None:
    links = [
        {"href": f"{GROUP_URL}/agents", "rel": "self"},
        {"href": GROUP_URL, "rel": "http://mms.mongodb.com/group"},
        {"href": f"{GROUP_URL}/agents/MONITORING", "rel": "http://mms.mongodb.com/monitoringAgents"},
        {"href": f"{GROUP_URL}/agents/BACKUP", "rel": "http://mms.mongodb.com/backupAgents"},
        {"href": f"{GROUP_URL}/agents/AUTOMATION", "rel": "http://mms.mongodb.com/automationAgents"},
    ]
    recorder.reply(200, {"links": links, "results": [], "totalCount": 0})

    agents, response = await client.agents.list_agent_links(PROJECT_ID)

    assert recorder.last.method == "GET"
    assert recorder.last.url.path == f"/api/public/v1.0/groups/{PROJECT_ID}/agents"
    assert agents.results == []
    assert agents.total_count == 0
    assert [link.rel for link in agents.links] == [link["rel"] for link in links]
    assert response.links == agents.links


async def test_list_agents_by_type(client: Client, recorder: Recorder) -> None:
    recorder.reply(
        200,
        {
            "links": [],
            "results": [
                {
                    "confCount": 59,
                    "hostname": "example",
                    "isManaged": True,
                    "lastConf": "2015-06-18T14:21:42Z",
                    "lastPing": "2015-06-18T14:21:42Z",
                    "pingCount": 6,
                    "stateName": "ACTIVE",
                    "typeName": "MONITORING",
                }
            ],
            "totalCount": 1,
        },
    )

    agents, _ = await client.agents.list_agents_by_type(
        PROJECT_ID, "MONITORING", ListOptions(page_num=2, items_per_page=10)
    )

    assert recorder.last.url.path == f"/api/public/v1.0/groups/{PROJECT_ID}/agents/MONITORING"
    assert recorder.last.url.params["pageNum"] == "2"
    assert recorder.last.url.params["itemsPerPage"] == "10"
    assert agents.total_count == 1
    agent = agents.results[0]
    assert agent.type_name == "MONITORING"
    assert agent.conf_count == 59
    assert agent.is_managed is True
    assert agent.tag is None


@pytest.mark.parametrize(
    ("group_id", "agent_type", "name"),
    [("", "MONITORING", "group_id"), (PROJECT_ID, "", "agent_type")],
)
async def test_list_agents_by_type_requires_ids(
    client: Client, recorder: Recorder, group_id: str, agent_type: str, name: str
) -> None:
    with pytest.raises(ArgumentError) as exc_info:
        await client.agents.list_agents_by_type(group_id, agent_type)

    assert exc_info.value.name == name
    assert recorder.calls == 0


async def test_project_versions(client: Client, recorder: Recorder) -> None:
    recorder.reply(
        200,
        {
            "count": 0,
            "entries": [],
            "isAnyAgentNotManaged": False,
            "isAnyAgentVersionDeprecated": False,
            "isAnyAgentVersionOld": False,
            "latestVersion": "10.14.0.6304",
            "links": [
                {"href": f"{GROUP_URL}/agents/current", "rel": "self"},
                {"href": GROUP_URL, "rel": "http://mms.mongodb.com/group"},
            ],
            "minimumAgentVersionDetected": "10.14.0.6304",
            "minimumVersion": "5.0.0.309",
        },
    )

    versions, response = await client.agents.project_versions(PROJECT_ID)

    assert recorder.last.url.path == f"/api/public/v1.0/groups/{PROJECT_ID}/agents/versions"
    assert versions.latest_version == "10.14.0.6304"
    assert versions.minimum_version == "5.0.0.309"
    assert versions.entries == []
    assert len(response.links) == 2


async def test_global_versions(client: Client, recorder: Recorder) -> None:
    recorder.reply(
        200,
        {
            "automationVersion": "10.14.0.6304",
            "automationMinimumVersion": "10.2.17.5964",
            "biConnectorVersion": "2.3.4",
            "biConnectorMinimumVersion": "2.3.1",
            "mongoDbToolsVersion": "100.0.1",
            "links": [{"href": "http://mms:9080/api/public/v1.0/softwareComponents/versions", "rel": "self"}],
        },
    )

    versions, _ = await client.agents.global_versions()

    assert recorder.last.url.path == "/api/public/v1.0/softwareComponents/versions"
    assert versions.automation_version == "10.14.0.6304"
    assert versions.bi_connector_minimum_version == "2.3.1"
    assert versions.mongo_db_tools_version == "100.0.1"


async def test_agent_api_keys_list_is_a_bare_array(client: Client, recorder: Recorder) -> None:
    recorder.reply(
        200,
        [
            {
                "_id": "5d9f3b8a7fe6b42d0a8e8f5b",
                "createdBy": "PUBLIC_API",
                "createdIpAddr": "192.0.2.1",
                "createdTime": 1570716554577,
                "createdUserId": None,
                "desc": "Agent API Key for this project",
                "key": "****************************8b87",
            }
        ],
    )

    keys, _ = await client.agent_api_keys.list(PROJECT_ID)

    assert recorder.last.url.path == f"/api/public/v1.0/groups/{PROJECT_ID}/agentapikeys"
    assert len(keys) == 1
    assert keys[0].id == "5d9f3b8a7fe6b42d0a8e8f5b"
    assert keys[0].created_time == 1570716554577
    assert keys[0].created_user_id is None


async def test_agent_api_keys_create(client: Client, recorder: Recorder) -> None:
    recorder.reply(201, {"_id": "k1", "desc": "test", "key": "secret"})

    key, response = await client.agent_api_keys.create(PROJECT_ID, AgentAPIKeysRequest(desc="test"))

    assert recorder.last.method == "POST"
    assert recorder.last_json() == {"desc": "test"}
    assert key.key == "secret"
    assert response.status_code == 201


async def test_agent_api_keys_create_requires_body(client: Client, recorder: Recorder) -> None:
    with pytest.raises(ArgumentError) as exc_info:
        await client.agent_api_keys.create(PROJECT_ID, None)  # type: ignore[arg-type]

    assert exc_info.value.reason == "cannot be None"
    assert recorder.calls == 0


async def test_agent_api_keys_delete(client: Client, recorder: Recorder) -> None:
    recorder.reply(204)

    response = await client.agent_api_keys.delete(PROJECT_ID, "k/1")

    assert recorder.last.method == "DELETE"
    assert recorder.last.url.raw_path.decode() == f"/api/public/v1.0/groups/{PROJECT_ID}/agentapikeys/k%2F1"
    assert response.status_code == 204


async def test_agent_api_keys_delete_requires_id(client: Client, recorder: Recorder) -> None:
    with pytest.raises(ArgumentError):
        await client.agent_api_keys.delete(PROJECT_ID, "")

    assert recorder.calls == 0
