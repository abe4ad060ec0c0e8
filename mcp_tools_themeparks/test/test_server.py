"""
Tests for the FastMCP wiring and the CLI entrypoint.
"""

import asyncio
import json
import time
from unittest.mock import patch

import pytest

from mcp_tools_themeparks.core.config import BASE_URL_ENV
from mcp_tools_themeparks.core.schemas import ToolResponse
from mcp_tools_themeparks.mcp import server as server_module
from mcp_tools_themeparks.services.entities import PARTIAL_SCHEDULE_MESSAGE
from mcp_tools_themeparks.services.help import HELP_TEXT, get_help_text

TOOL_NAMES = {
    "list_destinations",
    "get_entity_details",
    "get_entity_children",
    "get_entity_live_data",
    "get_entity_schedule",
}


@pytest.fixture
def mcp_server(settings):
    return server_module.create_server(settings)


def test_registers_the_five_tools(mcp_server):
    tools = asyncio.run(mcp_server.list_tools())

    assert {t.name for t in tools} == TOOL_NAMES


def test_list_destinations_takes_no_parameters(mcp_server):
    tools = {t.name: t for t in asyncio.run(mcp_server.list_tools())}

    assert not tools["list_destinations"].inputSchema.get("properties")


def test_schedule_schema(mcp_server):
    tools = {t.name: t for t in asyncio.run(mcp_server.list_tools())}
    schema = tools["get_entity_schedule"].inputSchema

    assert schema["required"] == ["entity_id"]
    assert set(schema["properties"]) == {"entity_id", "year", "month"}


def test_entity_id_schema_carries_uuid_pattern(mcp_server):
    tools = {t.name: t for t in asyncio.run(mcp_server.list_tools())}
    entity_id = tools["get_entity_details"].inputSchema["properties"]["entity_id"]

    assert entity_id["pattern"].startswith("^[0-9a-fA-F]{8}")


def test_help_prompt(mcp_server):
    prompts = asyncio.run(mcp_server.list_prompts())
    assert [p.name for p in prompts] == ["help"]

    result = asyncio.run(mcp_server.get_prompt("help"))
    assert result.messages[0].content.text == HELP_TEXT


def test_help_text_mentions_every_tool():
    text = get_help_text()

    for name in TOOL_NAMES:
        assert name in text


def test_to_call_tool_result_success():
    result = server_module.to_call_tool_result(ToolResponse(text="[]"))

    assert result.isError is False
    assert result.content[0].type == "text"
    assert result.content[0].text == "[]"


def test_to_call_tool_result_failure():
    result = server_module.to_call_tool_result(ToolResponse.failure("Error listing destinations: boom"))

    assert result.isError is True
    assert result.content[0].text == "Error listing destinations: boom"


def test_call_tool_returns_error_result(mcp_server, mock_get, fake_response, entity_id):
    mock_get.return_value = fake_response(status_code=404, body={"message": "not found"})

    result = asyncio.run(mcp_server.call_tool("get_entity_details", {"entity_id": entity_id}))

    assert result.isError is True
    assert result.content[0].text == (
        f"Error fetching details for entity {entity_id}: API responded with status 404: not found"
    )


def test_call_tool_returns_success_result(mcp_server, mock_get, fake_response):
    mock_get.return_value = fake_response(body=[{"id": "abc"}])

    result = asyncio.run(mcp_server.call_tool("list_destinations", {}))

    assert result.isError is False
    assert result.content[0].text == json.dumps([{"id": "abc"}], indent=2)


@pytest.mark.parametrize("period", [{"year": 2025}, {"month": 7}])
def test_call_tool_schedule_with_partial_period(period, mcp_server, mock_get, entity_id):
    result = asyncio.run(
        mcp_server.call_tool("get_entity_schedule", {"entity_id": entity_id, **period})
    )

    assert result.isError is True
    assert result.content[0].text == PARTIAL_SCHEDULE_MESSAGE
    mock_get.assert_not_called()


def test_concurrent_tool_calls_overlap(mcp_server, mock_get, fake_response, entity_id):
    def slow_get(*args, **kwargs):
        time.sleep(0.5)
        return fake_response(body={})

    mock_get.side_effect = slow_get

    async def call_both():
        return await asyncio.gather(
            mcp_server.call_tool("list_destinations", {}),
            mcp_server.call_tool("get_entity_live_data", {"entity_id": entity_id}),
        )

    started = time.monotonic()
    results = asyncio.run(call_both())
    elapsed = time.monotonic() - started

    assert [r.isError for r in results] == [False, False]
    assert mock_get.call_count == 2
    assert elapsed < 0.9


def test_main_exits_without_base_url(monkeypatch):
    monkeypatch.delenv(BASE_URL_ENV, raising=False)

    with patch("mcp_tools_themeparks.core.config.load_dotenv"):
        with pytest.raises(SystemExit) as exc_info:
            server_module.main([])

    assert exc_info.value.code == 1


def test_main_runs_stdio(monkeypatch):
    monkeypatch.setenv(BASE_URL_ENV, "https://api.themeparks.wiki/v1")

    with patch("mcp_tools_themeparks.core.config.load_dotenv"), \
            patch("mcp.server.fastmcp.FastMCP.run") as run:
        server_module.main(["--transport", "stdio"])

    run.assert_called_once_with("stdio")


def test_main_runs_streamable_http(monkeypatch):
    monkeypatch.setenv(BASE_URL_ENV, "https://api.themeparks.wiki/v1")

    with patch("mcp_tools_themeparks.core.config.load_dotenv"), \
            patch.object(server_module.uvicorn, "run") as run:
        server_module.main(["--transport", "streamable-http", "--port", "9001"])

    assert run.call_args.kwargs["port"] == 9001
    assert run.call_args.kwargs["host"] == "127.0.0.1"
