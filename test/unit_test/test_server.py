from __future__ import annotations

import json

import httpx
import mcp.types as types
import pytest
from mcp.shared.memory import create_connected_server_and_client_session

from sda_mcp.server import INSTRUCTIONS, SERVER_NAME, build_server, tool_definitions
from sda_mcp.tools.registry import OPERATIONS, SUBJECT_DELETED_MESSAGE


def _tools_by_name() -> dict:
    return {tool.name: tool for tool in tool_definitions(OPERATIONS)}


def test_one_tool_per_operation() -> None:
    tools = _tools_by_name()

    assert len(tools) == 17
    assert set(tools) == set(OPERATIONS)
    assert all(tool.description for tool in tools.values())


def test_input_schema_comes_from_argument_model() -> None:
    schema = _tools_by_name()["list_accessions"].inputSchema

    assert schema["type"] == "object"
    assert "perPage" in schema["properties"]
    assert "lang" in schema["properties"]
    assert _tools_by_name()["update_accession"].inputSchema["required"] == ["id", "request"]


@pytest.mark.parametrize(
    "name, read_only, destructive",
    [
        ("get_accession", True, False),
        ("create_collection", False, False),
        ("delete_subject", False, True),
    ],
)
def test_annotations(name: str, read_only: bool, destructive: bool) -> None:
    annotations = _tools_by_name()[name].annotations

    assert annotations.readOnlyHint is read_only
    assert annotations.destructiveHint is destructive


@pytest.mark.asyncio
async def test_session_round_trip(make_dispatcher, recorded_requests) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        if request.method == "DELETE":
            return httpx.Response(200)
        return httpx.Response(404, text="Not found")

    server = build_server(make_dispatcher(handler))

    async with create_connected_server_and_client_session(server) as session:
        listed = await session.list_tools()
        deleted = await session.call_tool("delete_subject", {"id": 3})
        missing = await session.call_tool("get_collection", {"id": 99})
        unknown = await session.call_tool("no_such_tool", {})

    assert len(listed.tools) == 17

    assert not deleted.isError
    assert isinstance(deleted.content[0], types.TextContent)
    assert deleted.content[0].text == SUBJECT_DELETED_MESSAGE
    assert json.loads(recorded_requests[0].content) == {"lang": "english"}

    assert missing.isError
    assert missing.content[0].text == "failed to get collection with ID 99: HTTP 404: Not found"

    assert unknown.isError
    assert "unknown operation: 'no_such_tool'" in unknown.content[0].text
    assert len(recorded_requests) == 2


def test_server_identity(make_dispatcher) -> None:
    server = build_server(make_dispatcher(lambda r: httpx.Response(200)))
    options = server.create_initialization_options()

    assert server.name == SERVER_NAME
    assert options.instructions == INSTRUCTIONS
