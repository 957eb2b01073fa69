"""MCP server wiring

Exposes every operation of :data:`sda_mcp.tools.registry.OPERATIONS` as an MCP
tool over stdio. The tool list and input schemas come from the operation table;
``call_tool`` hands the name and raw arguments to :class:`ToolDispatcher`.

A failed invocation is raised back to the SDK, which turns it into a
``CallToolResult`` with ``isError=True`` and the wrapped message
(``failed to <action>: <cause>``) as text content.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Optional

import mcp.types as types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from . import __version__
from .archive_api.client import SdaApiClient
from .core.config import ClientConfig
from .tools.descriptor import OperationDescriptor
from .tools.dispatcher import ToolDispatcher

SERVER_NAME = "sda-mcp-server"
INSTRUCTIONS = "This server provides tools to interact with the Sudan Digital Archive API."

logger = logging.getLogger(__name__)


def tool_definition(descriptor: OperationDescriptor) -> types.Tool:
    return types.Tool(
        name=descriptor.name,
        description=descriptor.description,
        inputSchema=descriptor.arguments.model_json_schema(),
        annotations=types.ToolAnnotations(
            readOnlyHint=not descriptor.mutating,
            destructiveHint=descriptor.method == "DELETE",
            openWorldHint=True,
        ),
    )


def tool_definitions(operations: Mapping[str, OperationDescriptor]) -> List[types.Tool]:
    return [tool_definition(d) for d in operations.values()]


def build_server(dispatcher: ToolDispatcher) -> Server:
    """Create the MCP server bound to ``dispatcher``."""
    server: Server = Server(SERVER_NAME, version=__version__, instructions=INSTRUCTIONS)
    tools = tool_definitions(dispatcher.operations)

    @server.list_tools()
    async def list_tools() -> List[types.Tool]:
        return tools

    # Arguments are validated by the dispatcher against the pydantic models.
    @server.call_tool(validate_input=False)
    async def call_tool(name: str, arguments: Optional[Dict[str, Any]]) -> List[types.TextContent]:
        outcome = await dispatcher.dispatch(name, arguments)
        if outcome.error is not None:
            raise outcome.error
        return [types.TextContent(type="text", text=outcome.content or "")]

    return server


async def serve(config: ClientConfig) -> None:
    """Run the MCP server on stdin/stdout until the client disconnects."""
    async with SdaApiClient(config) as client:
        dispatcher = ToolDispatcher(client)
        server = build_server(dispatcher)
        logger.info(
            "Starting SDA MCP server: base_url=%s tools=%d", config.normalized_base_url, len(dispatcher.operations)
        )
        async with stdio_server() as (read_stream, write_stream):
            await server.run(read_stream, write_stream, server.create_initialization_options())
    logger.info("SDA MCP server stopped")
