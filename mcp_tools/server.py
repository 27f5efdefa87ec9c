"""Stdio MCP server exposing the SHRED tools to an agent host.

stdout carries JSON-RPC, so logging goes to stderr only.
"""

from __future__ import annotations

import asyncio
import logging
import sys
from typing import Any

import mcp.server.stdio
import mcp.types as types
from dotenv import load_dotenv
from mcp.server import Server
from mcp.server.lowlevel import NotificationOptions
from mcp.server.models import InitializationOptions

from config.settings import Settings
from mcp_tools.tools import TOOL_REGISTRY, ShredTools, execute_tool

logger = logging.getLogger(__name__)

SERVER_NAME = "shred-check-mcp"
SERVER_VERSION = "1.0.0"


def create_server(tools: ShredTools) -> Server:
    """Build an MCP ``Server`` with list/call handlers bound to *tools*."""
    server = Server(SERVER_NAME)

    @server.list_tools()
    async def list_tools() -> list[types.Tool]:
        return [
            types.Tool(name=tool.name, description=tool.description, inputSchema=tool.parameters)
            for tool in TOOL_REGISTRY.values()
        ]

    @server.call_tool()
    async def call_tool(tool_name: str, arguments: dict[str, Any]) -> list[types.TextContent]:
        if tool_name not in TOOL_REGISTRY:
            raise ValueError(f"Unknown tool: {tool_name}")
        try:
            # Search requests block; keep them off the event loop.
            text = await asyncio.to_thread(execute_tool, tools, tool_name, arguments)
        except ValueError as exc:
            text = f"Error: {exc}"
        return [types.TextContent(type="text", text=text)]

    return server


async def run(settings: Settings) -> None:
    server = create_server(ShredTools(settings))
    init_options = InitializationOptions(
        server_name=SERVER_NAME,
        server_version=SERVER_VERSION,
        capabilities=server.get_capabilities(
            notification_options=NotificationOptions(),
            experimental_capabilities={},
        ),
    )
    async with mcp.server.stdio.stdio_server() as (read_stream, write_stream):
        logger.info("SHRED MCP server running on stdio")
        await server.run(read_stream, write_stream, init_options)


def main() -> None:
    load_dotenv()
    logging.basicConfig(level=logging.INFO, stream=sys.stderr)
    settings = Settings()
    logger.info(
        "Google API configured: %s, Claude API configured: %s",
        settings.search_configured,
        settings.inference_configured,
    )
    asyncio.run(run(settings))


if __name__ == "__main__":
    main()
