#!/usr/bin/env python3
"""
MCP Server for Tidio Integration
Exposes Tidio contacts, conversations, operators and tickets as MCP tools
over the stdio transport
"""

import asyncio
import logging
from typing import Any, Dict, List, Optional

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import Tool, TextContent

from .config import (
    MCP_SERVER_NAME, MCP_SERVER_VERSION, TIDIO_API_URL,
    TIDIO_CLIENT_ID, TIDIO_CLIENT_SECRET, credentials_configured
)
from .client import TidioClient
from .registry import dispatch, list_tool_descriptors, render

logger = logging.getLogger(__name__)

server = Server(MCP_SERVER_NAME, version=MCP_SERVER_VERSION)

# Credentials are resolved once at import and handed to the client here
client = TidioClient(TIDIO_API_URL, TIDIO_CLIENT_ID, TIDIO_CLIENT_SECRET)


@server.list_tools()
async def list_tools() -> List[Tool]:
    """List all available MCP tools"""
    return list_tool_descriptors()


# Argument problems must reach the host as "Error: ..." text, so the SDK's
# own schema validation stays off
@server.call_tool(validate_input=False)
async def call_tool(name: str, arguments: Optional[Dict[str, Any]]) -> List[TextContent]:
    """Handle tool execution - delegates to the registry"""
    logger.info(f"Executing tool: {name} with arguments: {arguments}")
    result = await dispatch(client, name, arguments)
    return render(result)


async def main():
    """Main function to start the MCP server"""
    logger.info(f"Starting MCP Server: {MCP_SERVER_NAME} v{MCP_SERVER_VERSION}")
    logger.info(f"Proxying Tidio API at: {TIDIO_API_URL}")
    if not credentials_configured():
        logger.warning("Running with placeholder credentials")

    try:
        async with stdio_server() as (read_stream, write_stream):
            await server.run(read_stream, write_stream, server.create_initialization_options())
    finally:
        await client.aclose()
        logger.info("Closed Tidio HTTP client")


def run():
    """Console script entry point"""
    asyncio.run(main())


if __name__ == "__main__":
    run()
