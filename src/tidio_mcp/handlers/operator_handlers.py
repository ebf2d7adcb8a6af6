"""
Operator Handlers for Tidio MCP Server
"""

from typing import Any, Dict

from ..client import TidioClient


async def handle_get_operators(client: TidioClient, arguments: Dict[str, Any]) -> Any:
    """Handle get_operators tool"""
    return await client.get("/operators")
