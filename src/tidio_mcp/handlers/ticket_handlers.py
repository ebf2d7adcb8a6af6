"""
Ticket Handlers for Tidio MCP Server
Handles support ticket listing and lookup
"""

from typing import Any, Dict
from urllib.parse import quote

from ..client import TidioClient


async def handle_get_tickets(client: TidioClient, arguments: Dict[str, Any]) -> Any:
    """Handle get_tickets tool"""
    params = {}
    if arguments.get("status"):
        params["status"] = arguments["status"]
    if arguments.get("limit"):
        params["limit"] = arguments["limit"]

    return await client.get("/tickets", params)


async def handle_get_ticket_details(client: TidioClient, arguments: Dict[str, Any]) -> Any:
    """Handle get_ticket_details tool"""
    ticket_id = quote(str(arguments["ticket_id"]), safe="")
    return await client.get(f"/tickets/{ticket_id}")
