"""
Tool catalog and dispatcher for the Tidio MCP Server
Every tool listed for discovery has exactly one handler, checked at import
"""

import logging
from typing import Any, Awaitable, Callable, Dict, List, Optional

from mcp.types import Tool, TextContent

from .client import TidioClient
from .errors import TidioError, ValidationError
from .handlers import (
    handle_get_contacts, handle_get_contact_messages, handle_search_contacts,
    handle_get_operators, handle_get_tickets, handle_get_ticket_details
)
from .models import ToolInvocation, ToolResult

logger = logging.getLogger(__name__)

Handler = Callable[[TidioClient, Dict[str, Any]], Awaitable[Any]]


TOOLS: List[Tool] = [
    Tool(
        name="get_contacts",
        description="Get Tidio contacts (customers who have interacted with chat). Supports pagination with cursor.",
        inputSchema={
            "type": "object",
            "properties": {
                "limit": {"type": "number", "description": "Number of contacts to return (max 100)", "default": 50},
                "cursor": {"type": "string", "description": "Pagination cursor for next page of results"}
            }
        }
    ),
    Tool(
        name="get_contact_messages",
        description="Get conversation messages for a specific contact by contact ID. This shows the full conversation transcript.",
        inputSchema={
            "type": "object",
            "properties": {
                "contact_id": {"type": "string", "description": "The contact ID to get messages for"},
                "limit": {"type": "number", "description": "Number of messages to return (max 100)", "default": 100}
            },
            "required": ["contact_id"]
        }
    ),
    Tool(
        name="get_operators",
        description="Get list of Tidio operators/agents who handle customer support",
        inputSchema={"type": "object", "properties": {}}
    ),
    Tool(
        name="search_contacts",
        description="Search contacts by email, name, or other criteria",
        inputSchema={
            "type": "object",
            "properties": {
                "email": {"type": "string", "description": "Search by email address"},
                "first_name": {"type": "string", "description": "Search by first name"},
                "last_name": {"type": "string", "description": "Search by last name"},
                "limit": {"type": "number", "description": "Number of results to return", "default": 50}
            }
        }
    ),
    Tool(
        name="get_tickets",
        description="Get support tickets from Tidio",
        inputSchema={
            "type": "object",
            "properties": {
                "status": {"type": "string", "description": "Filter by ticket status (open, closed, etc.)"},
                "limit": {"type": "number", "description": "Number of tickets to return", "default": 50}
            }
        }
    ),
    Tool(
        name="get_ticket_details",
        description="Get detailed information about a specific ticket",
        inputSchema={
            "type": "object",
            "properties": {
                "ticket_id": {"type": "string", "description": "The ticket ID to get details for"}
            },
            "required": ["ticket_id"]
        }
    ),
]

TOOL_HANDLERS: Dict[str, Handler] = {
    "get_contacts": handle_get_contacts,
    "get_contact_messages": handle_get_contact_messages,
    "get_operators": handle_get_operators,
    "search_contacts": handle_search_contacts,
    "get_tickets": handle_get_tickets,
    "get_ticket_details": handle_get_ticket_details
}


def check_registry(tools: List[Tool], handlers: Dict[str, Handler]) -> None:
    """Raise RuntimeError unless catalog names and handler names match one to one"""
    names = [tool.name for tool in tools]
    if len(names) != len(set(names)):
        raise RuntimeError(f"Duplicate tool names in catalog: {names}")

    missing_handlers = set(names) - set(handlers)
    unlisted_handlers = set(handlers) - set(names)
    if missing_handlers or unlisted_handlers:
        raise RuntimeError(
            f"Tool registry mismatch: no handler for {sorted(missing_handlers)}, "
            f"not listed for discovery {sorted(unlisted_handlers)}"
        )


check_registry(TOOLS, TOOL_HANDLERS)

_TOOLS_BY_NAME: Dict[str, Tool] = {tool.name: tool for tool in TOOLS}


def list_tool_descriptors() -> List[Tool]:
    """Return the full tool catalog in a stable order"""
    return list(TOOLS)


def _check_required(tool: Tool, arguments: Dict[str, Any]) -> None:
    for arg_name in tool.inputSchema.get("required", []):
        if not arguments.get(arg_name):
            raise ValidationError(f"{arg_name} is required")


async def dispatch(
    client: TidioClient, name: str, arguments: Optional[Dict[str, Any]] = None
) -> ToolResult:
    """Route one tool call to its handler; failures come back as ToolResult, never raised"""
    try:
        invocation = ToolInvocation(name=name, arguments=arguments)

        tool = _TOOLS_BY_NAME.get(invocation.name)
        if tool is None:
            raise ValidationError(f"Unknown tool: {invocation.name}")
        _check_required(tool, invocation.arguments)

        data = await TOOL_HANDLERS[invocation.name](client, invocation.arguments)
        return ToolResult.success(data)

    except TidioError as e:
        logger.error(f"Error executing tool {name}: {e}")
        return ToolResult.failure(str(e))
    except Exception as e:
        logger.exception(f"Unexpected error executing tool {name}")
        return ToolResult.failure(str(e) or type(e).__name__)


def render(result: ToolResult) -> List[TextContent]:
    return result.to_content()
