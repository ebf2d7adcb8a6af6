"""
Tidio MCP Server Handlers Package
Contains all MCP tool handlers organized by resource
"""

from .contact_handlers import *
from .operator_handlers import *
from .ticket_handlers import *

__all__ = [
    # Re-export all handler functions
    "handle_get_contacts",
    "handle_get_contact_messages",
    "handle_search_contacts",
    "handle_get_operators",
    "handle_get_tickets",
    "handle_get_ticket_details",
    "filter_contacts"
]
