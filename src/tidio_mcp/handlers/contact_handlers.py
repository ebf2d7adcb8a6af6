"""
Contact Handlers for Tidio MCP Server
Handles contact listing, conversation transcripts and client-side contact search
"""

import logging
from typing import Any, Dict, List, Optional
from urllib.parse import quote

from ..client import TidioClient

logger = logging.getLogger(__name__)

# The contacts endpoint has no search filters, so search scans one page of this size
SEARCH_PAGE_SIZE = 100
SEARCH_FIELDS = ("email", "first_name", "last_name")


async def handle_get_contacts(client: TidioClient, arguments: Dict[str, Any]) -> Any:
    """Handle get_contacts tool"""
    params = {}
    if arguments.get("limit"):
        params["limit"] = arguments["limit"]
    if arguments.get("cursor"):
        params["cursor"] = arguments["cursor"]

    return await client.get("/contacts", params)


async def handle_get_contact_messages(client: TidioClient, arguments: Dict[str, Any]) -> Any:
    """Handle get_contact_messages tool - full conversation transcript of a contact"""
    contact_id = quote(str(arguments["contact_id"]), safe="")

    params = {}
    if arguments.get("limit"):
        params["limit"] = arguments["limit"]

    return await client.get(f"/contacts/{contact_id}/messages", params)


def _as_count(limit: Any, default: int) -> int:
    """Coerce a loosely typed limit; unparseable values count as zero"""
    try:
        return int(float(limit))
    except OverflowError:
        return default
    except (TypeError, ValueError):
        return 0


def filter_contacts(
    contacts: List[Dict[str, Any]],
    filters: Dict[str, Any],
    limit: Optional[Any] = None,
) -> List[Dict[str, Any]]:
    """Keep contacts matching every supplied filter, then truncate to limit.

    Matching is a case-insensitive substring test. A contact lacking the
    filtered field never matches that filter.
    """
    matched = contacts
    for field in SEARCH_FIELDS:
        needle = filters.get(field)
        if not needle:
            continue
        needle = str(needle).lower()
        matched = [
            contact for contact in matched
            if isinstance(contact, dict)
            and contact.get(field)
            and needle in str(contact[field]).lower()
        ]

    if limit:
        matched = matched[:_as_count(limit, len(matched))]
    return matched


async def handle_search_contacts(client: TidioClient, arguments: Dict[str, Any]) -> Dict[str, Any]:
    """Handle search_contacts tool - fetch one page and filter locally"""
    result = await client.get("/contacts", {"limit": SEARCH_PAGE_SIZE})

    contacts = result.get("contacts") if isinstance(result, dict) else None
    found = filter_contacts(contacts or [], arguments, arguments.get("limit"))
    logger.info(f"search_contacts matched {len(found)} of {len(contacts or [])} contacts")

    return {
        "contacts": found,
        "total_found": len(found)
    }
