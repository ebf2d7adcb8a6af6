"""
Configuration for the Tidio MCP Server
Resolves credentials, upstream URL and server identity once at import
"""

import os
import logging
from dotenv import load_dotenv, find_dotenv

# Credentials live in a dotenv file; TIDIO_CREDENTIALS_FILE overrides the lookup
load_dotenv(os.getenv("TIDIO_CREDENTIALS_FILE") or find_dotenv(usecwd=True))

# Configure logging (stderr only, stdout carries the MCP stream)
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
logging.basicConfig(level=getattr(logging, LOG_LEVEL, logging.INFO))
logger = logging.getLogger(__name__)

PLACEHOLDER_CLIENT_ID = "your_client_id_here"
PLACEHOLDER_CLIENT_SECRET = "your_client_secret_here"

# Configuration Constants
TIDIO_API_URL = os.getenv("TIDIO_API_URL", "https://api.tidio.com")
TIDIO_API_VERSION = "1"
TIDIO_CLIENT_ID = os.getenv("TIDIO_CLIENT_ID") or PLACEHOLDER_CLIENT_ID
TIDIO_CLIENT_SECRET = os.getenv("TIDIO_CLIENT_SECRET") or PLACEHOLDER_CLIENT_SECRET
REQUEST_TIMEOUT = float(os.getenv("TIDIO_REQUEST_TIMEOUT", "30.0"))

MCP_SERVER_NAME = os.getenv("MCP_SERVER_NAME", "tidio-mcp")
MCP_SERVER_VERSION = os.getenv("MCP_SERVER_VERSION", "1.0.0")


def credentials_configured() -> bool:
    """True when real credentials replaced the placeholders"""
    return (
        TIDIO_CLIENT_ID != PLACEHOLDER_CLIENT_ID
        and TIDIO_CLIENT_SECRET != PLACEHOLDER_CLIENT_SECRET
    )


if not credentials_configured():
    logger.warning(
        "⚠️ Tidio credentials not found, using placeholders. "
        "Set TIDIO_CLIENT_ID and TIDIO_CLIENT_SECRET in your .env file; "
        "API calls will fail authentication until then."
    )
