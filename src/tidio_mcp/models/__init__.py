"""
Tidio MCP Server Models Package
Contains request/response models for type safety
"""

from .requests import *
from .responses import *

__all__ = [
    "ApiRequest",
    "ToolInvocation",
    "ToolResult",
    "stringify_param"
]
