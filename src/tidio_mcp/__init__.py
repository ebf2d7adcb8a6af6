"""
Tidio MCP Server
Bridges the Tidio customer-support API to MCP hosts over stdio
"""

__version__ = "1.0.0"
