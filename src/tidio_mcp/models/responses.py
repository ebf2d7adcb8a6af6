"""
Response models for the Tidio MCP Server
"""

import json
from typing import Any, List, Optional
from pydantic import BaseModel
from mcp.types import TextContent


class ToolResult(BaseModel):
    """Outcome of one tool call: a payload or an error message, never both"""
    ok: bool
    data: Any = None
    error: Optional[str] = None

    @classmethod
    def success(cls, data: Any) -> "ToolResult":
        return cls(ok=True, data=data)

    @classmethod
    def failure(cls, message: str) -> "ToolResult":
        return cls(ok=False, error=message)

    def to_text(self) -> str:
        if self.ok:
            return json.dumps(self.data, indent=2, ensure_ascii=False)
        return f"Error: {self.error}"

    def to_content(self) -> List[TextContent]:
        """Render into the single text block the MCP host receives"""
        return [TextContent(type="text", text=self.to_text())]
