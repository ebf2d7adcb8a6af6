"""
Request models for the Tidio MCP Server
"""

from typing import Any, Dict, Optional
from pydantic import BaseModel, Field, field_validator


def stringify_param(value: Any) -> str:
    """Render a query parameter the way Tidio expects it on the wire"""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


class ToolInvocation(BaseModel):
    """A single call tool request from the MCP host"""
    name: str
    arguments: Dict[str, Any] = Field(default_factory=dict)

    @field_validator("arguments", mode="before")
    @classmethod
    def _default_arguments(cls, value: Any) -> Any:
        return {} if value is None else value


class ApiRequest(BaseModel):
    """One outbound call against the Tidio OpenAPI"""
    path: str
    method: str = "GET"
    params: Dict[str, str] = Field(default_factory=dict)
    body: Optional[Any] = None

    @field_validator("path")
    @classmethod
    def _check_path(cls, value: str) -> str:
        if not value.startswith("/"):
            raise ValueError(f"path must begin with '/': {value!r}")
        return value

    @field_validator("method")
    @classmethod
    def _upper_method(cls, value: str) -> str:
        return value.upper()

    @field_validator("params", mode="before")
    @classmethod
    def _stringify_params(cls, value: Any) -> Any:
        if value is None:
            return {}
        return {str(k): stringify_param(v) for k, v in value.items() if v is not None}
