"""Response models for the docs MCP server."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field


class ToolResult(BaseModel):
    """Result of one tool handler: payload plus token estimates."""

    data: dict[str, Any] = Field(default_factory=dict, description="Tool result payload")
    input_tokens: int = Field(default=0, ge=0, description="Estimated input tokens")
    output_tokens: int = Field(default=0, ge=0, description="Estimated output tokens")

    @property
    def is_error(self) -> bool:
        return self.data.get("error") is not None


class UsageInfo(BaseModel):
    """Token and latency accounting for one request."""

    input_tokens: int = Field(default=0, ge=0)
    output_tokens: int = Field(default=0, ge=0)
    latency_ms: int = Field(default=0, ge=0)


class MCPResponse(BaseModel):
    """MCP tool execution response."""

    success: bool = Field(..., description="Whether the tool ran without error")
    result: Any = Field(default=None, description="Tool result payload")
    error: str | None = Field(default=None, description="Error message if failed")
    usage: UsageInfo = Field(default_factory=UsageInfo)


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str
    timestamp: datetime


class ReadyResponse(BaseModel):
    """Readiness check response."""

    status: str
    version: str
    checks: dict[str, bool] = Field(default_factory=dict)
    generation: int | None = Field(default=None, description="Active index generation number")


class StatsResponse(BaseModel):
    """Statistics of the active index generation."""

    server_name: str
    generation: int
    source_root: str
    built_at: datetime
    documents: int
    terms: int
    indexed_files: int
    failed_files: int
    duration_ms: float
    by_kind: dict[str, int] = Field(default_factory=dict)
    by_category: dict[str, int] = Field(default_factory=dict)
