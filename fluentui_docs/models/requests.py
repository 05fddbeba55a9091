"""Request models (Pydantic *Params classes) for the docs MCP server.

Tool arguments use the camelCase names MCP clients send (``componentName``);
snake_case field names are accepted as well.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .enums import DocsModule, ToolName

# ============ CORE REQUEST MODELS ============


class MCPRequest(BaseModel):
    """MCP tool execution request."""

    tool: ToolName = Field(..., description="The docs tool to execute")
    params: dict[str, Any] = Field(default_factory=dict, description="Tool parameters")


class ToolParams(BaseModel):
    """Base for tool parameter models."""

    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)


# ============ LOOKUP PARAMS ============


class QueryComponentParams(ToolParams):
    """Parameters for query_component tool."""

    component_name: str = Field(
        ...,
        alias="componentName",
        min_length=1,
        description="Component name, e.g. 'Button' or 'DataGrid' (case-insensitive)",
    )


class ComponentExamplesParams(QueryComponentParams):
    """Parameters for get_component_examples tool."""


class PropsReferenceParams(QueryComponentParams):
    """Parameters for get_props_reference tool."""


# ============ SEARCH AND LISTING PARAMS ============


class SearchDocsParams(ToolParams):
    """Parameters for search_docs tool."""

    query: str = Field(..., min_length=1, description="Free-text search query")
    category: str | None = Field(default=None, description="Restrict to one category")
    module: DocsModule | None = Field(default=None, description="Restrict to one docs module")
    limit: int | None = Field(default=None, ge=1, description="Maximum results to return")


class ListByCategoryParams(ToolParams):
    """Parameters for list_by_category tool."""

    category: str | None = Field(
        default=None, description="Category to list; omit to list all categories"
    )
    subcategory: str | None = Field(
        default=None, description="Optional subcategory; requires category"
    )

    @model_validator(mode="after")
    def _subcategory_needs_category(self) -> "ListByCategoryParams":
        if self.subcategory and not self.category:
            raise ValueError("subcategory requires a category")
        return self


class ListAllDocsParams(ToolParams):
    """Parameters for list_all_docs tool (none)."""


class ReindexParams(ToolParams):
    """Parameters for reindex tool."""

    force: bool = Field(default=False, description="Accepted for compatibility; every reindex is a full rebuild")


# ============ TOPIC PARAMS ============


class GetFoundationParams(ToolParams):
    """Parameters for get_foundation tool."""

    topic: str | None = Field(default=None, description="Foundation topic; omit for an overview")


class GetPatternParams(ToolParams):
    """Parameters for get_pattern tool."""

    pattern_category: str | None = Field(
        default=None,
        alias="patternCategory",
        description="Pattern category, e.g. 'forms'; omit for an overview",
    )
    pattern_name: str | None = Field(
        default=None, alias="patternName", description="Specific pattern within the category"
    )


class GetEnterpriseParams(ToolParams):
    """Parameters for get_enterprise tool."""

    topic: str | None = Field(default=None, description="Enterprise topic; omit for an overview")


# ============ SYNTHESIS PARAMS ============


class SuggestComponentsParams(ToolParams):
    """Parameters for suggest_components tool."""

    ui_description: str = Field(
        default="",
        alias="uiDescription",
        description="Free-text description of the UI to build",
    )
    limit: int | None = Field(default=None, ge=1, le=50, description="Maximum components")


class ImplementationGuideParams(ToolParams):
    """Parameters for get_implementation_guide tool."""

    goal: str = Field(default="", description="What the UI should accomplish")
    per_category: int | None = Field(default=None, ge=1, le=10)
    max_entries: int | None = Field(default=None, ge=1, le=50)
