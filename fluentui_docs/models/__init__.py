"""Pydantic models for the docs MCP server request/response schemas.

This module re-exports all models. Import from submodules directly for
cleaner imports:

    from fluentui_docs.models.enums import ToolName
    from fluentui_docs.models.docs import SearchDocsResult
"""

# ============ DOC RESULT MODELS ============
from .docs import (
    CategoryInfo,
    CategoryListResult,
    CodeExample,
    ComponentDocResult,
    ComponentExamplesResult,
    DocumentInfo,
    GuideEntryInfo,
    ImplementationGuideResult,
    InventoryResult,
    PropsReferenceResult,
    ReindexResult,
    SearchDocsResult,
    SearchHit,
    SectionInfo,
    SuggestComponentsResult,
    SuggestedComponent,
    TopicResult,
    TopicSummary,
)

# ============ ENUMS ============
from .enums import DocsModule, ToolName

# ============ REQUEST MODELS ============
from .requests import (
    ComponentExamplesParams,
    GetEnterpriseParams,
    GetFoundationParams,
    GetPatternParams,
    ImplementationGuideParams,
    ListAllDocsParams,
    ListByCategoryParams,
    MCPRequest,
    PropsReferenceParams,
    QueryComponentParams,
    ReindexParams,
    SearchDocsParams,
    SuggestComponentsParams,
    ToolParams,
)

# ============ RESPONSE MODELS ============
from .responses import (
    HealthResponse,
    MCPResponse,
    ReadyResponse,
    StatsResponse,
    ToolResult,
    UsageInfo,
)

__all__ = [
    # Enums
    "DocsModule",
    "ToolName",
    # Requests
    "MCPRequest",
    "ToolParams",
    "QueryComponentParams",
    "ComponentExamplesParams",
    "PropsReferenceParams",
    "SearchDocsParams",
    "ListByCategoryParams",
    "ListAllDocsParams",
    "ReindexParams",
    "GetFoundationParams",
    "GetPatternParams",
    "GetEnterpriseParams",
    "SuggestComponentsParams",
    "ImplementationGuideParams",
    # Responses
    "ToolResult",
    "UsageInfo",
    "MCPResponse",
    "HealthResponse",
    "ReadyResponse",
    "StatsResponse",
    # Doc results
    "DocumentInfo",
    "SectionInfo",
    "ComponentDocResult",
    "CodeExample",
    "ComponentExamplesResult",
    "PropsReferenceResult",
    "SearchHit",
    "SearchDocsResult",
    "CategoryInfo",
    "CategoryListResult",
    "InventoryResult",
    "TopicSummary",
    "TopicResult",
    "SuggestedComponent",
    "SuggestComponentsResult",
    "GuideEntryInfo",
    "ImplementationGuideResult",
    "ReindexResult",
]
