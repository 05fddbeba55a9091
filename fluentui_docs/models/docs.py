"""Tool result payloads for the docs MCP server."""

from typing import Any

from pydantic import BaseModel, Field

# ============ DOCUMENT MODELS ============


class DocumentInfo(BaseModel):
    """Compact description of one document."""

    id: str
    title: str
    kind: str
    category: str
    subcategory: str | None = None
    component_names: list[str] = Field(default_factory=list)
    package: str | None = None
    description: str | None = None


class SectionInfo(BaseModel):
    heading: str
    level: int


class ComponentDocResult(BaseModel):
    """Result of query_component tool."""

    found: bool
    query: str
    document: DocumentInfo | None = None
    import_statement: str | None = None
    see_also: list[str] = Field(default_factory=list)
    sections: list[SectionInfo] = Field(default_factory=list)
    content: str | None = Field(default=None, description="Full markdown of the document")
    resolved_alias: str | None = Field(
        default=None, description="Canonical name when the query was an alias"
    )
    available_components: dict[str, list[str]] = Field(
        default_factory=dict, description="Component titles by category (when not found)"
    )


class CodeExample(BaseModel):
    heading: str
    language: str
    code: str


class ComponentExamplesResult(BaseModel):
    """Result of get_component_examples tool."""

    found: bool
    query: str
    document: DocumentInfo | None = None
    import_statement: str | None = None
    examples: list[CodeExample] = Field(default_factory=list)
    available_components: dict[str, list[str]] = Field(default_factory=dict)


class PropsReferenceResult(BaseModel):
    """Result of get_props_reference tool."""

    found: bool
    query: str
    document: DocumentInfo | None = None
    import_statement: str | None = None
    source: str | None = Field(
        default=None, description="'section' (Props heading), 'tables' (inline tables) or None"
    )
    props_section: str | None = None
    tables: list[str] = Field(default_factory=list)
    available_components: dict[str, list[str]] = Field(default_factory=dict)


# ============ SEARCH AND LISTING MODELS ============


class SearchHit(BaseModel):
    document: DocumentInfo
    score: float
    matched_fields: list[str]
    snippet: str
    section: str | None = Field(default=None, description="Heading of the snippet section")


class SearchDocsResult(BaseModel):
    """Result of search_docs tool."""

    query: str
    terms: list[str] = Field(default_factory=list)
    total: int = 0
    results: list[SearchHit] = Field(default_factory=list)


class CategoryInfo(BaseModel):
    name: str
    count: int
    subcategories: dict[str, int] = Field(default_factory=dict)


class CategoryListResult(BaseModel):
    """Result of list_by_category tool."""

    category: str | None = None
    subcategory: str | None = None
    found: bool = True
    documents: list[DocumentInfo] = Field(default_factory=list)
    categories: list[CategoryInfo] = Field(default_factory=list)


class InventoryResult(BaseModel):
    """Result of list_all_docs tool: documents grouped by kind, then category."""

    total: int
    generation: int
    by_kind: dict[str, dict[str, list[DocumentInfo]]] = Field(default_factory=dict)


# ============ TOPIC MODELS ============


class TopicSummary(BaseModel):
    key: str
    display_name: str
    description: str
    aliases: list[str] = Field(default_factory=list)
    documents: list[DocumentInfo] = Field(default_factory=list)


class TopicResult(BaseModel):
    """Result of get_foundation / get_pattern / get_enterprise tools."""

    module: str
    topic: str | None = None
    found: bool = True
    message: str | None = None
    documents: list[DocumentInfo] = Field(default_factory=list)
    content: str | None = Field(default=None, description="Full markdown of a single document")
    overview: list[TopicSummary] = Field(default_factory=list)


# ============ SYNTHESIS MODELS ============


class SuggestedComponent(BaseModel):
    name: str
    score: float
    document_id: str
    category: str
    rationale: str
    package: str | None = None
    import_statement: str | None = None


class SuggestComponentsResult(BaseModel):
    """Result of suggest_components tool."""

    status: str
    query: str
    terms: list[str] = Field(default_factory=list)
    components: list[SuggestedComponent] = Field(default_factory=list)
    message: str | None = None


class GuideEntryInfo(BaseModel):
    category: str
    document: DocumentInfo
    section: str | None = None
    section_text: str | None = None
    snippet: str
    score: float


class ImplementationGuideResult(BaseModel):
    """Result of get_implementation_guide tool."""

    status: str
    goal: str
    terms: list[str] = Field(default_factory=list)
    entries: list[GuideEntryInfo] = Field(default_factory=list)
    imports: list[str] = Field(default_factory=list)
    packages: list[str] = Field(default_factory=list)
    message: str | None = None


# ============ INDEX MODELS ============


class ReindexResult(BaseModel):
    """Result of reindex tool."""

    success: bool
    generation: int | None = None
    indexed_files: int | None = None
    failed_files: int | None = None
    duration_ms: float | None = None
    previous_count: int | None = None
    failures: list[dict[str, Any]] = Field(default_factory=list)
    error: str | None = None
    active_generation: int | None = Field(
        default=None, description="Generation still serving queries after a failure"
    )
