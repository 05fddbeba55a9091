"""Enumeration types for the FluentUI docs MCP server."""

from enum import StrEnum


class ToolName(StrEnum):
    """Available docs tools."""

    # Lookup
    QUERY_COMPONENT = "query_component"
    GET_COMPONENT_EXAMPLES = "get_component_examples"
    GET_PROPS_REFERENCE = "get_props_reference"
    # Search and listing
    SEARCH_DOCS = "search_docs"
    LIST_BY_CATEGORY = "list_by_category"
    LIST_ALL_DOCS = "list_all_docs"
    # Topic modules
    GET_FOUNDATION = "get_foundation"
    GET_PATTERN = "get_pattern"
    GET_ENTERPRISE = "get_enterprise"
    # Synthesis
    SUGGEST_COMPONENTS = "suggest_components"
    GET_IMPLEMENTATION_GUIDE = "get_implementation_guide"
    # Index lifecycle
    REINDEX = "reindex"


class DocsModule(StrEnum):
    """Top-level documentation modules accepted by ``search_docs``."""

    FOUNDATION = "foundation"
    COMPONENTS = "components"
    PATTERNS = "patterns"
    ENTERPRISE = "enterprise"
