"""Tool handlers for the docs engine.

This package contains the tool handlers organized by domain:
- lookup: Component documentation (query_component, get_component_examples, get_props_reference)
- search: Ranked search and listings (search_docs, list_by_category, list_all_docs)
- topics: Module topics (get_foundation, get_pattern, get_enterprise)
- intelligence: Synthesis (suggest_components, get_implementation_guide)
- index: Index lifecycle (reindex)

Each handler is a standalone async function that takes:
- params: dict[str, Any] - Tool parameters from MCP call
- ctx: HandlerContext - Generation, settings and scoring config for this call

And returns:
- ToolResult with data, input_tokens, output_tokens
"""

from ...models import ToolName
from .base import HandlerContext, HandlerFunc, count_tokens
from .index import handle_reindex
from .intelligence import handle_get_implementation_guide, handle_suggest_components
from .lookup import (
    handle_get_component_examples,
    handle_get_props_reference,
    handle_query_component,
)
from .search import handle_list_all_docs, handle_list_by_category, handle_search_docs
from .topics import handle_get_enterprise, handle_get_foundation, handle_get_pattern

# Tool name -> handler
HANDLERS: dict[ToolName, HandlerFunc] = {
    ToolName.QUERY_COMPONENT: handle_query_component,
    ToolName.GET_COMPONENT_EXAMPLES: handle_get_component_examples,
    ToolName.GET_PROPS_REFERENCE: handle_get_props_reference,
    ToolName.SEARCH_DOCS: handle_search_docs,
    ToolName.LIST_BY_CATEGORY: handle_list_by_category,
    ToolName.LIST_ALL_DOCS: handle_list_all_docs,
    ToolName.GET_FOUNDATION: handle_get_foundation,
    ToolName.GET_PATTERN: handle_get_pattern,
    ToolName.GET_ENTERPRISE: handle_get_enterprise,
    ToolName.SUGGEST_COMPONENTS: handle_suggest_components,
    ToolName.GET_IMPLEMENTATION_GUIDE: handle_get_implementation_guide,
    ToolName.REINDEX: handle_reindex,
}

# Tools that may run before any generation has been published
NO_GENERATION_TOOLS = frozenset({ToolName.REINDEX})

__all__ = [
    # Base
    "HandlerContext",
    "HandlerFunc",
    "count_tokens",
    "HANDLERS",
    "NO_GENERATION_TOOLS",
    # Lookup handlers
    "handle_query_component",
    "handle_get_component_examples",
    "handle_get_props_reference",
    # Search handlers
    "handle_search_docs",
    "handle_list_by_category",
    "handle_list_all_docs",
    # Topic handlers
    "handle_get_foundation",
    "handle_get_pattern",
    "handle_get_enterprise",
    # Synthesis handlers
    "handle_suggest_components",
    "handle_get_implementation_guide",
    # Index handlers
    "handle_reindex",
]
