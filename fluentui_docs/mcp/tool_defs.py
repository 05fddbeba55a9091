"""MCP Tool Definitions for the FluentUI docs server.

This module contains all tool definitions returned by the tools/list method.
Each tool definition includes the schema for its input parameters.

Tool Categories:
    - Lookup: query_component, get_component_examples, get_props_reference
    - Search: search_docs, list_by_category, list_all_docs
    - Modules: get_foundation, get_pattern, get_enterprise
    - Synthesis: suggest_components, get_implementation_guide
    - Index: reindex
"""

from ..models import ToolName

_COMPONENT_NAME_SCHEMA = {
    "type": "object",
    "properties": {
        "componentName": {
            "type": "string",
            "description": "Component name, e.g. 'Button', 'DataGrid' or an alias like 'modal'",
        }
    },
    "required": ["componentName"],
}


TOOL_DEFINITIONS: list[dict] = [
    # ============ Lookup Tools ============
    {
        "name": ToolName.QUERY_COMPONENT.value,
        "description": "Get the full documentation of a FluentUI component by name. Case-insensitive; common aliases (textbox, modal, tabs) resolve to the canonical component.",
        "inputSchema": _COMPONENT_NAME_SCHEMA,
    },
    {
        "name": ToolName.GET_COMPONENT_EXAMPLES.value,
        "description": "Get only the TypeScript/TSX code examples of a component, labelled by section.",
        "inputSchema": _COMPONENT_NAME_SCHEMA,
    },
    {
        "name": ToolName.GET_PROPS_REFERENCE.value,
        "description": "Get the props reference of a component (Props section or inline prop tables).",
        "inputSchema": _COMPONENT_NAME_SCHEMA,
    },
    # ============ Search Tools ============
    {
        "name": ToolName.SEARCH_DOCS.value,
        "description": "Ranked full-text search across all FluentUI docs. Title and component-name matches rank above body matches.",
        "inputSchema": {
            "type": "object",
            "properties": {
                "query": {"type": "string", "description": "Search query"},
                "category": {"type": "string", "description": "Restrict to one category, e.g. 'forms'"},
                "module": {
                    "type": "string",
                    "enum": ["foundation", "components", "patterns", "enterprise"],
                    "description": "Restrict to one docs module",
                },
                "limit": {"type": "integer", "default": 10, "minimum": 1, "maximum": 50},
            },
            "required": ["query"],
        },
    },
    {
        "name": ToolName.LIST_BY_CATEGORY.value,
        "description": "List documents in a category. Without a category, list all categories with document counts.",
        "inputSchema": {
            "type": "object",
            "properties": {
                "category": {"type": "string", "description": "Category, e.g. 'forms' or 'navigation'"},
                "subcategory": {"type": "string", "description": "Subcategory within the category (requires category)"},
            },
            "required": [],
        },
    },
    {
        "name": ToolName.LIST_ALL_DOCS.value,
        "description": "Full inventory of indexed docs grouped by module and category.",
        "inputSchema": {"type": "object", "properties": {}, "required": []},
    },
    # ============ Module Tools ============
    {
        "name": ToolName.GET_FOUNDATION.value,
        "description": "Get a foundation guide (getting-started, fluent-provider, theming, styling-griffel, component-architecture, accessibility). Omit topic for an overview.",
        "inputSchema": {
            "type": "object",
            "properties": {"topic": {"type": "string", "description": "Topic or alias, e.g. 'theme', 'a11y'"}},
            "required": [],
        },
    },
    {
        "name": ToolName.GET_PATTERN.value,
        "description": "Get usage patterns of a category (forms, layout, navigation, ...), or one named pattern. Omit the category for an overview.",
        "inputSchema": {
            "type": "object",
            "properties": {
                "patternCategory": {"type": "string", "description": "Pattern category"},
                "patternName": {"type": "string", "description": "Specific pattern within the category"},
            },
            "required": [],
        },
    },
    {
        "name": ToolName.GET_ENTERPRISE.value,
        "description": "Get enterprise recipes by topic (app-shell, dashboard, admin, data, accessibility). Omit topic for an overview.",
        "inputSchema": {
            "type": "object",
            "properties": {"topic": {"type": "string", "description": "Topic or alias, e.g. 'kpi', 'crud'"}},
            "required": [],
        },
    },
    # ============ Synthesis Tools ============
    {
        "name": ToolName.SUGGEST_COMPONENTS.value,
        "description": "Suggest FluentUI components for a UI description, ranked, each with a one-line rationale from the docs.",
        "inputSchema": {
            "type": "object",
            "properties": {
                "uiDescription": {
                    "type": "string",
                    "description": "What the UI should contain, e.g. 'login form with remember me'",
                },
                "limit": {"type": "integer", "default": 10, "minimum": 1, "maximum": 50},
            },
            "required": ["uiDescription"],
        },
    },
    {
        "name": ToolName.GET_IMPLEMENTATION_GUIDE.value,
        "description": "Build an implementation guide for a goal from retrieved doc sections, grouped by category, with imports and packages.",
        "inputSchema": {
            "type": "object",
            "properties": {
                "goal": {"type": "string", "description": "Goal, e.g. 'settings page with toggles'"},
                "per_category": {"type": "integer", "default": 2, "minimum": 1, "maximum": 10},
                "max_entries": {"type": "integer", "default": 8, "minimum": 1, "maximum": 50},
            },
            "required": ["goal"],
        },
    },
    # ============ Index Tools ============
    {
        "name": ToolName.REINDEX.value,
        "description": "Rebuild the docs index from disk. On failure the previous index keeps serving.",
        "inputSchema": {
            "type": "object",
            "properties": {"force": {"type": "boolean", "default": False}},
            "required": [],
        },
    },
]
