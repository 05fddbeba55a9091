"""Tests for the tool handlers and the dispatcher."""

import asyncio
import shutil

import pytest

from fluentui_docs.engine.handlers import HANDLERS, HandlerContext
from fluentui_docs.errors import IndexNotReadyError
from fluentui_docs.mcp.tool_defs import TOOL_DEFINITIONS
from fluentui_docs.mcp.transport import ToolDispatcher
from fluentui_docs.models import ToolName

from .conftest import INDEXED_COUNT


def call(tool: ToolName, params: dict, ctx: HandlerContext) -> dict:
    result = asyncio.run(HANDLERS[tool](params, ctx))
    assert result.input_tokens >= 0
    return result.data


def test_every_tool_has_a_handler_and_a_definition():
    assert set(HANDLERS) == set(ToolName)
    assert {d["name"] for d in TOOL_DEFINITIONS} == {t.value for t in ToolName}


# ============ LOOKUP ============


def test_query_component(ctx):
    data = call(ToolName.QUERY_COMPONENT, {"componentName": "checkbox"}, ctx)
    assert data["found"] is True
    assert data["document"]["id"] == "components/forms/checkbox"
    assert data["import_statement"] == "import { Checkbox } from '@fluentui/react-components';"
    assert data["see_also"] == ["Switch", "Field"]
    assert [s["heading"] for s in data["sections"]] == ["Overview", "Usage", "Props", "See Also"]
    assert data["content"].startswith("# Checkbox")
    assert data["resolved_alias"] is None


def test_query_component_by_alias(ctx):
    data = call(ToolName.QUERY_COMPONENT, {"component_name": "textbox"}, ctx)
    assert data["found"] is True
    assert data["document"]["title"] == "Input"
    assert data["resolved_alias"] == "Input"


def test_query_component_not_found(ctx):
    data = call(ToolName.QUERY_COMPONENT, {"componentName": "Dialog"}, ctx)
    assert data["found"] is False
    assert "error" not in data
    assert data["available_components"]["forms"] == ["Checkbox", "Input", "Select", "Switch", "Textarea"]


def test_query_component_requires_a_name(ctx):
    data = call(ToolName.QUERY_COMPONENT, {}, ctx)
    assert "invalid parameters" in data["error"]


def test_component_examples(ctx):
    data = call(ToolName.GET_COMPONENT_EXAMPLES, {"componentName": "Input"}, ctx)
    assert data["examples"] == [
        {"heading": "Usage", "language": "tsx", "code": '<Input placeholder="Email" type="email" />'}
    ]


def test_props_reference_prefers_section(ctx):
    data = call(ToolName.GET_PROPS_REFERENCE, {"componentName": "Checkbox"}, ctx)
    assert data["source"] == "section"
    assert "| checked |" in data["props_section"]


def test_props_reference_falls_back_to_tables(ctx):
    data = call(ToolName.GET_PROPS_REFERENCE, {"componentName": "Textarea"}, ctx)
    assert data["source"] == "tables"
    assert data["props_section"] is None
    assert len(data["tables"]) == 1


# ============ SEARCH ============


def test_search_docs(ctx):
    data = call(ToolName.SEARCH_DOCS, {"query": "input"}, ctx)
    assert data["total"] == len(data["results"])
    assert data["results"][0]["document"]["title"] == "Input"
    assert data["terms"] == ["input"]


def test_search_docs_module_filter(ctx):
    data = call(ToolName.SEARCH_DOCS, {"query": "form input", "module": "patterns"}, ctx)
    assert [r["document"]["kind"] for r in data["results"]] == ["pattern"]


def test_search_docs_limit_is_capped(ctx):
    ctx.settings.max_search_limit = 2
    data = call(ToolName.SEARCH_DOCS, {"query": "input", "limit": 40}, ctx)
    assert data["total"] == 2


def test_search_docs_rejects_unknown_module(ctx):
    data = call(ToolName.SEARCH_DOCS, {"query": "input", "module": "widgets"}, ctx)
    assert "error" in data


def test_list_by_category(ctx):
    data = call(ToolName.LIST_BY_CATEGORY, {"category": "forms"}, ctx)
    assert data["found"] is True
    assert len(data["documents"]) == 5
    assert {d["category"] for d in data["documents"]} == {"forms"}


def test_list_by_category_without_category(ctx):
    data = call(ToolName.LIST_BY_CATEGORY, {}, ctx)
    assert [(c["name"], c["count"]) for c in data["categories"]] == [
        ("foundation", 3),
        ("forms", 5),
        ("navigation", 2),
        ("layout", 1),
        ("enterprise", 1),
    ]


def test_list_by_category_unknown(ctx):
    data = call(ToolName.LIST_BY_CATEGORY, {"category": "charts"}, ctx)
    assert data["found"] is False
    assert data["documents"] == []
    assert len(data["categories"]) == 5


def test_list_by_category_subcategory_requires_category(ctx):
    data = call(ToolName.LIST_BY_CATEGORY, {"subcategory": "layout"}, ctx)
    assert "subcategory requires a category" in data["error"]


def test_list_all_docs(ctx):
    data = call(ToolName.LIST_ALL_DOCS, {}, ctx)
    assert data["total"] == INDEXED_COUNT
    assert set(data["by_kind"]) == {"foundation", "component", "pattern", "enterprise"}
    assert len(data["by_kind"]["component"]["navigation"]) == 2


# ============ MODULE TOPICS ============


def test_get_foundation_by_alias(ctx):
    data = call(ToolName.GET_FOUNDATION, {"topic": "theme"}, ctx)
    assert data["found"] is True
    assert data["topic"] == "theming"
    assert data["content"].startswith("# Theming")


def test_get_foundation_overview(ctx):
    data = call(ToolName.GET_FOUNDATION, {}, ctx)
    keys = [t["key"] for t in data["overview"]]
    assert keys[0] == "getting-started"
    assert [d["id"] for d in data["documents"]] == ["overview"]


def test_get_foundation_unknown_topic(ctx):
    data = call(ToolName.GET_FOUNDATION, {"topic": "quantum"}, ctx)
    assert data["found"] is False
    assert data["overview"]


def test_get_pattern(ctx):
    data = call(ToolName.GET_PATTERN, {"patternCategory": "layout", "patternName": "page"}, ctx)
    assert data["found"] is True
    assert data["documents"][0]["id"] == "patterns/layout/page-layout"
    assert data["content"].startswith("# Page Layout")


def test_get_pattern_unknown_category(ctx):
    data = call(ToolName.GET_PATTERN, {"patternCategory": "forms"}, ctx)
    assert data["found"] is False
    assert [t["key"] for t in data["overview"]] == ["layout"]


def test_get_enterprise_by_alias(ctx):
    data = call(ToolName.GET_ENTERPRISE, {"topic": "kpi"}, ctx)
    assert data["topic"] == "dashboard"
    assert [d["id"] for d in data["documents"]] == ["enterprise/dashboard-kpi"]


def test_get_enterprise_topic_without_docs(ctx):
    data = call(ToolName.GET_ENTERPRISE, {"topic": "crud"}, ctx)
    assert data["found"] is False
    assert data["topic"] == "admin"


# ============ SYNTHESIS ============


def test_suggest_components_insufficient(ctx):
    data = call(ToolName.SUGGEST_COMPONENTS, {"uiDescription": "the a of"}, ctx)
    assert data["status"] == "insufficient_input"
    assert data["components"] == []
    assert data["message"]


def test_suggest_components(ctx):
    data = call(ToolName.SUGGEST_COMPONENTS, {"uiDescription": "login form with remember me", "limit": 3}, ctx)
    assert data["status"] == "ok"
    assert data["components"][0]["name"] == "Checkbox"
    assert len(data["components"]) <= 3


def test_implementation_guide(ctx):
    data = call(ToolName.GET_IMPLEMENTATION_GUIDE, {"goal": "checkbox form"}, ctx)
    assert data["status"] == "ok"
    assert data["entries"]
    assert all(e["document"]["id"] for e in data["entries"])
    assert "@fluentui/react-checkbox" in data["packages"]


# ============ REINDEX ============


def test_reindex_success(ctx):
    data = call(ToolName.REINDEX, {}, ctx)
    assert data["success"] is True
    assert data["generation"] == 1
    assert data["indexed_files"] == INDEXED_COUNT
    assert data["failed_files"] == 1
    assert data["failures"][0]["path"] == "99-drafts/notes.md"


def test_reindex_failure_reports_active_generation(ctx, manager, docs_root):
    manager.rebuild()
    shutil.rmtree(docs_root)
    docs_root.mkdir()

    data = call(ToolName.REINDEX, {}, ctx)
    assert data["success"] is False
    assert "No documents could be indexed" in data["error"]
    assert data["active_generation"] == 1
    assert data["previous_count"] == INDEXED_COUNT


# ============ DISPATCHER ============


def test_dispatcher_requires_a_generation(manager, test_settings):
    dispatcher = ToolDispatcher(manager, test_settings)
    with pytest.raises(IndexNotReadyError):
        asyncio.run(dispatcher.execute(ToolName.SEARCH_DOCS, {"query": "input"}))


def test_dispatcher_reindex_before_first_build(manager, test_settings):
    dispatcher = ToolDispatcher(manager, test_settings)
    result = asyncio.run(dispatcher.execute("reindex"))
    assert result.data["success"] is True
    assert not result.is_error

    result = asyncio.run(dispatcher.execute(ToolName.QUERY_COMPONENT, {"componentName": "tabs"}))
    assert result.data["document"]["title"] == "TabList"


def test_dispatcher_rejects_unknown_tool(manager, test_settings):
    dispatcher = ToolDispatcher(manager, test_settings)
    with pytest.raises(ValueError):
        asyncio.run(dispatcher.execute("delete_everything"))
