"""Synthesis tool handlers.

Handles:
- suggest_components: Ranked components for a UI description
- get_implementation_guide: Per-category retrieved sections for a goal

Both report ``insufficient_input`` for empty or stop-word-only text.
"""

from typing import Any

from ...models import (
    GuideEntryInfo,
    ImplementationGuideParams,
    ImplementationGuideResult,
    SuggestComponentsParams,
    SuggestComponentsResult,
    SuggestedComponent,
    ToolResult,
)
from ..synthesis import SynthesisStatus, build_guide, suggest_components
from .base import HandlerContext, document_info, model_result, parse_params

STATUS_MESSAGES = {
    SynthesisStatus.INSUFFICIENT_INPUT: (
        "No sufficiently specific terms in the input. Describe the UI with concrete "
        "words such as 'login form with password field' or 'sortable data table'."
    ),
    SynthesisStatus.NO_MATCH: "No documentation matched the input.",
}


async def handle_suggest_components(params: dict[str, Any], ctx: HandlerContext) -> ToolResult:
    """Suggest components for a UI description.

    Args:
        params: Dict containing:
            - uiDescription: Free-text description of the UI
            - limit: Optional maximum number of components

    Returns:
        ToolResult with SuggestComponentsResult
    """
    parsed, error = parse_params(SuggestComponentsParams, params, "suggest_components")
    if error:
        return error

    suggestions = suggest_components(
        ctx.require_generation(),
        parsed.ui_description,
        limit=parsed.limit or ctx.settings.suggestion_limit,
        config=ctx.config,
    )
    result = SuggestComponentsResult(
        status=suggestions.status.value,
        query=suggestions.query,
        terms=list(suggestions.terms),
        components=[
            SuggestedComponent(
                name=c.name,
                score=round(c.score, 4),
                document_id=c.document_id,
                category=c.category,
                rationale=c.rationale,
                package=c.package,
                import_statement=c.import_statement,
            )
            for c in suggestions.components
        ],
        message=STATUS_MESSAGES.get(suggestions.status),
    )
    return model_result(result, parsed.ui_description)


async def handle_get_implementation_guide(params: dict[str, Any], ctx: HandlerContext) -> ToolResult:
    """Assemble an implementation guide for a goal.

    Every entry names the document and section it was retrieved from.

    Args:
        params: Dict containing:
            - goal: What the UI should accomplish
            - per_category: Optional entries per category
            - max_entries: Optional overall cap

    Returns:
        ToolResult with ImplementationGuideResult
    """
    parsed, error = parse_params(ImplementationGuideParams, params, "get_implementation_guide")
    if error:
        return error

    guide = build_guide(
        ctx.require_generation(),
        parsed.goal,
        per_category=parsed.per_category or ctx.settings.guide_per_category,
        max_entries=parsed.max_entries or ctx.settings.guide_max_entries,
        config=ctx.config,
    )
    result = ImplementationGuideResult(
        status=guide.status.value,
        goal=guide.goal,
        terms=list(guide.terms),
        entries=[
            GuideEntryInfo(
                category=e.category,
                document=document_info(e.document),
                section=(e.section.heading or None) if e.section else None,
                section_text=e.section.text if e.section else None,
                snippet=e.snippet,
                score=round(e.score, 4),
            )
            for e in guide.entries
        ],
        imports=list(guide.imports),
        packages=list(guide.packages),
        message=STATUS_MESSAGES.get(guide.status),
    )
    return model_result(result, parsed.goal)
