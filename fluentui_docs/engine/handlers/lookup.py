"""Component lookup tool handlers.

Handles:
- query_component: Full documentation of one component (exact or alias lookup)
- get_component_examples: Labelled TS/TSX code examples of a component
- get_props_reference: Props section or inline prop tables of a component

A name that resolves to nothing is a normal ``found: false`` result listing
the available components, never an error.
"""

import logging
from typing import Any

from ...models import (
    CodeExample,
    ComponentDocResult,
    ComponentExamplesParams,
    ComponentExamplesResult,
    PropsReferenceParams,
    PropsReferenceResult,
    QueryComponentParams,
    SectionInfo,
    ToolResult,
)
from ..core.document import Document
from ..core.markdown import extract_code_blocks, extract_prop_tables, extract_props_section
from ..scoring.constants import normalize_name
from .base import HandlerContext, document_info, model_result, parse_params

logger = logging.getLogger(__name__)


def _resolve(ctx: HandlerContext, name: str) -> tuple[Document | None, str | None]:
    """Look a component up; also return the canonical name when an alias matched."""
    store = ctx.require_generation().store
    doc = store.get_document(name)
    if doc is None:
        return None, None
    canonical = store.resolve_alias(name)
    direct = any(normalize_name(n) == normalize_name(name) for n in doc.component_names)
    return doc, canonical if canonical and not direct else None


async def handle_query_component(params: dict[str, Any], ctx: HandlerContext) -> ToolResult:
    """Return the full documentation of one component.

    Args:
        params: Dict containing:
            - componentName: Component name, alias, title, file stem or id

    Returns:
        ToolResult with ComponentDocResult
    """
    parsed, error = parse_params(QueryComponentParams, params, "query_component")
    if error:
        return error

    name = parsed.component_name
    doc, alias = _resolve(ctx, name)
    if doc is None:
        logger.debug(f"query_component: {name!r} not found")
        result = ComponentDocResult(
            found=False,
            query=name,
            available_components=ctx.require_generation().store.available_components(),
        )
        return model_result(result, name)

    result = ComponentDocResult(
        found=True,
        query=name,
        document=document_info(doc),
        import_statement=doc.import_statement,
        see_also=list(doc.see_also),
        sections=[SectionInfo(heading=s.heading, level=s.level) for s in doc.sections if s.heading],
        content=doc.raw_text,
        resolved_alias=alias,
    )
    return model_result(result, name)


async def handle_get_component_examples(params: dict[str, Any], ctx: HandlerContext) -> ToolResult:
    """Return the code examples of a component, labelled by section heading.

    Args:
        params: Dict containing:
            - componentName: Component name or alias

    Returns:
        ToolResult with ComponentExamplesResult
    """
    parsed, error = parse_params(ComponentExamplesParams, params, "get_component_examples")
    if error:
        return error

    name = parsed.component_name
    doc, _alias = _resolve(ctx, name)
    if doc is None:
        result = ComponentExamplesResult(
            found=False,
            query=name,
            available_components=ctx.require_generation().store.available_components(),
        )
        return model_result(result, name)

    examples = [
        CodeExample(heading=block.heading, language=block.language, code=block.code)
        for block in extract_code_blocks(doc.raw_text)
    ]
    result = ComponentExamplesResult(
        found=True,
        query=name,
        document=document_info(doc),
        import_statement=doc.import_statement,
        examples=examples,
    )
    return model_result(result, name)


async def handle_get_props_reference(params: dict[str, Any], ctx: HandlerContext) -> ToolResult:
    """Return the props reference of a component.

    Prefers a ``## Props`` / ``## Props Reference`` section; falls back to
    inline tables whose header looks like a props table.

    Args:
        params: Dict containing:
            - componentName: Component name or alias

    Returns:
        ToolResult with PropsReferenceResult
    """
    parsed, error = parse_params(PropsReferenceParams, params, "get_props_reference")
    if error:
        return error

    name = parsed.component_name
    doc, _alias = _resolve(ctx, name)
    if doc is None:
        result = PropsReferenceResult(
            found=False,
            query=name,
            available_components=ctx.require_generation().store.available_components(),
        )
        return model_result(result, name)

    section = extract_props_section(doc.raw_text)
    tables = [] if section else extract_prop_tables(doc.raw_text)
    result = PropsReferenceResult(
        found=True,
        query=name,
        document=document_info(doc),
        import_statement=doc.import_statement,
        source="section" if section else ("tables" if tables else None),
        props_section=section,
        tables=tables,
    )
    return model_result(result, name)
