"""Search and listing tool handlers.

Handles:
- search_docs: Ranked free-text search with category/module filters
- list_by_category: Documents of one category, or all categories with counts
- list_all_docs: Full inventory grouped by kind and category
"""

import logging
from typing import Any

from ...models import (
    CategoryInfo,
    CategoryListResult,
    InventoryResult,
    ListAllDocsParams,
    ListByCategoryParams,
    SearchDocsParams,
    SearchDocsResult,
    SearchHit,
    ToolResult,
)
from ..core.document import DocumentKind
from ..scoring.ranker import Query, QueryFilters, search
from .base import HandlerContext, document_info, error_result, model_result, parse_params

logger = logging.getLogger(__name__)


def _module_kind(module: str, ctx: HandlerContext) -> DocumentKind | None:
    kind = ctx.settings.module_kinds.get(module)
    if kind is None:
        try:
            return DocumentKind(module)
        except ValueError:
            return None
    return DocumentKind(kind)


async def handle_search_docs(params: dict[str, Any], ctx: HandlerContext) -> ToolResult:
    """Ranked search across the documentation.

    Args:
        params: Dict containing:
            - query: Free-text query
            - category: Optional category filter
            - module: Optional module filter (foundation, components, patterns, enterprise)
            - limit: Optional result cap (default/max from settings)

    Returns:
        ToolResult with SearchDocsResult
    """
    parsed, error = parse_params(SearchDocsParams, params, "search_docs")
    if error:
        return error

    generation = ctx.require_generation()
    limit = min(parsed.limit or ctx.settings.default_search_limit, ctx.settings.max_search_limit)

    kind = None
    if parsed.module is not None:
        kind = _module_kind(parsed.module.value, ctx)
        if kind is None:
            return error_result(f"search_docs: unknown module '{parsed.module.value}'", parsed.query)

    query = Query.parse(
        parsed.query,
        config=ctx.config,
        filters=QueryFilters(category=parsed.category, kind=kind),
    )
    results = search(query, generation.index, generation.store, limit=limit, config=ctx.config)

    hits = []
    for r in results:
        doc = generation.store.get_by_id(r.document_id)
        section = doc.sections[r.section_index].heading if r.section_index is not None else None
        hits.append(
            SearchHit(
                document=document_info(doc),
                score=round(r.score, 4),
                matched_fields=list(r.matched_fields),
                snippet=r.snippet,
                section=section or None,
            )
        )

    result = SearchDocsResult(
        query=parsed.query, terms=list(query.terms), total=len(hits), results=hits
    )
    return model_result(result, parsed.query)


async def handle_list_by_category(params: dict[str, Any], ctx: HandlerContext) -> ToolResult:
    """List the documents of a category, or every category when none is given.

    Args:
        params: Dict containing:
            - category: Optional category name
            - subcategory: Optional subcategory name

    Returns:
        ToolResult with CategoryListResult
    """
    parsed, error = parse_params(ListByCategoryParams, params, "list_by_category")
    if error:
        return error

    store = ctx.require_generation().store
    categories = [
        CategoryInfo(name=name, count=count, subcategories=dict(store.subcategories(name)))
        for name, count in store.categories()
    ]

    if not parsed.category:
        return model_result(CategoryListResult(categories=categories))

    docs = store.list_by_category(parsed.category, parsed.subcategory)
    result = CategoryListResult(
        category=parsed.category,
        subcategory=parsed.subcategory,
        found=bool(docs),
        documents=[document_info(d) for d in docs],
        # Unknown category: echo the known ones so the caller can retry
        categories=[] if docs else categories,
    )
    return model_result(result, parsed.category)


async def handle_list_all_docs(params: dict[str, Any], ctx: HandlerContext) -> ToolResult:
    """Full inventory: kind -> category -> documents.

    Returns:
        ToolResult with InventoryResult
    """
    _parsed, error = parse_params(ListAllDocsParams, params, "list_all_docs")
    if error:
        return error

    generation = ctx.require_generation()
    by_kind: dict[str, dict[str, list]] = {}
    for doc in generation.store.all_documents():
        by_kind.setdefault(doc.kind.value, {}).setdefault(doc.category, []).append(document_info(doc))

    result = InventoryResult(
        total=len(generation.store), generation=generation.number, by_kind=by_kind
    )
    return model_result(result)
