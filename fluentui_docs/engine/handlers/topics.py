"""Foundation, pattern and enterprise tool handlers.

Handles:
- get_foundation: One foundation doc by topic (with aliases), or an overview
- get_pattern: Pattern docs of a category, or one pattern, or an overview
- get_enterprise: Enterprise docs of a topic group, or an overview
"""

import logging
from typing import Any

from ...models import (
    GetEnterpriseParams,
    GetFoundationParams,
    GetPatternParams,
    ToolResult,
    TopicResult,
    TopicSummary,
)
from ..core.document import DocumentKind
from ..topics import (
    ENTERPRISE_TOPIC_ALIASES,
    ENTERPRISE_TOPICS,
    FOUNDATION_TOPIC_ALIASES,
    FOUNDATION_TOPICS,
    aliases_for,
    enterprise_docs,
    find_foundation_doc,
    find_pattern,
    pattern_categories,
    pattern_docs,
    resolve_topic,
)
from .base import HandlerContext, document_info, model_result, parse_params

logger = logging.getLogger(__name__)


# ============ FOUNDATION ============


async def handle_get_foundation(params: dict[str, Any], ctx: HandlerContext) -> ToolResult:
    """Return a foundation document by topic, or an overview of all topics.

    Args:
        params: Dict containing:
            - topic: Optional topic or alias ("theming", "theme", "a11y", ...)

    Returns:
        ToolResult with TopicResult
    """
    parsed, error = parse_params(GetFoundationParams, params, "get_foundation")
    if error:
        return error

    store = ctx.require_generation().store
    module = DocumentKind.FOUNDATION.value

    if not parsed.topic:
        overview = []
        for key, info in FOUNDATION_TOPICS.items():
            doc = find_foundation_doc(store, key)
            overview.append(
                TopicSummary(
                    key=key,
                    display_name=info.display_name,
                    description=(doc.description if doc else None) or info.description,
                    aliases=aliases_for(key, FOUNDATION_TOPIC_ALIASES),
                    documents=[document_info(doc)] if doc else [],
                )
            )
        listed = {d.id for s in overview for d in s.documents}
        # Foundation docs outside the static topic set still show up in the overview
        extra = [document_info(d) for d in store.by_kind(DocumentKind.FOUNDATION) if d.id not in listed]
        return model_result(TopicResult(module=module, overview=overview, documents=extra))

    topic = resolve_topic(parsed.topic, FOUNDATION_TOPICS, FOUNDATION_TOPIC_ALIASES)
    doc = find_foundation_doc(store, topic) if topic else None
    if doc is None:
        # Foundation docs are open-ended: try the docs themselves before giving up
        candidate = store.get_document(parsed.topic)
        if candidate is not None and candidate.kind is DocumentKind.FOUNDATION:
            doc = candidate

    if doc is None:
        message = (
            f"Foundation topic '{topic}' is not indexed"
            if topic
            else f"Foundation topic '{parsed.topic}' not recognized"
        )
        result = TopicResult(
            module=module,
            topic=parsed.topic,
            found=False,
            message=message,
            overview=[
                TopicSummary(
                    key=key,
                    display_name=info.display_name,
                    description=info.description,
                    aliases=aliases_for(key, FOUNDATION_TOPIC_ALIASES),
                )
                for key, info in FOUNDATION_TOPICS.items()
            ],
        )
        return model_result(result, parsed.topic)

    result = TopicResult(
        module=module,
        topic=topic or parsed.topic,
        documents=[document_info(doc)],
        content=doc.raw_text,
    )
    return model_result(result, parsed.topic)


# ============ PATTERNS ============


async def handle_get_pattern(params: dict[str, Any], ctx: HandlerContext) -> ToolResult:
    """Return pattern docs of a category, or one named pattern.

    Args:
        params: Dict containing:
            - patternCategory: Optional category ("forms", "navigation", ...)
            - patternName: Optional pattern within the category

    Returns:
        ToolResult with TopicResult
    """
    parsed, error = parse_params(GetPatternParams, params, "get_pattern")
    if error:
        return error

    store = ctx.require_generation().store
    module = DocumentKind.PATTERN.value
    categories = pattern_categories(store)

    def overview() -> list[TopicSummary]:
        return [
            TopicSummary(
                key=name,
                display_name=name.replace("-", " ").title(),
                description=f"{count} pattern document(s)",
                documents=[document_info(d) for d in pattern_docs(store, name)],
            )
            for name, count in categories
        ]

    if not parsed.pattern_category:
        return model_result(TopicResult(module=module, overview=overview()))

    docs = pattern_docs(store, parsed.pattern_category)
    if not docs:
        result = TopicResult(
            module=module,
            topic=parsed.pattern_category,
            found=False,
            message=f"Pattern category '{parsed.pattern_category}' not found",
            overview=overview(),
        )
        return model_result(result, parsed.pattern_category)

    if not parsed.pattern_name:
        result = TopicResult(
            module=module,
            topic=parsed.pattern_category,
            documents=[document_info(d) for d in docs],
        )
        return model_result(result, parsed.pattern_category)

    doc = find_pattern(docs, parsed.pattern_name)
    if doc is None:
        result = TopicResult(
            module=module,
            topic=parsed.pattern_category,
            found=False,
            message=f"Pattern '{parsed.pattern_name}' not found in '{parsed.pattern_category}'",
            documents=[document_info(d) for d in docs],
        )
        return model_result(result, parsed.pattern_name)

    result = TopicResult(
        module=module,
        topic=parsed.pattern_category,
        documents=[document_info(doc)],
        content=doc.raw_text,
    )
    return model_result(result, parsed.pattern_name)


# ============ ENTERPRISE ============


async def handle_get_enterprise(params: dict[str, Any], ctx: HandlerContext) -> ToolResult:
    """Return enterprise docs of a topic group, or an overview of all groups.

    Args:
        params: Dict containing:
            - topic: Optional topic or alias ("dashboard", "kpi", "crud", ...)

    Returns:
        ToolResult with TopicResult
    """
    parsed, error = parse_params(GetEnterpriseParams, params, "get_enterprise")
    if error:
        return error

    store = ctx.require_generation().store
    module = DocumentKind.ENTERPRISE.value

    def overview(with_docs: bool) -> list[TopicSummary]:
        return [
            TopicSummary(
                key=key,
                display_name=info.display_name,
                description=info.description,
                aliases=aliases_for(key, ENTERPRISE_TOPIC_ALIASES),
                documents=[document_info(d) for d in enterprise_docs(store, key)] if with_docs else [],
            )
            for key, info in ENTERPRISE_TOPICS.items()
        ]

    if not parsed.topic:
        return model_result(TopicResult(module=module, overview=overview(with_docs=True)))

    topic = resolve_topic(parsed.topic, ENTERPRISE_TOPICS, ENTERPRISE_TOPIC_ALIASES)
    if topic is None:
        result = TopicResult(
            module=module,
            topic=parsed.topic,
            found=False,
            message=f"Enterprise topic '{parsed.topic}' not recognized",
            overview=overview(with_docs=False),
        )
        return model_result(result, parsed.topic)

    docs = enterprise_docs(store, topic)
    if not docs:
        result = TopicResult(
            module=module,
            topic=topic,
            found=False,
            message=f"No enterprise documentation indexed for topic '{topic}'",
        )
        return model_result(result, parsed.topic)

    result = TopicResult(
        module=module,
        topic=topic,
        documents=[document_info(d) for d in docs],
        content="\n\n---\n\n".join(d.raw_text for d in docs),
    )
    return model_result(result, parsed.topic)
