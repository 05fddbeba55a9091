"""Index lifecycle tool handler.

Handles:
- reindex: Rebuild the index from the docs root and swap it in

The rebuild runs in a worker thread. On failure the previous generation keeps
serving and is reported back.
"""

import asyncio
import logging
from typing import Any

from ...models import ReindexParams, ReindexResult, ToolResult
from .base import HandlerContext, error_result, model_result, parse_params

logger = logging.getLogger(__name__)


async def handle_reindex(params: dict[str, Any], ctx: HandlerContext) -> ToolResult:
    """Rebuild the index.

    Returns:
        ToolResult with ReindexResult: build statistics on success, the
        error and the still-active generation on failure
    """
    _parsed, error = parse_params(ReindexParams, params, "reindex")
    if error:
        return error
    if ctx.manager is None:
        return error_result("reindex: no index manager configured")

    outcome = await asyncio.to_thread(ctx.manager.reindex)

    if not outcome.published:
        result = ReindexResult(
            success=False,
            error=str(outcome.error),
            previous_count=outcome.previous_count,
            active_generation=outcome.active.number if outcome.active else None,
        )
        return model_result(result)

    stats = outcome.active.stats
    logger.info(
        f"Reindexed generation {outcome.active.number}: "
        f"{stats.indexed_files} indexed, {stats.failed_files} failed"
    )
    result = ReindexResult(
        success=True,
        generation=outcome.active.number,
        indexed_files=stats.indexed_files,
        failed_files=stats.failed_files,
        duration_ms=round(stats.duration_ms, 2),
        previous_count=outcome.previous_count,
        failures=[{"path": f.path, "reason": f.reason} for f in stats.failures],
        active_generation=outcome.active.number,
    )
    return model_result(result)
