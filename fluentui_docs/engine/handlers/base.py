"""Base infrastructure for tool handlers.

This module provides the common types and utilities used by all handler modules.
Each handler receives a HandlerContext with the generation resolved at call
start and returns a ToolResult. Handlers never raise for bad input: validation
problems come back as ``{"error": ...}`` data.
"""

import json
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable, Coroutine, TypeVar

from pydantic import BaseModel, ValidationError

from ...errors import IndexNotReadyError
from ...models import DocumentInfo, ToolResult
from ..core.document import Document, Generation
from ..scoring.constants import DEFAULT_SCORING, ScoringConfig

if TYPE_CHECKING:
    from ...config import Settings
    from ..builder import IndexManager

ParamsT = TypeVar("ParamsT", bound=BaseModel)


@dataclass
class HandlerContext:
    """Context object passed to all handlers.

    The generation is taken from the index manager once, before the handler
    runs, so a reindex finishing mid-call never changes what the handler reads.
    """

    # Active generation at call start (None only before the first build)
    generation: Generation | None

    # Server settings (limits, synthesis sizes)
    settings: "Settings"

    # Scoring policy shared with the index build
    config: ScoringConfig = field(default=DEFAULT_SCORING)

    # Index manager, needed by the reindex handler
    manager: "IndexManager | None" = None

    def require_generation(self) -> Generation:
        if self.generation is None:
            raise IndexNotReadyError("No index generation has been published yet")
        return self.generation


# Type alias for handler functions
HandlerFunc = Callable[
    [dict[str, Any], HandlerContext],
    Coroutine[Any, Any, ToolResult],
]


def count_tokens(text: str) -> int:
    """Estimate token count for a string.

    Uses a simple heuristic of ~4 characters per token.
    This is a reasonable approximation for English text.
    """
    if not text:
        return 0
    return max(1, len(text) // 4)


def error_result(message: str, input_text: str = "", **extra: Any) -> ToolResult:
    return ToolResult(
        data={"error": message, **extra},
        input_tokens=count_tokens(input_text),
        output_tokens=0,
    )


def model_result(result: BaseModel, input_text: str = "") -> ToolResult:
    """Wrap a result model, estimating tokens from its JSON form."""
    data = result.model_dump(mode="json")
    return ToolResult(
        data=data,
        input_tokens=count_tokens(input_text),
        output_tokens=count_tokens(json.dumps(data)),
    )


def parse_params(
    model: type[ParamsT], params: dict[str, Any], tool: str
) -> tuple[ParamsT | None, ToolResult | None]:
    """Validate tool params; return ``(params, None)`` or ``(None, error result)``."""
    try:
        return model.model_validate(params or {}), None
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(p) for p in err['loc']) or 'params'}: {err['msg']}" for err in e.errors()
        )
        return None, error_result(f"{tool}: invalid parameters: {problems}")


def document_info(doc: Document) -> DocumentInfo:
    return DocumentInfo(**doc.summary())
