"""FastAPI application for the FluentUI docs MCP server.

Endpoints:
- GET  /health      liveness
- GET  /ready       readiness (503 until the first index generation exists)
- GET  /            API info
- POST /mcp         MCP Streamable HTTP transport (JSON-RPC 2.0, batches allowed)
- POST /v1/tools    REST tool execution (MCPRequest -> MCPResponse)
- POST /v1/reindex  rebuild the index from disk
- GET  /v1/stats    statistics of the active generation
"""

import asyncio
import json
import logging
import time
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Annotated

from fastapi import Depends, FastAPI, HTTPException, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from . import __version__
from .config import settings
from .errors import DocsIndexError, DocsRootNotFoundError, IndexNotReadyError
from .logging_utils import setup_logging
from .mcp import PARSE_ERROR, ToolDispatcher, jsonrpc_error
from .middleware import RequestContextMiddleware
from .models import (
    HealthResponse,
    MCPRequest,
    MCPResponse,
    ReadyResponse,
    StatsResponse,
    ToolName,
    UsageInfo,
)
from .sources import create_index_manager

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup/shutdown."""
    # Startup
    setup_logging()
    logger.info(f"Starting {settings.server_name} v{__version__}")

    if not settings.debug and settings.cors_allowed_origins == "*":
        logger.warning(
            "CORS is configured to allow all origins ('*'). "
            "Set FLUENTUI_CORS_ALLOWED_ORIGINS to specific domains when exposed publicly."
        )

    try:
        manager = create_index_manager(settings)
    except DocsRootNotFoundError as e:
        logger.error(f"Cannot start: {e}")
        raise
    app.state.manager = manager
    app.state.dispatcher = ToolDispatcher(manager, settings)

    # Build the first generation off the event loop; readiness stays 503 on failure
    try:
        await asyncio.to_thread(manager.rebuild)
    except (DocsIndexError, OSError) as e:
        logger.error(f"Initial index build from {manager.source_root} failed: {e}")

    yield
    # Shutdown
    manager.abort()
    logger.info(f"Stopped {settings.server_name}")


app = FastAPI(
    title="FluentUI Docs MCP Server",
    description="MCP endpoint serving indexed FluentUI documentation",
    version=__version__,
    lifespan=lifespan,
)

# Request ids and timing headers
app.add_middleware(RequestContextMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=False,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization", "Mcp-Session-Id"],
)


def get_dispatcher(request: Request) -> ToolDispatcher:
    return request.app.state.dispatcher


Dispatcher = Annotated[ToolDispatcher, Depends(get_dispatcher)]


# ============ EXCEPTION HANDLERS ============


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException):
    """Handle HTTP exceptions with consistent response format."""
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "success": False,
            "error": exc.detail,
            "usage": {"latency_ms": 0},
        },
    )


@app.exception_handler(IndexNotReadyError)
async def index_not_ready_handler(request: Request, exc: IndexNotReadyError):
    return JSONResponse(
        status_code=503,
        content={
            "success": False,
            "error": str(exc),
            "usage": {"latency_ms": 0},
        },
    )


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    """Handle unexpected exceptions with sanitized error messages."""
    logger.error(f"Unhandled exception: {exc}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={
            "success": False,
            "error": "An internal server error occurred. Please try again.",
            "usage": {"latency_ms": 0},
        },
    )


# ============ HEALTH ENDPOINTS ============


@app.get("/health", response_model=HealthResponse, tags=["Health"])
async def health_check() -> HealthResponse:
    """Health check endpoint (lightweight liveness check)."""
    return HealthResponse(
        status="healthy",
        version=__version__,
        timestamp=datetime.now(timezone.utc),
    )


@app.get("/ready", tags=["Health"])
async def readiness_check(dispatcher: Dispatcher):
    """Readiness check - verifies an index generation is being served."""
    generation = dispatcher.manager.current
    checks = {
        "index": generation is not None,
        "rebuilding": dispatcher.manager.is_building,
    }
    ready = checks["index"]

    response = ReadyResponse(
        status="ready" if ready else "not_ready",
        version=__version__,
        checks=checks,
        generation=generation.number if generation else None,
    )
    return JSONResponse(
        content=response.model_dump(mode="json"),
        status_code=200 if ready else 503,
    )


@app.get("/", tags=["Health"])
async def root():
    """Root endpoint with API info."""
    return {
        "name": settings.server_name,
        "version": __version__,
        "docs_version": settings.version,
        "mcp": "/mcp",
        "docs": "/docs",
        "health": "/health",
    }


# ============ MCP ENDPOINTS ============


@app.post("/mcp", tags=["MCP Transport"])
async def mcp_transport_endpoint(request: Request, dispatcher: Dispatcher):
    """
    MCP Streamable HTTP endpoint (JSON-RPC format).

    Config example (Claude Code):
    ```json
    {"mcpServers": {"fluentui": {"type": "http", "url": "http://localhost:8000/mcp"}}}
    ```
    """
    try:
        body = json.loads(await request.body())
    except (json.JSONDecodeError, UnicodeDecodeError):
        return JSONResponse(jsonrpc_error(None, PARSE_ERROR, "Parse error"), status_code=400)

    response = await dispatcher.handle_payload(body)
    return JSONResponse(response) if response is not None else Response(status_code=204)


@app.post("/v1/tools", response_model=MCPResponse, tags=["MCP"])
async def tool_endpoint(request: MCPRequest, dispatcher: Dispatcher) -> MCPResponse:
    """
    Execute a docs tool.

    Args:
        request: The MCP request with tool and parameters

    Returns:
        MCPResponse with result or error
    """
    start_time = time.perf_counter()

    # IndexNotReadyError propagates to the 503 handler
    result = await dispatcher.execute(request.tool, request.params)

    latency_ms = int((time.perf_counter() - start_time) * 1000)
    logger.debug(f"{request.tool.value} finished in {latency_ms}ms")

    return MCPResponse(
        success=not result.is_error,
        result=result.data,
        error=result.data.get("error"),
        usage=UsageInfo(
            input_tokens=result.input_tokens,
            output_tokens=result.output_tokens,
            latency_ms=latency_ms,
        ),
    )


@app.post("/v1/reindex", response_model=MCPResponse, tags=["MCP"])
async def reindex_endpoint(dispatcher: Dispatcher) -> MCPResponse:
    """Rebuild the index from disk.

    A failed rebuild keeps the previous generation serving; the response
    carries the error and the generation still active.
    """
    start_time = time.perf_counter()
    result = await dispatcher.execute(ToolName.REINDEX, {})
    latency_ms = int((time.perf_counter() - start_time) * 1000)

    return MCPResponse(
        success=bool(result.data.get("success")),
        result=result.data,
        error=result.data.get("error"),
        usage=UsageInfo(latency_ms=latency_ms),
    )


@app.get("/v1/stats", response_model=StatsResponse, tags=["MCP"])
async def stats_endpoint(dispatcher: Dispatcher) -> StatsResponse:
    """Statistics of the active index generation."""
    generation = dispatcher.manager.require()
    stats = generation.stats
    return StatsResponse(
        server_name=settings.server_name,
        generation=generation.number,
        source_root=generation.source_root,
        built_at=generation.built_at,
        documents=generation.document_count,
        terms=generation.index.vocabulary_size,
        indexed_files=stats.indexed_files,
        failed_files=stats.failed_files,
        duration_ms=round(stats.duration_ms, 2),
        by_kind=dict(stats.by_kind),
        by_category=dict(stats.by_category),
    )


def main() -> None:
    """Run the HTTP server with uvicorn."""
    import uvicorn

    uvicorn.run(
        "fluentui_docs.server:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )


if __name__ == "__main__":
    main()
