"""Tool dispatch and JSON-RPC request handling shared by the transports.

``ToolDispatcher`` resolves the active generation once per call, builds the
handler context and runs the tool handler. ``handle_message`` implements the
MCP methods (initialize, tools/list, tools/call, ping) on top of it.
"""

import logging
from typing import Any

from .. import __version__
from ..config import Settings
from ..engine.builder import IndexManager
from ..engine.handlers import HANDLERS, NO_GENERATION_TOOLS, HandlerContext
from ..errors import IndexNotReadyError
from ..models import ToolName, ToolResult
from .jsonrpc import (
    INDEX_NOT_READY,
    INTERNAL_ERROR,
    INVALID_PARAMS,
    INVALID_REQUEST,
    MCP_PROTOCOL_VERSION,
    METHOD_NOT_FOUND,
    jsonrpc_error,
    jsonrpc_response,
    tool_call_result,
)
from .tool_defs import TOOL_DEFINITIONS

logger = logging.getLogger(__name__)


class ToolDispatcher:
    """Runs docs tools against the manager's active generation."""

    def __init__(self, manager: IndexManager, settings: Settings):
        self.manager = manager
        self.settings = settings

    def context(self) -> HandlerContext:
        # One read of the generation cell per call
        return HandlerContext(
            generation=self.manager.current,
            settings=self.settings,
            config=self.manager.config,
            manager=self.manager,
        )

    async def execute(self, tool: ToolName | str, params: dict[str, Any] | None = None) -> ToolResult:
        """Execute one tool.

        Raises:
            ValueError: If ``tool`` is not a known tool name.
            IndexNotReadyError: If no generation is published and the tool needs one.
        """
        tool = ToolName(tool)
        ctx = self.context()
        if ctx.generation is None and tool not in NO_GENERATION_TOOLS:
            raise IndexNotReadyError("The docs index is still building; retry shortly")
        logger.debug(f"Executing {tool.value} on generation {ctx.generation.number if ctx.generation else None}")
        return await HANDLERS[tool](params or {}, ctx)

    # ============ JSON-RPC ============

    async def handle_message(self, body: Any) -> dict | None:
        """Handle one JSON-RPC request; returns None for notifications."""
        if not isinstance(body, dict) or body.get("jsonrpc") not in (None, "2.0"):
            return jsonrpc_error(None, INVALID_REQUEST, "Invalid Request")

        method = body.get("method")
        id = body.get("id")
        params = body.get("params") or {}

        if id is None:  # Notification - no response
            return None

        if method == "initialize":
            return jsonrpc_response(
                id,
                {
                    "protocolVersion": MCP_PROTOCOL_VERSION,
                    "serverInfo": {"name": self.settings.server_name, "version": __version__},
                    "capabilities": {"tools": {}},
                },
            )
        elif method == "tools/list":
            return jsonrpc_response(id, {"tools": TOOL_DEFINITIONS})
        elif method == "tools/call":
            return await self._call_tool(id, params)
        elif method == "ping":
            return jsonrpc_response(id, {})
        else:
            return jsonrpc_error(id, METHOD_NOT_FOUND, f"Method not found: {method}")

    async def handle_payload(self, body: Any) -> dict | list | None:
        """Handle a single request or a batch."""
        if isinstance(body, list):
            if not body:
                return jsonrpc_error(None, INVALID_REQUEST, "Invalid Request")
            responses = []
            for item in body:
                response = await self.handle_message(item)
                if response:  # Skip notifications (no id)
                    responses.append(response)
            return responses or None
        return await self.handle_message(body)

    async def _call_tool(self, id: Any, params: dict) -> dict:
        """Handle MCP tools/call request."""
        if not isinstance(params, dict):
            return jsonrpc_error(id, INVALID_PARAMS, "tools/call params must be an object")
        tool_name = params.get("name")
        arguments = params.get("arguments") or {}

        try:
            tool = ToolName(tool_name)
        except ValueError:
            return jsonrpc_error(id, INVALID_PARAMS, f"Unknown tool: {tool_name}")

        try:
            result = await self.execute(tool, arguments)
        except IndexNotReadyError as e:
            return jsonrpc_error(id, INDEX_NOT_READY, str(e))
        except Exception as e:
            logger.error(f"Tool {tool.value} failed: {e}", exc_info=True)
            return jsonrpc_error(id, INTERNAL_ERROR, f"Internal error while running {tool.value}")

        return jsonrpc_response(id, tool_call_result(result.data, is_error=result.is_error))
