"""MCP (Model Context Protocol) transport module.

This module contains components shared by the MCP transports:
- Tool definitions for tools/list
- JSON-RPC 2.0 helpers
- ToolDispatcher, which runs tools and answers JSON-RPC methods

The HTTP endpoint lives in server.py; the stdio loop in stdio.py.
"""

from .jsonrpc import (
    INDEX_NOT_READY,
    INTERNAL_ERROR,
    INVALID_PARAMS,
    INVALID_REQUEST,
    MCP_PROTOCOL_VERSION,
    METHOD_NOT_FOUND,
    PARSE_ERROR,
    jsonrpc_error,
    jsonrpc_response,
    tool_call_result,
)
from .tool_defs import TOOL_DEFINITIONS
from .transport import ToolDispatcher

__all__ = [
    # Tool definitions
    "TOOL_DEFINITIONS",
    # Dispatch
    "ToolDispatcher",
    # JSON-RPC helpers
    "jsonrpc_response",
    "jsonrpc_error",
    "tool_call_result",
    "MCP_PROTOCOL_VERSION",
    "PARSE_ERROR",
    "INVALID_REQUEST",
    "METHOD_NOT_FOUND",
    "INVALID_PARAMS",
    "INTERNAL_ERROR",
    "INDEX_NOT_READY",
]
