"""JSON-RPC 2.0 helpers for the MCP transports.

Used by both the HTTP ``/mcp`` endpoint and the stdio transport.

See: https://www.jsonrpc.org/specification
"""

import json
from typing import Any

MCP_PROTOCOL_VERSION = "2024-11-05"

# Standard JSON-RPC error codes
PARSE_ERROR = -32700
INVALID_REQUEST = -32600
METHOD_NOT_FOUND = -32601
INVALID_PARAMS = -32602
INTERNAL_ERROR = -32603
INDEX_NOT_READY = -32001


def jsonrpc_response(id: Any, result: Any) -> dict:
    """Create a JSON-RPC 2.0 success response.

    Args:
        id: Request ID (must match the request)
        result: The result payload

    Returns:
        JSON-RPC 2.0 response dict
    """
    return {"jsonrpc": "2.0", "id": id, "result": result}


def jsonrpc_error(id: Any, code: int, message: str) -> dict:
    """Create a JSON-RPC 2.0 error response.

    Args:
        id: Request ID (can be None for parse errors)
        code: Error code (negative integer)
        message: Human-readable error message

    Returns:
        JSON-RPC 2.0 error response dict
    """
    return {"jsonrpc": "2.0", "id": id, "error": {"code": code, "message": message}}


def tool_call_result(data: dict, is_error: bool = False) -> dict:
    """Wrap a tool payload as MCP ``tools/call`` content (one JSON text block)."""
    return {
        "content": [{"type": "text", "text": json.dumps(data, indent=2, default=str)}],
        "isError": is_error,
    }
