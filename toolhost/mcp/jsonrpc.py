"""JSON-RPC 2.0 helpers for the MCP transport.

This module provides utility functions for creating JSON-RPC 2.0
success and error responses.

See: https://www.jsonrpc.org/specification
"""

from typing import Any

JSONRPC_VERSION = "2.0"


def jsonrpc_response(id: Any, result: Any) -> dict:
    """Create a JSON-RPC 2.0 success response.

    Args:
        id: Request ID (echoed from the request)
        result: The result payload

    Returns:
        JSON-RPC 2.0 response dict
    """
    return {"jsonrpc": JSONRPC_VERSION, "id": id, "result": result}


def jsonrpc_error(id: Any, code: int, message: str, data: Any = None) -> dict:
    """Create a JSON-RPC 2.0 error response.

    Standard error codes:
        -32700: Parse error
        -32600: Invalid request
        -32601: Method not found
        -32602: Invalid params
        -32603: Internal error

    Args:
        id: Request ID (None when the envelope could not be parsed)
        code: Error code (negative integer)
        message: Short human-readable error message
        data: Additional detail about the failure

    Returns:
        JSON-RPC 2.0 error response dict
    """
    return {
        "jsonrpc": JSONRPC_VERSION,
        "id": id,
        "error": {"code": code, "message": message, "data": data},
    }


# Standard JSON-RPC error codes
PARSE_ERROR = -32700
INVALID_REQUEST = -32600
METHOD_NOT_FOUND = -32601
INVALID_PARAMS = -32602
INTERNAL_ERROR = -32603
