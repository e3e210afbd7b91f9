"""MCP (Model Context Protocol) server core.

This package contains the components behind the MCP endpoint:
- Tool interface and parameter declarations
- Tool/prompt registry
- Input schema synthesis for tools/list
- JSON-RPC 2.0 helpers
- Protocol handler (transport independent)

The FastAPI router lives in .transport and is imported by the app.
"""

from .handler import MCP_PROTOCOL_VERSION, MCPHandler, MCPReply
from .jsonrpc import (
    INTERNAL_ERROR,
    INVALID_PARAMS,
    INVALID_REQUEST,
    METHOD_NOT_FOUND,
    PARSE_ERROR,
    jsonrpc_error,
    jsonrpc_response,
)
from .registry import ToolRegistry, camel_case_name
from .schema import build_input_schema, build_tool_descriptor
from .tools import Tool, param

__all__ = [
    # Tools and registry
    "Tool",
    "param",
    "ToolRegistry",
    "camel_case_name",
    # Schema synthesis
    "build_input_schema",
    "build_tool_descriptor",
    # Handler
    "MCPHandler",
    "MCPReply",
    "MCP_PROTOCOL_VERSION",
    # JSON-RPC helpers
    "jsonrpc_response",
    "jsonrpc_error",
    "PARSE_ERROR",
    "INVALID_REQUEST",
    "METHOD_NOT_FOUND",
    "INVALID_PARAMS",
    "INTERNAL_ERROR",
]
