"""toolhost - MCP over JSON-RPC 2.0 tool server."""

__version__ = "0.1.0"
