"""MCP protocol handler.

Turns one inbound HTTP call (method + raw body) into one reply. Non-POST
calls get a discovery object; POST bodies are parsed as JSON-RPC 2.0
envelopes and dispatched to the five supported MCP methods.

Tool failures raised while constructing or calling a tool are not caught
here; the host application decides how to report them.
"""

import json
import logging
from dataclasses import dataclass
from typing import Any

from ..models import DiscoveryResponse
from .jsonrpc import (
    INVALID_PARAMS,
    INVALID_REQUEST,
    JSONRPC_VERSION,
    METHOD_NOT_FOUND,
    PARSE_ERROR,
    jsonrpc_error,
    jsonrpc_response,
)
from .registry import ToolRegistry
from .schema import build_tool_descriptor

logger = logging.getLogger(__name__)

MCP_PROTOCOL_VERSION = "2024-11-05"
DEFAULT_PROMPT_NAME = "default"


@dataclass(frozen=True)
class MCPReply:
    """HTTP-level outcome of handling one call."""

    status_code: int = 200
    payload: dict | None = None


NO_CONTENT = MCPReply(status_code=204)


def result_to_text(result: Any) -> str:
    """Render a tool result as the text of an MCP content block."""
    if isinstance(result, str):
        return result
    if isinstance(result, (dict, list)):
        return json.dumps(result, indent=2, default=str)
    return str(result)


class MCPHandler:
    """Stateless JSON-RPC front end over a ToolRegistry."""

    def __init__(self, registry: ToolRegistry):
        self.registry = registry
        self._methods = {
            "initialize": self._initialize,
            "tools/list": self._tools_list,
            "tools/call": self._tools_call,
            "prompts/list": self._prompts_list,
        }

    def handle(self, http_method: str, body: str | bytes | None) -> MCPReply:
        """Handle one HTTP call."""
        if http_method.upper() != "POST":
            return MCPReply(payload=self.discovery())

        if not body or not body.strip():
            logger.warning("Rejecting MCP request with empty body")
            return MCPReply(payload=jsonrpc_error(None, PARSE_ERROR, "Parse error", "Empty request body"))

        try:
            envelope = json.loads(body)
        except ValueError as e:
            logger.warning(f"Rejecting unparseable MCP request: {e}")
            return MCPReply(payload=jsonrpc_error(None, PARSE_ERROR, "Parse error", str(e)))

        if not isinstance(envelope, dict):
            logger.warning(f"Rejecting non-object JSON-RPC envelope: {type(envelope).__name__}")
            return MCPReply(
                payload=jsonrpc_error(None, INVALID_REQUEST, "Invalid Request", "Request must be a JSON object")
            )

        return self.dispatch(envelope)

    def dispatch(self, envelope: dict) -> MCPReply:
        """Validate a parsed envelope and run the requested method."""
        id = envelope.get("id")
        if envelope.get("jsonrpc") != JSONRPC_VERSION:
            logger.warning(f"Invalid jsonrpc version {envelope.get('jsonrpc')!r} (id={id!r})")
            return MCPReply(
                payload=jsonrpc_error(id, INVALID_REQUEST, "Invalid Request", "Missing or invalid jsonrpc version")
            )

        method = envelope.get("method")
        params = envelope.get("params")
        if not isinstance(params, dict):
            params = {}

        logger.debug(f"Dispatching {method!r} (id={id!r})")

        if method == "notifications/initialized":
            return NO_CONTENT

        handler = self._methods.get(method) if isinstance(method, str) else None
        if handler is None:
            return MCPReply(
                payload=jsonrpc_error(id, METHOD_NOT_FOUND, "Method not found", f"Unknown method: {method}")
            )
        return MCPReply(payload=handler(id, params))

    def discovery(self) -> dict:
        """Capability object returned to non-RPC callers."""
        return DiscoveryResponse(name=self.registry.name, version=self.registry.version).model_dump()

    # ============ METHODS ============

    def _initialize(self, id: Any, params: dict) -> dict:
        client = params.get("clientInfo")
        if client:
            logger.info(f"MCP session initialized by client {client}")
        return jsonrpc_response(
            id,
            {
                "protocolVersion": MCP_PROTOCOL_VERSION,
                "capabilities": {"tools": {}, "prompts": {}},
                "serverInfo": {"name": self.registry.name, "version": self.registry.version},
            },
        )

    def _tools_list(self, id: Any, params: dict) -> dict:
        tools = [build_tool_descriptor(tool).to_wire() for tool in self.registry.tools]
        return jsonrpc_response(id, {"tools": tools})

    def _tools_call(self, id: Any, params: dict) -> dict:
        name = params.get("name")
        arguments = params.get("arguments", {})

        tool = self.registry.get_tool(name) if isinstance(name, str) else None
        if tool is None:
            logger.warning(f"tools/call for unknown tool {name!r}")
            return jsonrpc_error(id, INVALID_PARAMS, "Tool not found", name)

        logger.info(f"Calling tool {name}")
        result = tool(arguments).call()
        return jsonrpc_response(id, {"content": [{"type": "text", "text": result_to_text(result)}]})

    def _prompts_list(self, id: Any, params: dict) -> dict:
        prompts = [{"name": DEFAULT_PROMPT_NAME, "description": text} for text in self.registry.prompts]
        return jsonrpc_response(id, {"prompts": prompts})
