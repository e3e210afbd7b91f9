"""MCP HTTP transport.

Single endpoint: POST carries a JSON-RPC envelope, any other method
returns the discovery object. The MCPHandler is taken from
``app.state.mcp_handler`` (set by ``create_app``).
"""

from fastapi import APIRouter, Request, Response
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool

from .handler import MCPHandler

# Every non-POST verb is answered by the handler with the discovery object.
# CORS preflights are intercepted earlier by CORSMiddleware.
MCP_HTTP_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS", "TRACE", "CONNECT"]


def get_handler(request: Request) -> MCPHandler:
    return request.app.state.mcp_handler


async def mcp_transport_endpoint(request: Request) -> Response:
    """
    MCP endpoint (JSON-RPC 2.0 over HTTP).

    Config example (Claude Desktop / Claude Code):
    ```json
    {"mcpServers": {"toolhost": {"type": "http", "url": "http://localhost:8000/mcp"}}}
    ```
    """
    handler = get_handler(request)
    body = await request.body() if request.method == "POST" else None

    # Tools may block; keep them off the event loop
    reply = await run_in_threadpool(handler.handle, request.method, body)

    if reply.payload is None:
        return Response(status_code=reply.status_code)
    return JSONResponse(reply.payload, status_code=reply.status_code)


def create_mcp_router(path: str) -> APIRouter:
    """Router serving the MCP endpoint at ``path``."""
    router = APIRouter(tags=["MCP Transport"])
    router.add_api_route(path, mcp_transport_endpoint, methods=MCP_HTTP_METHODS)
    return router
