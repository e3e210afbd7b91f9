"""FastAPI MCP tool server."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

from . import __version__
from .config import settings
from .mcp import MCPHandler, ToolRegistry
from .mcp.transport import create_mcp_router
from .middleware import INTERNAL_ERROR_BODY, RequestIdMiddleware
from .models import HealthResponse
from .tools import BUILTIN_TOOLS

logger = logging.getLogger(__name__)

# ============ SENTRY INITIALIZATION ============


def _init_sentry() -> None:
    """Enable Sentry error tracking when a DSN is configured."""
    if not settings.sentry_dsn:
        logger.debug("Sentry DSN not configured - error tracking disabled")
        return
    try:
        import sentry_sdk
        from sentry_sdk.integrations.fastapi import FastApiIntegration
        from sentry_sdk.integrations.starlette import StarletteIntegration

        sentry_sdk.init(
            dsn=settings.sentry_dsn,
            environment=settings.environment,
            traces_sample_rate=0.1 if settings.environment == "production" else 1.0,
            integrations=[
                FastApiIntegration(),
                StarletteIntegration(),
            ],
        )
        logger.info("Sentry error tracking initialized")
    except ImportError:
        logger.warning("Sentry DSN configured but sentry-sdk not installed")


# ============ REGISTRY ============


def build_default_registry() -> ToolRegistry:
    """Registry with the configured identity, prompts and built-in tools."""
    registry = ToolRegistry(settings.server_name, settings.server_version)
    for tool in BUILTIN_TOOLS:
        registry.add_tool(tool)
    for prompt in settings.prompts:
        registry.add_prompt(prompt)
    return registry


# ============ APPLICATION ============


def create_app(registry: ToolRegistry | None = None, mcp_path: str | None = None) -> FastAPI:
    """Build the FastAPI application serving ``registry`` over MCP at ``mcp_path``."""
    if registry is None:
        registry = build_default_registry()
    mcp_path = mcp_path or settings.mcp_path

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """Application lifespan handler for startup/shutdown."""
        logger.info(
            f"Starting MCP server {registry.name} v{registry.version} "
            f"({len(registry.tools)} tools, {len(registry.prompts)} prompts) at {mcp_path}"
        )

        if not settings.debug and settings.cors_allowed_origins == "*":
            logger.warning(
                "CORS is configured to allow all origins ('*'). "
                "Set TOOLHOST_CORS_ALLOWED_ORIGINS to specific domains in production."
            )
        yield
        logger.info("MCP server stopped")

    app = FastAPI(
        title=registry.name,
        description="MCP tool server (JSON-RPC 2.0 over HTTP)",
        version=registry.version,
        lifespan=lifespan,
    )
    app.state.mcp_handler = MCPHandler(registry)

    app.add_middleware(RequestIdMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization", "Mcp-Session-Id"],
    )

    app.include_router(create_mcp_router(mcp_path))

    # ============ EXCEPTION HANDLERS ============

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        """Handle HTTP exceptions with a consistent response format."""
        return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        """Generic 500 for failures outside RequestIdMiddleware (logged there otherwise)."""
        return JSONResponse(status_code=500, content=INTERNAL_ERROR_BODY)

    # ============ HEALTH ENDPOINTS ============

    @app.get("/health", response_model=HealthResponse, tags=["Health"])
    async def health_check() -> HealthResponse:
        """Health check endpoint (lightweight liveness check)."""
        return HealthResponse(
            status="healthy",
            version=registry.version,
            timestamp=datetime.now(timezone.utc),
        )

    return app


_init_sentry()

app = create_app()


# ============ MAIN ============


def main():
    """Run the server with uvicorn."""
    import uvicorn

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info(f"toolhost v{__version__}")
    uvicorn.run(
        "toolhost.server:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )


if __name__ == "__main__":
    main()
