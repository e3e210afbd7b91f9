"""Response models for the HTTP surface outside JSON-RPC."""

from datetime import datetime

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Liveness check response."""

    status: str = Field(..., description="Service status")
    version: str = Field(..., description="Server version")
    timestamp: datetime = Field(..., description="Time the check was answered")


class DiscoveryResponse(BaseModel):
    """Capability response for non-RPC callers of the MCP endpoint."""

    name: str
    version: str
    protocol: str = "MCP over JSON-RPC 2.0"
