"""Pydantic models for the MCP tool server.

Import from submodules directly for cleaner imports:

    from toolhost.models.schema import ParamSpec, ToolDescriptor
"""

# ============ SCHEMA MODELS ============
from .schema import (
    PARAM_MARKER_SUFFIX,
    InputSchema,
    ParamSpec,
    PropertySchema,
    ToolDescriptor,
)

# ============ RESPONSE MODELS ============
from .responses import DiscoveryResponse, HealthResponse

__all__ = [
    # Schema
    "PARAM_MARKER_SUFFIX",
    "ParamSpec",
    "PropertySchema",
    "InputSchema",
    "ToolDescriptor",
    # Responses
    "HealthResponse",
    "DiscoveryResponse",
]
