"""ASGI middleware for the FastAPI application.

This module provides:
- Request IDs (X-Request-Id), access logging and the generic 500 body
"""

from .request_id import INTERNAL_ERROR_BODY, RequestIdMiddleware

__all__ = [
    "RequestIdMiddleware",
    "INTERNAL_ERROR_BODY",
]
