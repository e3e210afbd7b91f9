"""Request ID and access log middleware.

Tags every HTTP response with an ``X-Request-Id`` (reusing the caller's
one when present) and logs one access line per request. Unhandled
exceptions are rendered here as a generic 500 so error responses carry
the same headers, then re-raised to the server.
"""

import logging
import time
from uuid import uuid4

from starlette.responses import JSONResponse

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = b"x-request-id"
INTERNAL_ERROR_BODY = {"error": "An internal server error occurred."}


class RequestIdMiddleware:
    """
    Pure ASGI middleware (no BaseHTTPMiddleware) so streamed and empty
    responses pass through untouched.

    Headers added:
        - X-Request-Id: inbound value or a fresh UUID4
        - X-Content-Type-Options: nosniff
    """

    def __init__(self, app):
        self.app = app

    async def __call__(self, scope, receive, send):
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        inbound = dict(scope.get("headers", [])).get(REQUEST_ID_HEADER)
        request_id = inbound.decode("latin-1") if inbound else str(uuid4())
        scope.setdefault("state", {})["request_id"] = request_id
        start_time = time.perf_counter()
        status_code = 500
        response_started = False

        async def send_with_headers(message):
            nonlocal status_code, response_started
            if message["type"] == "http.response.start":
                response_started = True
                status_code = message["status"]
                headers = list(message.get("headers", []))
                headers.append((REQUEST_ID_HEADER, request_id.encode("latin-1")))
                headers.append((b"x-content-type-options", b"nosniff"))
                message = {**message, "headers": headers}
            await send(message)

        try:
            await self.app(scope, receive, send_with_headers)
        except Exception as e:
            logger.error(f"Unhandled exception [{request_id}]: {e}", exc_info=True)
            if not response_started:
                response = JSONResponse(INTERNAL_ERROR_BODY, status_code=500)
                await response(scope, receive, send_with_headers)
            raise
        finally:
            latency_ms = int((time.perf_counter() - start_time) * 1000)
            logger.info(
                f"{scope['method']} {scope['path']} -> {status_code} ({latency_ms}ms) [{request_id}]"
            )
