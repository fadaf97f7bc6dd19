"""
Books API: Request ID Middleware
==================================

What:  Gives every request a short correlation id and returns it in X-Request-ID.
How:   Reuses a client-supplied X-Request-ID header or generates one, stores it in
       a ContextVar for loggers and exception handlers, and in request.state.

Responses produced by the catch-all handler in main.py bypass this middleware
(the exception unwinds past it), so that handler sets the header itself from
request_id_var; response_headers() builds it for both paths.
"""

import uuid
from contextvars import ContextVar
from typing import Dict

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

REQUEST_ID_HEADER = "X-Request-ID"

# Coroutine-local: concurrent requests on one event loop each see their own id.
request_id_var: ContextVar[str] = ContextVar("request_id", default="")


def response_headers() -> Dict[str, str]:
    """Headers carrying the current request id, or none outside a request."""
    rid = request_id_var.get("")
    return {REQUEST_ID_HEADER: rid} if rid else {}


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Assigns or propagates X-Request-ID for each request."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex[:8]
        request_id_var.set(rid)
        request.state.request_id = rid

        response = await call_next(request)
        response.headers.update(response_headers())
        return response
