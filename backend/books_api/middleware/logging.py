"""
Books API: Request Logging Middleware
=======================================

What:  One access-log line per request: method, path, status, duration, request id.
How:   Measures the time around call_next() and picks the level by status class
       (5xx → ERROR, 4xx → WARNING, otherwise INFO).
When:  Runs inside RequestIDMiddleware, so the request id is already set.

Store failures on list/get/create are not handled inside the route stack: they
surface here as an exception on their way to the catch-all handler in main.py.
They are logged as a 500 before being re-raised, so every request gets a line.

Request bodies are never logged.
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from books_api.middleware.request_id import request_id_var

logger = logging.getLogger("books_api.access")


def _level_for(status: int) -> int:
    if status >= 500:
        return logging.ERROR
    if status >= 400:
        return logging.WARNING
    return logging.INFO


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs each HTTP request and its outcome, including unhandled failures."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        start_time = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception:
            # Answered later by the catch-all handler with a 500
            self._log(request, 500, start_time)
            raise

        self._log(request, response.status_code, start_time)
        return response

    def _log(self, request: Request, status: int, start_time: float) -> None:
        duration_ms = (time.perf_counter() - start_time) * 1000
        client_ip = request.client.host if request.client else "unknown"
        rid = request_id_var.get("")
        logger.log(
            _level_for(status),
            "%s %s %d %.1fms [%s] from %s",
            request.method,
            request.url.path,
            status,
            duration_ms,
            rid,
            client_ip,
            extra={
                "request_id": rid,
                "method": request.method,
                "path": request.url.path,
                "status": status,
                "duration_ms": round(duration_ms, 2),
            },
        )
