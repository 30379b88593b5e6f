"""HTTP middleware: one access-log line per request."""

import logging
import time

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger("api.access")


def _log_access(request: Request, status: int, length: str, start: float, post_data: str) -> None:
    logger.info(
        "%s %s %s %s - %.3f ms %s",
        request.method,
        request.url.path,
        status,
        length,
        (time.perf_counter() - start) * 1000,
        post_data,
    )


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs method, path, status, content length and elapsed time. POST bodies are appended.

    Requests that end in an unhandled exception are logged as 500 before re-raising.
    """

    async def dispatch(self, request: Request, call_next):
        start = time.perf_counter()
        post_data = ""
        if request.method == "POST":
            body = await request.body()
            post_data = body.decode("utf-8", errors="replace")
        try:
            response = await call_next(request)
        except Exception:
            _log_access(request, 500, "-", start, post_data)
            raise
        _log_access(
            request,
            response.status_code,
            response.headers.get("content-length", "-"),
            start,
            post_data,
        )
        return response
