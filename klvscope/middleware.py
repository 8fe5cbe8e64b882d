"""Custom FastAPI middlewares for observability."""
from __future__ import annotations

import logging
import time
from typing import Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from .monitoring import observe_request

logger = logging.getLogger("klvscope.http")


def route_path(request: Request) -> str:
    route = request.scope.get("route")
    return route.path if route else request.url.path


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log request metadata, latency, and status codes."""

    async def dispatch(self, request: Request, call_next: Callable[[Request], Response]) -> Response:  # type: ignore[override]
        start = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            duration_ms = (time.perf_counter() - start) * 1000
            path = route_path(request)
            logger.exception(
                "request failed",
                extra={"method": request.method, "path": path, "duration_ms": round(duration_ms, 2)},
            )
            observe_request(request.method, path, 500, duration_ms)
            raise

        duration_ms = (time.perf_counter() - start) * 1000
        path = route_path(request)
        level = logging.INFO
        if response.status_code >= 500:
            level = logging.ERROR
        elif response.status_code >= 400:
            level = logging.WARNING

        logger.log(
            level,
            "request completed",
            extra={
                "method": request.method,
                "path": path,
                "status_code": response.status_code,
                "client": request.client.host if request.client else None,
                "duration_ms": round(duration_ms, 2),
            },
        )
        observe_request(request.method, path, response.status_code, duration_ms)
        response.headers["X-Process-Time-Ms"] = f"{duration_ms:.2f}"
        return response
