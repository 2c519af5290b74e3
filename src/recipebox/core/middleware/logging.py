"""Request logging middleware."""

from __future__ import annotations

import time
from typing import TYPE_CHECKING, Final

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from recipebox.observability.logging import bind_context, get_logger


if TYPE_CHECKING:
    from starlette.requests import Request
    from starlette.responses import Response
    from starlette.types import ASGIApp

logger = get_logger(__name__)

SLOW_REQUEST_SECONDS: Final[float] = 1.0


class LoggingMiddleware(BaseHTTPMiddleware):
    """Log each request's start and completion with its duration.

    Requests slower than slow_threshold seconds are also logged as a
    warning. API keys travel in headers, never in the logged query string.
    """

    def __init__(
        self,
        app: ASGIApp,
        *,
        exclude_paths: set[str] | None = None,
        slow_threshold: float = SLOW_REQUEST_SECONDS,
    ) -> None:
        super().__init__(app)
        self.exclude_paths = exclude_paths or {"/health", "/ready", "/favicon.ico"}
        self.slow_threshold = slow_threshold

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        if request.url.path in self.exclude_paths:
            return await call_next(request)

        bind_context(method=request.method, path=request.url.path)
        logger.info(
            "Request started",
            query_params=str(request.query_params) or None,
            client_ip=self._get_client_ip(request),
        )

        start = time.perf_counter()
        response = await call_next(request)
        elapsed = time.perf_counter() - start
        duration_ms = round(elapsed * 1000, 2)

        logger.info(
            "Request completed",
            status_code=response.status_code,
            duration_ms=duration_ms,
        )
        if elapsed > self.slow_threshold:
            logger.warning("Slow request detected", duration_ms=duration_ms)
        return response

    @staticmethod
    def _get_client_ip(request: Request) -> str:
        forwarded_for = request.headers.get("x-forwarded-for")
        if forwarded_for:
            return forwarded_for.split(",")[0].strip()
        if request.client:
            return request.client.host
        return "unknown"
