"""Security headers middleware."""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint


if TYPE_CHECKING:
    from starlette.requests import Request
    from starlette.responses import Response
    from starlette.types import ASGIApp


DEFAULT_CSP: Final[str] = (
    "default-src 'self'; "
    "script-src 'self' 'unsafe-inline'; "
    "style-src 'self' 'unsafe-inline'; "
    "img-src 'self' data: https:; "
    "frame-ancestors 'none'; "
    "base-uri 'self'; "
    "form-action 'self'"
)


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Add browser hardening headers to every response.

    JSON responses under the API prefix are additionally marked as
    non-cacheable since they are per-user.
    """

    def __init__(
        self,
        app: ASGIApp,
        *,
        api_prefix: str = "/api",
        content_security_policy: str = DEFAULT_CSP,
    ) -> None:
        super().__init__(app)
        self.api_prefix = api_prefix.rstrip("/") + "/"
        self.content_security_policy = content_security_policy

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        response = await call_next(request)

        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
        response.headers["Content-Security-Policy"] = self.content_security_policy

        if request.url.path.startswith(self.api_prefix):
            response.headers["Cache-Control"] = "no-store, private"

        return response
