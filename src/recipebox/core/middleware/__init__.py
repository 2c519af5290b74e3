"""Custom middleware components."""

from recipebox.core.middleware.logging import LoggingMiddleware
from recipebox.core.middleware.request_id import RequestIDMiddleware
from recipebox.core.middleware.security_headers import SecurityHeadersMiddleware


__all__ = [
    "LoggingMiddleware",
    "RequestIDMiddleware",
    "SecurityHeadersMiddleware",
]
