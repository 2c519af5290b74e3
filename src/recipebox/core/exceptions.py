"""Custom exceptions and exception handlers.

Every error leaving the API has the same shape: ``{"error": "<message>"}``,
optionally with the request id. Handlers are registered for application
exceptions, Starlette HTTP errors, validation errors and anything
unhandled.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import FastAPI, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import ORJSONResponse
from pydantic import BaseModel
from starlette.exceptions import HTTPException as StarletteHTTPException

from recipebox.observability.logging import get_logger


if TYPE_CHECKING:
    from fastapi import Request

logger = get_logger(__name__)


class ErrorResponse(BaseModel):
    """Structured error response."""

    error: str
    request_id: str | None = None


class AppException(Exception):
    """Base application exception carrying an HTTP status and message."""

    def __init__(self, status_code: int, message: str) -> None:
        self.status_code = status_code
        self.message = message
        super().__init__(message)


class UnauthorizedException(AppException):
    """No authenticated user could be resolved."""

    def __init__(self, message: str = "Unauthorized") -> None:
        super().__init__(status.HTTP_401_UNAUTHORIZED, message)


class ForbiddenException(AppException):
    """The authenticated user may not access the resource."""

    def __init__(self, message: str = "Access denied") -> None:
        super().__init__(status.HTTP_403_FORBIDDEN, message)


class NotFoundException(AppException):
    """Resource not found exception."""

    def __init__(self, message: str = "Not found") -> None:
        super().__init__(status.HTTP_404_NOT_FOUND, message)


class InternalServerException(AppException):
    """Unexpected failure whose cause must not be disclosed."""

    def __init__(self, message: str = "Internal server error") -> None:
        super().__init__(status.HTTP_500_INTERNAL_SERVER_ERROR, message)


def _get_request_id(request: Request) -> str | None:
    return getattr(request.state, "request_id", None)


def error_response(
    request: Request,
    status_code: int,
    message: str,
) -> ORJSONResponse:
    """Build the standard error response body."""
    body = ErrorResponse(error=message, request_id=_get_request_id(request))
    return ORJSONResponse(
        status_code=status_code,
        content=body.model_dump(exclude_none=True),
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """Register exception handlers with the FastAPI application."""

    @app.exception_handler(AppException)
    async def app_exception_handler(
        request: Request,
        exc: AppException,
    ) -> ORJSONResponse:
        return error_response(request, exc.status_code, exc.message)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request,
        exc: StarletteHTTPException,
    ) -> ORJSONResponse:
        return error_response(request, exc.status_code, str(exc.detail))

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> ORJSONResponse:
        first = exc.errors()[0] if exc.errors() else {"msg": "Invalid request"}
        return error_response(
            request,
            status.HTTP_422_UNPROCESSABLE_ENTITY,
            str(first["msg"]),
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request,
        exc: Exception,
    ) -> ORJSONResponse:
        logger.opt(exception=exc).error(
            "Unhandled exception", path=request.url.path
        )
        return error_response(
            request,
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "Internal server error",
        )
