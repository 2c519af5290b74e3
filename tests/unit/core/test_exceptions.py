"""Unit tests for application exceptions and handlers.

Tests cover:
- Exception status codes and default messages
- Handler output shape
"""

from __future__ import annotations

import pytest
from fastapi import FastAPI, status
from fastapi.testclient import TestClient

from recipebox.core.exceptions import (
    AppException,
    ForbiddenException,
    InternalServerException,
    NotFoundException,
    UnauthorizedException,
    setup_exception_handlers,
)


pytestmark = pytest.mark.unit


class TestAppExceptions:
    """Tests for the AppException hierarchy."""

    @pytest.mark.parametrize(
        ("exc", "status_code", "message"),
        [
            (UnauthorizedException(), 401, "Unauthorized"),
            (ForbiddenException(), 403, "Access denied"),
            (NotFoundException(), 404, "Not found"),
            (NotFoundException("Recipe not found"), 404, "Recipe not found"),
            (InternalServerException(), 500, "Internal server error"),
        ],
    )
    def test_status_and_message(
        self,
        exc: AppException,
        status_code: int,
        message: str,
    ) -> None:
        """Should carry the HTTP status and message."""
        assert exc.status_code == status_code
        assert exc.message == message
        assert str(exc) == message


@pytest.fixture
def client() -> TestClient:
    """App with handlers and routes that raise."""
    app = FastAPI()
    setup_exception_handlers(app)

    @app.get("/forbidden")
    async def forbidden() -> None:
        raise ForbiddenException

    @app.get("/boom")
    async def boom() -> None:
        msg = "database password is hunter2"
        raise RuntimeError(msg)

    @app.get("/items/{item_id}")
    async def item(item_id: int) -> dict[str, int]:
        return {"id": item_id}

    return TestClient(app, raise_server_exceptions=False)


class TestExceptionHandlers:
    """Tests for setup_exception_handlers."""

    def test_app_exception_body(self, client: TestClient) -> None:
        """Should render {"error": message}."""
        response = client.get("/forbidden")
        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert response.json() == {"error": "Access denied"}

    def test_unhandled_exception_hides_detail(self, client: TestClient) -> None:
        """Should answer 500 without disclosing the cause."""
        response = client.get("/boom")
        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.json() == {"error": "Internal server error"}
        assert "hunter2" not in response.text

    def test_unknown_route(self, client: TestClient) -> None:
        """Should render Starlette 404s in the same shape."""
        response = client.get("/missing")
        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json() == {"error": "Not Found"}

    def test_validation_error(self, client: TestClient) -> None:
        """Should render validation failures as 422 with the first message."""
        response = client.get("/items/abc")
        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
        assert set(response.json()) == {"error"}
