"""Session models shared by all providers."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class SessionUser(BaseModel):
    """The user a session resolves to."""

    id: str = Field(..., description="User identifier")
    name: str | None = None
    email: str | None = None
    is_server_admin: bool = False

    model_config = {"frozen": True}


class AuthSession(BaseModel):
    """A resolved session.

    Attributes:
        user: The authenticated user.
        source: Which credential produced the session.
    """

    user: SessionUser
    source: Literal["api_key", "cookie", "header", "disabled"]

    model_config = {"frozen": True}
