"""Pydantic DTOs for the admin session."""

from pydantic import BaseModel, Field


class LoginRequest(BaseModel):
    password: str = Field(..., min_length=1)


class SessionResponse(BaseModel):
    """Current gate state. ``token`` is only returned by a successful login."""

    authenticated: bool
    edit_mode: bool
    token: str | None = None
