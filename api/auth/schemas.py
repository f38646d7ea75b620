"""
Auth API schemas (request models).

Fields are optional at the schema level; the service layer owns the
required/format checks so clients get the documented messages.
"""

from __future__ import annotations

from pydantic import BaseModel


class RegisterRequest(BaseModel):
    username: str | None = None
    email: str | None = None
    password: str | None = None


class LoginRequest(BaseModel):
    email: str | None = None
    password: str | None = None
