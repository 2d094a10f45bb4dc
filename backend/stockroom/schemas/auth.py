"""Authentication-related schemas."""
from __future__ import annotations

from pydantic import BaseModel, Field


class LoginRequest(BaseModel):
    username: str = Field(..., min_length=1, max_length=64)
    password: str = Field(..., max_length=128)


class LoginResponse(BaseModel):
    message: str = "Login successful"
    token: str


class TokenClaims(BaseModel):
    """Identity carried inside a bearer token."""

    id: int
    username: str


class MessageResponse(BaseModel):
    message: str
