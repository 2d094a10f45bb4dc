"""Pydantic schemas for user operations."""
from __future__ import annotations

from pydantic import BaseModel, Field


class UserBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=128)
    username: str = Field(..., min_length=1, max_length=64)


class UserCreate(UserBase):
    password: str = Field(..., min_length=1, max_length=128)


class UserUpdate(UserBase):
    password: str | None = Field(default=None, max_length=128)
