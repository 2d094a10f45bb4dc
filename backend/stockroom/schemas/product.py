"""Pydantic schemas for product operations."""
from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class ProductWrite(BaseModel):
    """Body accepted by both create and update."""

    pname: str = Field(..., min_length=1, max_length=255)
    description: str | None = None
    price: float = Field(..., ge=0)
    stock: int = Field(..., ge=0)


class ProductRead(BaseModel):
    """A stored row as-is; input limits belong to ProductWrite only."""

    pid: int
    pname: str
    description: str | None = None
    price: float
    stock: int
    created_at: datetime | None = None

    model_config = ConfigDict(from_attributes=True)


class ProductCreated(BaseModel):
    message: str = "Product added successfully"
    pid: int
