"""Pydantic request/response schemas for Users API."""
from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class UserCreateIn(BaseModel):
    name: Optional[str] = Field(default=None, examples=["John Doe"])
    email: Optional[str] = Field(default=None, examples=["john@example.com"])


class UserUpdateIn(BaseModel):
    """Empty or missing fields are left unchanged."""

    name: Optional[str] = Field(default=None, examples=["Jane Doe"])
    email: Optional[str] = Field(default=None, examples=["jane@example.com"])


class UserOut(BaseModel):
    id: int
    name: str
    email: str
    created_at: datetime
    updated_at: datetime


class ErrorOut(BaseModel):
    error: str
