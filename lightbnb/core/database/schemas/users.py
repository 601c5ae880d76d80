"""Schema models for user input."""

from __future__ import annotations

from pydantic import BaseModel, Field


class UserCreate(BaseModel):
    """Schema for signing up a user."""

    name: str = Field(description="Display name")
    email: str = Field(description="Login email address")
    password: str = Field(description="Password hash")
