"""
User entity models.

Users sign up with a name, an email address and a password hash. The email
address is the login identifier and is unique across the table.
"""

from __future__ import annotations

from typing import Optional

from sqlmodel import Field

from ..base import Base


class UserBase(Base):
    """Base fields for a user."""

    name: str = Field(max_length=255, description="Display name")
    email: str = Field(max_length=255, unique=True, index=True, description="Login email address")
    password: str = Field(max_length=255, description="Password hash")


class User(UserBase, table=True):
    """Persistent user record.

    Table: users
    """

    __tablename__ = "users"
    __table_args__ = ({"extend_existing": True},)

    # Primary key
    id: Optional[int] = Field(default=None, primary_key=True)

    def __repr__(self) -> str:
        return f"User(id={self.id}, email={self.email})"
