"""
Property entity models.

A property is a rental listing owned by a user. Nightly cost is stored in
minor currency units (cents) so that prices never go through floating point
inside the database.
"""

from __future__ import annotations

from typing import Optional

from sqlmodel import Field

from ..base import Base


class PropertyBase(Base):
    """Base fields for a property listing."""

    owner_id: int = Field(foreign_key="users.id", index=True, description="Owning user")
    title: str = Field(max_length=255, description="Listing title")
    description: Optional[str] = Field(default=None, description="Free-form listing description")
    thumbnail_photo_url: str = Field(max_length=255, description="Small photo URL")
    cover_photo_url: str = Field(max_length=255, description="Large photo URL")

    # Stored in minor currency units
    cost_per_night: int = Field(default=0, index=True, description="Nightly cost in cents")
    parking_spaces: int = Field(default=0)
    number_of_bathrooms: int = Field(default=0)
    number_of_bedrooms: int = Field(default=0)

    # Address
    country: str = Field(max_length=255)
    street: str = Field(max_length=255)
    city: str = Field(max_length=255, index=True)
    province: str = Field(max_length=255)
    post_code: str = Field(max_length=255)

    active: bool = Field(default=True, description="Whether the listing is bookable")


class Property(PropertyBase, table=True):
    """Persistent property listing.

    Table: properties
    """

    __tablename__ = "properties"
    __table_args__ = ({"extend_existing": True},)

    # Primary key
    id: Optional[int] = Field(default=None, primary_key=True)

    def __repr__(self) -> str:
        return f"Property(id={self.id}, title={self.title}, city={self.city})"
