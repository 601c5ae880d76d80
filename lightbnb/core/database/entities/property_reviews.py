"""
Property review entity models.

Reviews are only read in aggregate, as the average rating joined onto
property and reservation listings.
"""

from __future__ import annotations

from typing import Optional

from sqlmodel import Field

from ..base import Base


class PropertyReviewBase(Base):
    """Base fields for a property review."""

    guest_id: int = Field(foreign_key="users.id")
    property_id: int = Field(foreign_key="properties.id", index=True)
    reservation_id: int = Field(foreign_key="reservations.id", index=True)
    rating: int = Field(default=0, ge=0, le=5, description="Star rating")
    message: Optional[str] = Field(default=None, description="Review text")


class PropertyReview(PropertyReviewBase, table=True):
    """Persistent property review.

    Table: property_reviews
    """

    __tablename__ = "property_reviews"
    __table_args__ = ({"extend_existing": True},)

    # Primary key
    id: Optional[int] = Field(default=None, primary_key=True)
