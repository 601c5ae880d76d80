"""Schema models for reservation listings."""

from __future__ import annotations

from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict


class ReservationListing(BaseModel):
    """A past reservation joined with its property and average rating."""

    model_config = ConfigDict(from_attributes=True)

    # Reservation
    id: int
    guest_id: int
    property_id: int
    start_date: date
    end_date: date

    # Property
    owner_id: int
    title: str
    description: Optional[str] = None
    thumbnail_photo_url: str
    cover_photo_url: str
    cost_per_night: int
    parking_spaces: int
    number_of_bathrooms: int
    number_of_bedrooms: int
    country: str
    street: str
    city: str
    province: str
    post_code: str

    average_rating: Optional[float] = None
