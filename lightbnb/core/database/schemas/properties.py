"""
Schema models for property input, search options and search results.

Prices supplied by callers are in major currency units (dollars); the
database stores minor units (cents). ``to_minor_units`` is the single place
where that conversion happens.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field

MINOR_UNITS_PER_MAJOR = 100


def to_minor_units(amount: Union[int, float, Decimal, str]) -> int:
    """Convert a major-unit price to integer minor units, rounding half up.

    >>> to_minor_units(19.99)
    1999
    """
    scaled = Decimal(str(amount)) * MINOR_UNITS_PER_MAJOR
    return int(scaled.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


class PropertyCreate(BaseModel):
    """Schema for creating a property listing.

    ``cost_per_night`` is given in major units.
    """

    owner_id: int
    title: str
    description: Optional[str] = None
    thumbnail_photo_url: str
    cover_photo_url: str
    cost_per_night: Decimal = Field(ge=0, description="Nightly cost in major units")
    parking_spaces: int = Field(default=0, ge=0)
    number_of_bathrooms: int = Field(default=0, ge=0)
    number_of_bedrooms: int = Field(default=0, ge=0)
    country: str
    street: str
    city: str
    province: str
    post_code: str


class PropertySearchOptions(BaseModel):
    """Optional filters for the property search.

    A filter counts as given only when its value is truthy, so ``None``,
    an empty string and ``0`` all leave the search unfiltered on that field.
    Prices are compared as given against the stored ``cost_per_night``,
    so they are in minor units (cents).
    """

    model_config = ConfigDict(extra="ignore")

    city: Optional[str] = None
    owner_id: Optional[int] = None
    minimum_price_per_night: Optional[int] = None
    maximum_price_per_night: Optional[int] = None
    minimum_rating: Optional[float] = None


class PropertyListing(BaseModel):
    """A property row joined with its average review rating."""

    model_config = ConfigDict(from_attributes=True)

    id: int
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
    active: bool
    average_rating: Optional[float] = None
