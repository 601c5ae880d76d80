"""
Plain record schemas for repository input and output.

These schemas are separate from the entity models: inputs are validated
before any SQL is issued, and joined query results (which carry computed
columns such as ``average_rating``) are mapped onto them.
"""

from . import properties, reservations, users
from .properties import PropertyCreate, PropertyListing, PropertySearchOptions, to_minor_units
from .reservations import ReservationListing
from .users import UserCreate

__all__ = [
    "PropertyCreate",
    "PropertyListing",
    "PropertySearchOptions",
    "ReservationListing",
    "UserCreate",
    "properties",
    "reservations",
    "to_minor_units",
    "users",
]
