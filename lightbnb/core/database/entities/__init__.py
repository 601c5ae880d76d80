"""
Database entity models.

This package contains all database entity models, one module per table:

- users: registered users (guests and property owners)
- properties: rental listings
- reservations: guest stays at a property
- property_reviews: ratings left for a reservation

Importing the package registers every table on ``Base.metadata``.
"""

from . import properties, property_reviews, reservations, users
from .properties import Property
from .property_reviews import PropertyReview
from .reservations import Reservation
from .users import User

__all__ = [
    "Property",
    "PropertyReview",
    "Reservation",
    "User",
    "properties",
    "property_reviews",
    "reservations",
    "users",
]
