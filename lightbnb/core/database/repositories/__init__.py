"""
Database repository layer.

Each repository is a frozen dataclass holding an ``async_sessionmaker``.
Every method opens its own session, runs one statement and closes the
session again, so concurrent calls only share the engine's connection pool.

Modules:
- base: PredicateBuilder and statement helpers
- users: user lookup and sign-up
- properties: filtered property search and property insertion
- reservations: a guest's past reservations
"""

from . import base, properties, reservations, users
from .base import PredicateBuilder, count_bound_parameters
from .properties import PropertyRepository, build_property_search
from .reservations import ReservationRepository, build_past_reservations
from .users import UserRepository

__all__ = [
    "PredicateBuilder",
    "PropertyRepository",
    "ReservationRepository",
    "UserRepository",
    "base",
    "build_past_reservations",
    "build_property_search",
    "count_bound_parameters",
    "properties",
    "reservations",
    "users",
]
