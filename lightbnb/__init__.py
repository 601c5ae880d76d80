"""LightBnB.

This package contains the data-access layer of the LightBnB property-rental
listing application.

High-level architecture
-----------------------

- ``lightbnb.core.config``: application settings bound from the environment.
- ``lightbnb.core.logging_config``: logging setup driven by those settings.
- ``lightbnb.core.database``:

  - SQLModel entities for users, properties, reservations and reviews.
  - Async repositories that build parameterized SQL and map rows back to
    plain records.
  - A module-level facade (``operations``) exposing one coroutine per query.

Typical workflow
----------------

Most callers only need ``lightbnb.core.database.operations``:

1. ``await get_all_properties({"city": "Vancouver"}, limit=5)``
2. ``await add_user({"name": ..., "email": ..., "password": ...})``
3. ``await get_all_reservations(guest_id)``
"""
