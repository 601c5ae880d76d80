"""
Module-level data-access coroutines.

Each function runs one query through the repository bundle built on the
global session factory, so callers can simply ``await`` a lookup without
wiring repositories themselves::

    from lightbnb.core.database import operations

    user = await operations.get_user_with_email("tristanjacobs@gmail.com")
    listings = await operations.get_all_properties({"city": "Vancouver"}, limit=5)

Store errors are not translated: an ``IntegrityError`` from a duplicate
email, or any other ``DBAPIError``, propagates to the awaiting caller.
"""

from __future__ import annotations

from typing import Any, List, Mapping, Optional, Union

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from lightbnb.core.config import settings

from .entities.properties import Property
from .entities.users import User
from .repositories.properties import SearchOptionsInput
from .schemas.properties import PropertyCreate, PropertyListing
from .schemas.reservations import ReservationListing
from .schemas.users import UserCreate
from .session import async_session_maker
from .utils import RepoBundle, build_repos

_repos: Optional[RepoBundle] = None


def get_repos() -> RepoBundle:
    """Return the repository bundle, building it on first use."""
    global _repos

    if _repos is None:
        _repos = build_repos(session_factory=async_session_maker)
    return _repos


def configure(session_factory: async_sessionmaker[AsyncSession]) -> RepoBundle:
    """Point every operation at ``session_factory`` instead of the global one."""
    global _repos

    _repos = build_repos(session_factory=session_factory)
    return _repos


def reset() -> None:
    """Go back to the global session factory on next use."""
    global _repos

    _repos = None


def _limit_or_default(limit: Optional[int]) -> int:
    return settings.default_result_limit if limit is None else limit


# Users


async def get_user_with_email(email: str) -> Optional[User]:
    """Get a single user given their email, or None."""
    return await get_repos().users.get_by_email(email)


async def get_user_with_id(user_id: int) -> Optional[User]:
    """Get a single user given their id, or None."""
    return await get_repos().users.get_by_id(user_id)


async def add_user(user: Union[UserCreate, Mapping[str, Any]]) -> User:
    """Add a new user and return it with its generated id."""
    return await get_repos().users.create(user)


# Reservations


async def get_all_reservations(guest_id: int, limit: Optional[int] = None) -> List[ReservationListing]:
    """Get a guest's reservations that have already ended."""
    return await get_repos().reservations.list_past_for_guest(guest_id, _limit_or_default(limit))


# Properties


async def get_all_properties(options: SearchOptionsInput = None, limit: Optional[int] = None) -> List[PropertyListing]:
    """Get properties matching ``options``, cheapest first."""
    return await get_repos().properties.search(options, _limit_or_default(limit))


async def add_property(new_property: Union[PropertyCreate, Mapping[str, Any]]) -> Property:
    """Add a property; ``cost_per_night`` is given in major units."""
    return await get_repos().properties.create(new_property)
