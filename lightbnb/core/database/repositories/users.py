"""
User repository.

Looks users up by email or id and signs new users up. Lookups return
``None`` when no user matches; a duplicate email surfaces as the store's
``IntegrityError``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Union

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from ..entities.users import User
from ..schemas.users import UserCreate

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UserRepository:
    """Data access for users."""

    session_factory: async_sessionmaker[AsyncSession]

    async def get_by_email(self, email: str) -> Optional[User]:
        """
        Retrieve the first user with the given email.

        Args:
            email: Login email address.

        Returns:
            The User if found, otherwise None.
        """
        async with self.session_factory() as s:
            result = await s.execute(select(User).where(User.email == email).limit(1))
            return result.scalars().first()

    async def get_by_id(self, user_id: int) -> Optional[User]:
        """
        Retrieve a user by primary key.

        Args:
            user_id: The user identifier.

        Returns:
            The User if found, otherwise None.
        """
        async with self.session_factory() as s:
            result = await s.execute(select(User).where(User.id == user_id))
            return result.scalars().first()

    async def create(self, user: Union[UserCreate, Mapping[str, Any]]) -> User:
        """
        Persist a new user.

        Args:
            user: Name, email and password hash of the new user.

        Returns:
            The created User including its generated id.
        """
        if not isinstance(user, UserCreate):
            user = UserCreate.model_validate(dict(user))

        row = User(name=user.name, email=user.email, password=user.password)
        async with self.session_factory() as s:
            s.add(row)
            try:
                await s.commit()
            except SQLAlchemyError as e:
                await s.rollback()
                logger.error(f"Failed to add user '{user.email}': {e}")
                raise
            await s.refresh(row)
        logger.info(f"Added user {row.id}")
        return row
