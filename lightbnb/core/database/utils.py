"""
Database utility functions for engine and session management.

This module provides the core utility functions for creating database engines,
session factories, and repository bundles. Built with async SQLAlchemy so that
no operation blocks the event loop while the store works.

Functions:
- create_engine: Creates async SQLAlchemy engine with URL normalization and
  case-sensitive LIKE on SQLite
- create_sessionmaker: Creates async session factory with safe defaults
- create_all / drop_all: Create or drop all tables from ORM metadata (for tests/dev)
- build_repos: Builds the repository bundle for dependency injection
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any

from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from . import entities  # noqa: F401  (registers tables on Base.metadata)
from .base import Base
from .repositories.properties import PropertyRepository
from .repositories.reservations import ReservationRepository
from .repositories.users import UserRepository


def normalize_url(db_url: str) -> str:
    """Rewrite any Postgres URL to use the ``asyncpg`` driver.

    ``postgres://``, ``postgresql://`` and ``postgresql+<driver>://`` all
    become ``postgresql+asyncpg://``. Other URLs are returned unchanged.
    """
    return re.sub(r"^postgres(?:ql)?(?:\+[a-z0-9_]+)?://", "postgresql+asyncpg://", db_url, count=1)


def _enable_case_sensitive_like(dbapi_connection, connection_record) -> None:
    # SQLite LIKE folds ASCII case unless told otherwise; Postgres LIKE never does
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA case_sensitive_like = ON")
    cursor.close()


def create_engine(db_url: str, *, echo: bool = False, pool_pre_ping: bool = True, **engine_kwargs: Any) -> AsyncEngine:
    """Create an async SQLAlchemy engine.

    SQLite connections get ``PRAGMA case_sensitive_like`` so that ``LIKE``
    matches the same rows it matches on Postgres.

    Args:
        db_url: Database connection URL
        echo: Log every emitted statement through SQLAlchemy
        pool_pre_ping: Test pooled connections before handing them out
        **engine_kwargs: Passed through to ``create_async_engine`` (e.g. ``poolclass``)

    Returns:
        Configured AsyncEngine instance
    """
    engine = create_async_engine(normalize_url(db_url), echo=echo, pool_pre_ping=pool_pre_ping, **engine_kwargs)
    if engine.dialect.name == "sqlite":
        event.listen(engine.sync_engine, "connect", _enable_case_sensitive_like)
    return engine


def create_sessionmaker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create an ``async_sessionmaker`` with safe defaults for this project.

    Args:
        engine: Async SQLAlchemy engine

    Returns:
        Configured async session factory
    """
    return async_sessionmaker(engine, expire_on_commit=False)


async def create_all(engine: AsyncEngine) -> None:
    """Create all tables for the current ORM metadata.

    This is mainly intended for tests and local development.

    Args:
        engine: Async SQLAlchemy engine
    """
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def drop_all(engine: AsyncEngine) -> None:
    """Drop all tables for the current ORM metadata."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


@dataclass(frozen=True)
class RepoBundle:
    """Convenience bundle of all repositories for dependency injection."""

    users: UserRepository
    properties: PropertyRepository
    reservations: ReservationRepository


def build_repos(*, session_factory: async_sessionmaker[AsyncSession]) -> RepoBundle:
    """Build a ``RepoBundle`` from a session factory.

    Args:
        session_factory: Async session factory shared by every repository

    Returns:
        Bundle containing all repository instances
    """
    return RepoBundle(
        users=UserRepository(session_factory),
        properties=PropertyRepository(session_factory),
        reservations=ReservationRepository(session_factory),
    )
