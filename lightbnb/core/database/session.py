"""
Global database session and engine management.

This module manages the global AsyncEngine and async_sessionmaker instances
that are used throughout the application for database access. The engine
owns the connection pool; it connects lazily on first use.
"""

from __future__ import annotations

import logging

from lightbnb.core import logging_config  # noqa: F401  (configures logging on import)
from lightbnb.core.config import settings

from .utils import create_all, create_engine, create_sessionmaker

logger = logging.getLogger(__name__)

# Create global engine and session factory
engine = create_engine(
    settings.database.connection_url,
    echo=settings.database.echo,
    pool_pre_ping=settings.database.pool_pre_ping,
)
async_session_maker = create_sessionmaker(engine)


async def init_db() -> None:
    """
    Initialize the database.

    Creates every table that does not exist yet. Intended for local
    development; an existing LightBnB schema is left untouched.
    """
    logger.info(f"Creating tables on {engine.url.render_as_string(hide_password=True)}")
    await create_all(engine)


async def close_db() -> None:
    """Dispose of the global engine and its pooled connections."""
    await engine.dispose()
