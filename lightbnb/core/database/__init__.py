"""
Centralized database layer for LightBnB.

This package provides a unified location for all database entities and repositories.

Structure:
- entities/: Database entity models, one module per table
- repositories/: Data access layer, one module per business concern
- schemas/: Plain record models for repository input and joined results
- session.py: Global engine and session factory management
- utils.py: Database utility functions (engine, session, repo bundle)
- operations.py: Module-level coroutines over the global session factory
"""

from .base import Base
from .session import (
    async_session_maker,
    close_db,
    engine,
    init_db,
)
from .utils import (
    RepoBundle,
    build_repos,
    create_all,
    create_engine,
    create_sessionmaker,
    drop_all,
)

__all__ = [
    "Base",
    "RepoBundle",
    "async_session_maker",
    "build_repos",
    "close_db",
    "create_all",
    "create_engine",
    "create_sessionmaker",
    "drop_all",
    "engine",
    "init_db",
]
