"""Unit tests for the database layer.

This package contains unit tests for lightbnb/core/database, including:

- Entity model tests (SQLModel)
- Statement composition tests (no database)
- Repository tests against in-memory SQLite and mocked sessions
- Error propagation tests
"""
