"""
Base repository utilities.

This module provides the query-building helpers shared by the repositories:

- ``PredicateBuilder`` collects filter predicates, each bound to a single
  parameter, and applies them to a ``SELECT`` in one step.
- ``compile_statement`` / ``count_bound_parameters`` expose the SQL and the
  positional parameter list a statement will be executed with.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, List, Optional

from sqlalchemy import Select, and_, true
from sqlalchemy.engine import Dialect
from sqlalchemy.sql.compiler import Compiled
from sqlalchemy.sql.elements import ColumnElement

logger = logging.getLogger(__name__)

PredicateFactory = Callable[[Any], ColumnElement[bool]]


class PredicateBuilder:
    """Composable list of filter predicates.

    Predicates are conjoined over a constant ``true()`` base, so the first
    and subsequent filters are added the same way.

    Example::

        builder = PredicateBuilder()
        builder.where_if(options.city, lambda city: Property.city.like(f"%{city}%"))
        stmt = builder.apply(select(Property))
    """

    def __init__(self) -> None:
        self._where: List[ColumnElement[bool]] = []

    def where(self, predicate: ColumnElement[bool]) -> PredicateBuilder:
        """Add a row-level predicate."""
        self._where.append(predicate)
        return self

    def where_if(self, value: Any, factory: PredicateFactory) -> PredicateBuilder:
        """Add ``factory(value)`` as a row-level predicate when ``value`` is truthy."""
        if value:
            self.where(factory(value))
        return self

    def __len__(self) -> int:
        return len(self._where)

    def apply(self, stmt: Select) -> Select:
        """Apply every collected predicate to ``stmt``.

        Args:
            stmt: Select statement to filter

        Returns:
            The filtered statement
        """
        return stmt.where(and_(true(), *self._where))


def validate_limit(limit: Any) -> int:
    """Ensure a result limit is a positive integer.

    Raises:
        ValueError: If ``limit`` is not a positive ``int``
    """
    if isinstance(limit, bool) or not isinstance(limit, int) or limit < 1:
        raise ValueError(f"limit must be a positive integer, got {limit!r}")
    return limit


def compile_statement(stmt: Select, dialect: Optional[Dialect] = None) -> Compiled:
    """Compile ``stmt`` with bound parameters left as placeholders.

    Args:
        stmt: Statement to compile
        dialect: Target dialect; SQLAlchemy's default dialect when omitted

    Returns:
        The compiled statement (``str()`` for SQL, ``.params`` for values)
    """
    return stmt.compile(dialect=dialect)


def count_bound_parameters(stmt: Select, dialect: Optional[Dialect] = None) -> int:
    """Number of parameters ``stmt`` is executed with."""
    return len(compile_statement(stmt, dialect).params)


def log_statement(stmt: Select, dialect: Optional[Dialect] = None) -> None:
    """Log the SQL and parameters of ``stmt`` at DEBUG."""
    if logger.isEnabledFor(logging.DEBUG):
        compiled = compile_statement(stmt, dialect)
        logger.debug("SQL: %s | params: %s", compiled, compiled.params)
