"""
Property repository.

Provides the filtered property search and property insertion. The search
joins every property with the average rating of its reviews, filters by the
caller's options, groups per property, orders by nightly cost and truncates
to a limit.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, List, Mapping, Optional, Union

from sqlalchemy import Select, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from ..entities.properties import Property
from ..entities.property_reviews import PropertyReview
from ..schemas.properties import (
    PropertyCreate,
    PropertyListing,
    PropertySearchOptions,
    to_minor_units,
)
from .base import PredicateBuilder, log_statement, validate_limit

logger = logging.getLogger(__name__)

SearchOptionsInput = Union[PropertySearchOptions, Mapping[str, Any], None]


def _coerce_options(options: SearchOptionsInput) -> PropertySearchOptions:
    if options is None:
        return PropertySearchOptions()
    if isinstance(options, PropertySearchOptions):
        return options
    return PropertySearchOptions.model_validate(dict(options))


def search_predicates(options: PropertySearchOptions) -> PredicateBuilder:
    """Build one predicate per given search option.

    Every predicate filters joined review rows before grouping, so
    ``minimum_rating`` keeps a property when any of its reviews reaches the
    threshold and the average covers only those reviews.
    """
    return (
        PredicateBuilder()
        .where_if(options.city, lambda city: Property.city.like(f"%{city}%"))
        .where_if(options.owner_id, lambda owner_id: Property.owner_id == owner_id)
        .where_if(options.minimum_price_per_night, lambda price: Property.cost_per_night >= price)
        .where_if(options.maximum_price_per_night, lambda price: Property.cost_per_night <= price)
        .where_if(options.minimum_rating, lambda rating: PropertyReview.rating >= rating)
    )


def build_property_search(options: SearchOptionsInput = None, limit: int = 10) -> Select:
    """Compose the property search statement.

    Args:
        options: Search filters; ``None`` or empty means no filtering
        limit: Maximum number of rows to return

    Returns:
        Select yielding ``(Property, average_rating)`` rows

    Raises:
        ValueError: If ``limit`` is not a positive integer
    """
    limit = validate_limit(limit)
    search_options = _coerce_options(options)

    stmt = select(Property, func.avg(PropertyReview.rating).label("average_rating")).join(
        PropertyReview, Property.id == PropertyReview.property_id
    )
    stmt = search_predicates(search_options).apply(stmt)
    return stmt.group_by(Property.id).order_by(Property.cost_per_night).limit(limit)


@dataclass(frozen=True)
class PropertyRepository:
    """Data access for property listings."""

    session_factory: async_sessionmaker[AsyncSession]

    async def search(self, options: SearchOptionsInput = None, limit: int = 10) -> List[PropertyListing]:
        """
        Search properties with their average rating.

        Args:
            options: Optional filters (city, owner_id, minimum/maximum price
                per night in cents, minimum review rating)
            limit: Maximum number of rows to return

        Returns:
            Matching listings ordered by nightly cost, possibly empty.
        """
        logger.debug(f"Property search options: {options!r}, limit={limit}")
        stmt = build_property_search(options, limit)

        async with self.session_factory() as s:
            log_statement(stmt, s.bind.dialect)
            try:
                result = await s.execute(stmt)
            except SQLAlchemyError as e:
                logger.error(f"Property search failed: {e}")
                raise
            rows = result.all()

        return [
            PropertyListing.model_validate({**prop.model_dump(), "average_rating": average_rating})
            for prop, average_rating in rows
        ]

    async def create(self, new_property: Union[PropertyCreate, Mapping[str, Any]]) -> Property:
        """
        Persist a new property.

        The nightly cost is converted from major to minor units before the
        insert.

        Args:
            new_property: Property details with ``cost_per_night`` in major units

        Returns:
            The created Property including its generated id.
        """
        if not isinstance(new_property, PropertyCreate):
            new_property = PropertyCreate.model_validate(dict(new_property))

        row = Property(
            **new_property.model_dump(exclude={"cost_per_night"}),
            cost_per_night=to_minor_units(new_property.cost_per_night),
        )
        async with self.session_factory() as s:
            s.add(row)
            try:
                await s.commit()
            except SQLAlchemyError as e:
                await s.rollback()
                logger.error(f"Failed to add property '{new_property.title}': {e}")
                raise
            await s.refresh(row)
        logger.info(f"Added property {row.id} for owner {row.owner_id}")
        return row

    async def get_by_id(self, property_id: int) -> Optional[Property]:
        """
        Retrieve a property by its primary key.

        Returns:
            The Property if found, otherwise None.
        """
        async with self.session_factory() as s:
            return await s.get(Property, property_id)
