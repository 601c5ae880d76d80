"""
Reservation repository.

Lists a guest's completed stays together with the reserved property and the
average rating the guest's reviews gave it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List

from sqlalchemy import Select, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from ..entities.properties import Property
from ..entities.property_reviews import PropertyReview
from ..entities.reservations import Reservation
from ..schemas.reservations import ReservationListing
from .base import log_statement, validate_limit

logger = logging.getLogger(__name__)

# Property columns carried on a reservation listing; ``id`` stays the reservation's
_PROPERTY_COLUMNS = (
    Property.owner_id,
    Property.title,
    Property.description,
    Property.thumbnail_photo_url,
    Property.cover_photo_url,
    Property.cost_per_night,
    Property.parking_spaces,
    Property.number_of_bathrooms,
    Property.number_of_bedrooms,
    Property.country,
    Property.street,
    Property.city,
    Property.province,
    Property.post_code,
)


def build_past_reservations(guest_id: int, limit: int = 10) -> Select:
    """Compose the statement listing a guest's reservations that have ended.

    Args:
        guest_id: The guest's user id
        limit: Maximum number of rows to return

    Raises:
        ValueError: If ``limit`` is not a positive integer
    """
    limit = validate_limit(limit)
    return (
        select(
            Reservation.id,
            Reservation.guest_id,
            Reservation.property_id,
            Reservation.start_date,
            Reservation.end_date,
            *_PROPERTY_COLUMNS,
            func.avg(PropertyReview.rating).label("average_rating"),
        )
        .select_from(Property)
        .join(Reservation, Reservation.property_id == Property.id)
        .join(PropertyReview, PropertyReview.reservation_id == Reservation.id)
        .where(Reservation.guest_id == guest_id, Reservation.end_date < func.current_date())
        .group_by(Reservation.id, Property.id)
        .order_by(Reservation.start_date)
        .limit(limit)
    )


@dataclass(frozen=True)
class ReservationRepository:
    """Data access for reservations (read-only)."""

    session_factory: async_sessionmaker[AsyncSession]

    async def list_past_for_guest(self, guest_id: int, limit: int = 10) -> List[ReservationListing]:
        """
        List a guest's completed reservations.

        Args:
            guest_id: The guest's user id.
            limit: Max number of records to return.

        Returns:
            Reservations whose end date is before today, oldest stay first.
        """
        stmt = build_past_reservations(guest_id, limit)

        async with self.session_factory() as s:
            log_statement(stmt, s.bind.dialect)
            try:
                result = await s.execute(stmt)
            except SQLAlchemyError as e:
                logger.error(f"Reservation listing for guest {guest_id} failed: {e}")
                raise
            rows = result.mappings().all()

        return [ReservationListing.model_validate(dict(row)) for row in rows]
