"""
Reservation entity models.

Reservations are read-only in this layer; they link a guest to a property
for a date range.
"""

from __future__ import annotations

from datetime import date
from typing import Optional

from sqlmodel import Field

from ..base import Base


class ReservationBase(Base):
    """Base fields for a reservation."""

    start_date: date = Field(description="First night of the stay")
    end_date: date = Field(index=True, description="Checkout date")
    property_id: int = Field(foreign_key="properties.id", index=True)
    guest_id: int = Field(foreign_key="users.id", index=True)


class Reservation(ReservationBase, table=True):
    """Persistent reservation.

    Table: reservations
    """

    __tablename__ = "reservations"
    __table_args__ = ({"extend_existing": True},)

    # Primary key
    id: Optional[int] = Field(default=None, primary_key=True)

    def __repr__(self) -> str:
        return f"Reservation(id={self.id}, guest={self.guest_id}, property={self.property_id})"
