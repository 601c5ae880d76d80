"""Test configuration for database unit tests.

This module provides common fixtures and utilities for testing the
database layer with in-memory SQLite and mocked dependencies.
"""

from __future__ import annotations

from datetime import date, timedelta
from typing import AsyncGenerator
from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker
from sqlalchemy.pool import StaticPool

from lightbnb.core.database.entities import Property, PropertyReview, Reservation, User
from lightbnb.core.database.utils import RepoBundle, build_repos, create_all, create_engine, create_sessionmaker


@pytest.fixture(scope="function")
async def in_memory_engine(test_config) -> AsyncGenerator[AsyncEngine, None]:
    """Create in-memory SQLite engine with all tables."""
    engine = create_engine(test_config.database.url, poolclass=StaticPool)
    await create_all(engine)

    try:
        yield engine
    finally:
        await engine.dispose()


@pytest.fixture(scope="function")
def session_factory(in_memory_engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Session factory bound to the in-memory engine."""
    return create_sessionmaker(in_memory_engine)


@pytest.fixture(scope="function")
def repos(session_factory) -> RepoBundle:
    """Repository bundle over the in-memory database."""
    return build_repos(session_factory=session_factory)


@pytest.fixture(scope="function")
def mock_session() -> AsyncMock:
    """Mock async database session."""
    session = AsyncMock()
    session.add = MagicMock()
    mock_result = MagicMock()
    session.execute = AsyncMock(return_value=mock_result)
    return session


@pytest.fixture(scope="function")
def mock_session_factory(mock_session: AsyncMock) -> MagicMock:
    """Session factory whose sessions are ``mock_session``."""
    factory = MagicMock()
    factory.return_value.__aenter__.return_value = mock_session
    factory.return_value.__aexit__.return_value = False
    return factory


@pytest.fixture(scope="function")
def sample_user_data() -> dict:
    """Sample user sign-up data."""
    return {
        "name": "Devin Sanders",
        "email": "tristanjacobs@gmail.com",
        "password": "$2a$10$FB/BOAVhpuLvpOREQVmvmezD4ED/.JBIDRh70tGevYzYzQgFId2u.",
    }


@pytest.fixture(scope="function")
def sample_property_data() -> dict:
    """Sample property data with the nightly cost in major units."""
    return {
        "owner_id": 1,
        "title": "Speed lamp",
        "description": "description",
        "thumbnail_photo_url": "https://images.pexels.com/photos/2086676/pexels-photo-2086676.jpeg?w=350",
        "cover_photo_url": "https://images.pexels.com/photos/2086676/pexels-photo-2086676.jpeg",
        "cost_per_night": 930.61,
        "parking_spaces": 6,
        "number_of_bathrooms": 4,
        "number_of_bedrooms": 8,
        "country": "Canada",
        "street": "536 Namsub Highway",
        "city": "Sotboske",
        "province": "Quebec",
        "post_code": "28142",
    }


def make_property(owner_id: int, title: str, city: str, cost_per_night: int) -> Property:
    """Build a Property row; ``cost_per_night`` is already in minor units."""
    return Property(
        owner_id=owner_id,
        title=title,
        description="description",
        thumbnail_photo_url=f"https://example.com/{title}-thumb.jpg",
        cover_photo_url=f"https://example.com/{title}-cover.jpg",
        cost_per_night=cost_per_night,
        parking_spaces=1,
        number_of_bathrooms=1,
        number_of_bedrooms=2,
        country="Canada",
        street="1 Main Street",
        city=city,
        province="British Columbia",
        post_code="V5K 0A1",
    )


@pytest.fixture(scope="function")
async def seeded(session_factory) -> dict:
    """Seed two users, four properties, reservations and reviews.

    Layout (costs in cents, ratings per reservation):

    - "Blank corner" Vancouver, owner 1, 8500, ratings 4 and 2 -> avg 3
    - "Habit mix" North Vancouver, owner 2, 12000, rating 5
    - "Headed know" Toronto, owner 1, 6400, rating 1
    - "No reviews" Vancouver, owner 2, 5000, never reviewed
    """
    today = date.today()
    async with session_factory() as s:
        owner = User(name="Owner One", email="owner1@example.com", password="hash")
        guest = User(name="Guest Two", email="guest2@example.com", password="hash")
        s.add_all([owner, guest])
        await s.flush()

        blank = make_property(owner.id, "Blank corner", "Vancouver", 8500)
        habit = make_property(guest.id, "Habit mix", "North Vancouver", 12000)
        headed = make_property(owner.id, "Headed know", "Toronto", 6400)
        unreviewed = make_property(guest.id, "No reviews", "Vancouver", 5000)
        s.add_all([blank, habit, headed, unreviewed])
        await s.flush()

        past_early = Reservation(
            guest_id=guest.id,
            property_id=blank.id,
            start_date=today - timedelta(days=90),
            end_date=today - timedelta(days=85),
        )
        past_late = Reservation(
            guest_id=guest.id,
            property_id=headed.id,
            start_date=today - timedelta(days=40),
            end_date=today - timedelta(days=30),
        )
        past_other_guest = Reservation(
            guest_id=owner.id,
            property_id=blank.id,
            start_date=today - timedelta(days=60),
            end_date=today - timedelta(days=55),
        )
        past_habit = Reservation(
            guest_id=owner.id,
            property_id=habit.id,
            start_date=today - timedelta(days=20),
            end_date=today - timedelta(days=15),
        )
        upcoming = Reservation(
            guest_id=guest.id,
            property_id=habit.id,
            start_date=today + timedelta(days=30),
            end_date=today + timedelta(days=35),
        )
        s.add_all([past_early, past_late, past_other_guest, past_habit, upcoming])
        await s.flush()

        s.add_all(
            [
                PropertyReview(guest_id=guest.id, property_id=blank.id, reservation_id=past_early.id, rating=4),
                PropertyReview(guest_id=owner.id, property_id=blank.id, reservation_id=past_other_guest.id, rating=2),
                PropertyReview(guest_id=owner.id, property_id=habit.id, reservation_id=past_habit.id, rating=5),
                PropertyReview(guest_id=guest.id, property_id=headed.id, reservation_id=past_late.id, rating=1),
                # Reviewed ahead of the stay; the reservation has not ended yet
                PropertyReview(guest_id=guest.id, property_id=habit.id, reservation_id=upcoming.id, rating=5),
            ]
        )
        await s.commit()

        return {
            "owner": owner,
            "guest": guest,
            "blank": blank,
            "habit": habit,
            "headed": headed,
            "unreviewed": unreviewed,
            "past_early": past_early,
            "past_late": past_late,
            "upcoming": upcoming,
        }


@pytest.fixture(scope="function")
async def mixed_reviews(session_factory) -> Property:
    """Seed one property reviewed once with 5 and once with 1."""
    today = date.today()
    async with session_factory() as s:
        owner = User(name="Owner", email="owner@example.com", password="hash")
        guest = User(name="Guest", email="guest@example.com", password="hash")
        s.add_all([owner, guest])
        await s.flush()

        mixed = make_property(owner.id, "Mixed", "Victoria", 9900)
        s.add(mixed)
        await s.flush()

        stays = [
            Reservation(
                guest_id=guest.id,
                property_id=mixed.id,
                start_date=today - timedelta(days=offset + 5),
                end_date=today - timedelta(days=offset),
            )
            for offset in (50, 10)
        ]
        s.add_all(stays)
        await s.flush()

        s.add_all(
            [
                PropertyReview(guest_id=guest.id, property_id=mixed.id, reservation_id=stay.id, rating=rating)
                for stay, rating in zip(stays, (5, 1))
            ]
        )
        await s.commit()

        return mixed
