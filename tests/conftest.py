"""Shared pytest fixtures for all test suites."""

from datetime import UTC, date, datetime, timedelta

import pytest

from backend.tripplanner.db.inmemory import InMemoryItineraryRepository
from backend.tripplanner.itinerary.store import ItineraryStore


class FakeClock:
    """Deterministic UTC clock that advances one second per reading."""

    def __init__(self, start: datetime | None = None) -> None:
        self.now = start or datetime(2025, 5, 1, 12, 0, tzinfo=UTC)

    def __call__(self) -> datetime:
        current = self.now
        self.now = current + timedelta(seconds=1)
        return current


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def repository() -> InMemoryItineraryRepository:
    return InMemoryItineraryRepository()


@pytest.fixture
def store(repository: InMemoryItineraryRepository, clock: FakeClock) -> ItineraryStore:
    """Store over an in-memory repository with a deterministic clock."""
    return ItineraryStore(repository, clock=clock)


@pytest.fixture
def paris_trip(store: ItineraryStore) -> str:
    """Create a 3-day Paris trip for two travelers.

    Usage:
        def test_something(store, paris_trip):
            store.add_activity(paris_trip, date(2025, 6, 1), "morning", {...})
    """
    store.create_session(
        "trip-20250601",
        origin="NYC",
        destinations=["Paris"],
        start_date=date(2025, 6, 1),
        end_date=date(2025, 6, 3),
        num_travelers=2,
    )
    return "trip-20250601"
