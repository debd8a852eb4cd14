"""Tests for the SQL itinerary repository against SQLite."""

from collections.abc import Iterator
from datetime import UTC, date, datetime
from pathlib import Path
from unittest.mock import patch

import pytest
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session, sessionmaker

from backend.tripplanner.config import Settings
from backend.tripplanner.db.engine import (
    create_engine_from_settings,
    create_session_factory,
    init_schema,
)
from backend.tripplanner.db.sql_repositories import SqlItineraryRepository
from backend.tripplanner.itinerary.dates import empty_days
from backend.tripplanner.itinerary.errors import StorageError
from backend.tripplanner.itinerary.store import ItineraryStore
from backend.tripplanner.models import ItinerarySession


def make_session(session_id: str = "trip-1", origin: str = "NYC") -> ItinerarySession:
    start = date(2025, 6, 1)
    end = date(2025, 6, 2)
    return ItinerarySession(
        id=session_id,
        origin=origin,
        destinations=["Paris", "Rome"],
        start_date=start,
        end_date=end,
        days=empty_days(start, end),
        updated_at=datetime(2025, 5, 1, tzinfo=UTC),
    )


@pytest.fixture
def session_factory(tmp_path: Path) -> Iterator[sessionmaker[Session]]:
    settings = Settings(database_url=f"sqlite:///{tmp_path / 'itineraries.db'}")
    engine = create_engine_from_settings(settings)
    init_schema(engine)
    yield create_session_factory(engine)
    engine.dispose()


@pytest.fixture
def repo(session_factory: sessionmaker[Session]) -> SqlItineraryRepository:
    return SqlItineraryRepository(session_factory)


def test_engine_requires_database_url() -> None:
    with pytest.raises(ValueError, match="DATABASE_URL"):
        create_engine_from_settings(Settings(database_url=""))


def test_save_load_replace(repo: SqlItineraryRepository) -> None:
    assert repo.load("trip-1") is None

    repo.save(make_session(origin="NYC"))
    repo.save(make_session(origin="BOS"))

    loaded = repo.load("trip-1")
    assert loaded is not None
    assert loaded.origin == "BOS"
    assert loaded.destinations == ["Paris", "Rome"]
    assert repo.list_ids() == ["trip-1"]


def test_delete_and_list(repo: SqlItineraryRepository) -> None:
    repo.save(make_session("b"))
    repo.save(make_session("a"))

    assert repo.list_ids() == ["a", "b"]
    assert repo.delete("a") is True
    assert repo.delete("a") is False
    assert repo.list_ids() == ["b"]


def test_failed_commit_rolls_back(repo: SqlItineraryRepository) -> None:
    repo.save(make_session(origin="NYC"))

    with patch.object(Session, "commit", side_effect=OperationalError("COMMIT", {}, Exception())):
        with pytest.raises(StorageError):
            repo.save(make_session(origin="BOS"))

    loaded = repo.load("trip-1")
    assert loaded is not None
    assert loaded.origin == "NYC"


def test_store_over_sql(repo: SqlItineraryRepository) -> None:
    store = ItineraryStore(repo)
    store.create_session("trip-sql", "NYC", ["Paris"], date(2025, 6, 1), date(2025, 6, 3))
    store.add_activity("trip-sql", date(2025, 6, 2), "evening", {"title": "Opera", "time": "19:30"})
    store.update_preferences("trip-sql", {"vegetarian": True})

    session = store.get_itinerary("trip-sql")

    assert session.days[1].evening[0].title == "Opera"
    assert session.preferences.vegetarian is True
