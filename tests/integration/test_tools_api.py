"""Integration tests for the tool and itinerary endpoints."""

from collections.abc import Iterator
from typing import Any
from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from backend.tripplanner.db.inmemory import InMemoryItineraryRepository
from backend.tripplanner.itinerary.errors import StorageError
from backend.tripplanner.itinerary.service import get_store
from backend.tripplanner.itinerary.store import ItineraryStore
from backend.tripplanner.main import app

TRIP: dict[str, Any] = {
    "session_id": "api-trip",
    "origin": "NYC",
    "destinations": ["Paris"],
    "start_date": "2025-06-01",
    "end_date": "2025-06-03",
    "num_travelers": 2,
}


@pytest.fixture
def repository() -> InMemoryItineraryRepository:
    return InMemoryItineraryRepository()


@pytest.fixture
def client(repository: InMemoryItineraryRepository) -> Iterator[TestClient]:
    """Create test client with an isolated store."""
    store = ItineraryStore(repository, lock_after_finalize=True)
    app.dependency_overrides[get_store] = lambda: store
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def started(client: TestClient) -> str:
    response = client.post("/tools/start_itinerary", json=TRIP)
    assert response.status_code == 200
    return TRIP["session_id"]


class TestToolCatalog:
    """Test GET /tools."""

    def test_lists_definitions(self, client: TestClient) -> None:
        response = client.get("/tools")

        assert response.status_code == 200
        tools = {tool["name"]: tool for tool in response.json()}
        assert len(tools) == 8
        assert "period" in tools["add_activity"]["parameters"]["properties"]


class TestToolCalls:
    """Test POST /tools/{name} and error mapping."""

    def test_start_itinerary(self, client: TestClient) -> None:
        response = client.post("/tools/start_itinerary", json=TRIP)

        assert response.status_code == 200
        assert response.json() == {"status": "ok", "itinerary_id": "api-trip", "days": 3}

    def test_unknown_tool_is_404(self, client: TestClient) -> None:
        response = client.post("/tools/book_hotel", json={"session_id": "x"})

        assert response.status_code == 404

    def test_unknown_session_is_404(self, client: TestClient) -> None:
        response = client.post("/tools/get_itinerary", json={"session_id": "ghost"})

        assert response.status_code == 404
        assert response.json()["error"] == "session_not_found"

    def test_invalid_range_is_422(self, client: TestClient) -> None:
        response = client.post(
            "/tools/start_itinerary",
            json={**TRIP, "start_date": "2025-06-05"},
        )

        assert response.status_code == 422
        assert response.json()["error"] == "invalid_range"

    def test_schema_violation_is_422_with_errors(self, client: TestClient, started: str) -> None:
        response = client.post(
            "/tools/update_preferences",
            json={"session_id": started, "preferences": {"smoking": True}},
        )

        assert response.status_code == 422
        body = response.json()
        assert body["error"] == "validation_error"
        assert body["errors"][0]["loc"] == ["preferences", "smoking"]

    def test_date_not_found_is_422(self, client: TestClient, started: str) -> None:
        response = client.post(
            "/tools/set_accommodation",
            json={"session_id": started, "date": "2025-06-09", "hotel_name": "Hotel Lumiere"},
        )

        assert response.status_code == 422
        assert response.json() == {
            "error": "date_not_found",
            "detail": "Date not in itinerary: 2025-06-09",
        }

    def test_finalized_session_is_409(self, client: TestClient, started: str) -> None:
        client.post("/tools/finalize_itinerary", json={"session_id": started})

        response = client.post(
            "/tools/add_activity",
            json={
                "session_id": started,
                "date": "2025-06-01",
                "period": "morning",
                "activity": {"title": "Louvre", "time": "09:00"},
            },
        )

        assert response.status_code == 409
        assert response.json()["error"] == "session_finalized"

    def test_storage_failure_is_503(
        self, client: TestClient, repository: InMemoryItineraryRepository, started: str
    ) -> None:
        with patch.object(repository, "save", side_effect=StorageError("disk full")):
            response = client.post("/tools/summarize_budget", json={"session_id": started})

        assert response.status_code == 503
        assert response.json()["error"] == "storage_error"


class TestItineraryEndpoint:
    """Test GET /itineraries/{id}."""

    def test_returns_document(self, client: TestClient, started: str) -> None:
        client.post(
            "/tools/add_activity",
            json={
                "session_id": started,
                "date": "2025-06-02",
                "period": "afternoon",
                "activity": {
                    "title": "Orsay Museum",
                    "time": "14:00",
                    "price": {"amount": 16, "currency": "EUR"},
                },
            },
        )

        response = client.get(f"/itineraries/{started}")

        assert response.status_code == 200
        document = response.json()
        assert document["id"] == started
        assert [day["date"] for day in document["days"]] == [
            "2025-06-01",
            "2025-06-02",
            "2025-06-03",
        ]
        assert document["days"][1]["afternoon"] == [
            {
                "title": "Orsay Museum",
                "time": "14:00",
                "price": {"amount": 16.0, "currency": "EUR"},
            }
        ]

    def test_missing_is_404(self, client: TestClient) -> None:
        response = client.get("/itineraries/ghost")

        assert response.status_code == 404
