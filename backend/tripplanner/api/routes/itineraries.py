"""Itinerary read endpoint."""

from typing import Annotated, Any

from fastapi import APIRouter, Depends

from backend.tripplanner.itinerary.service import get_store
from backend.tripplanner.itinerary.store import ItineraryStore

router = APIRouter(prefix="/itineraries", tags=["itineraries"])


@router.get("/{session_id}")
def get_itinerary(
    session_id: str,
    store: Annotated[ItineraryStore, Depends(get_store)],
) -> dict[str, Any]:
    """Get the current itinerary document for a session."""
    return store.get_itinerary(session_id).to_document()
