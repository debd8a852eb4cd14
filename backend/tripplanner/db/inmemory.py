"""In-memory implementation of the itinerary repository."""

from backend.tripplanner.models.itinerary import ItinerarySession


class InMemoryItineraryRepository:
    """In-memory implementation of ItineraryRepository."""

    def __init__(self) -> None:
        self._sessions: dict[str, ItinerarySession] = {}

    def load(self, session_id: str) -> ItinerarySession | None:
        """Get a copy of the stored document."""
        session = self._sessions.get(session_id)
        if session is None:
            return None
        return session.model_copy(deep=True)

    def save(self, session: ItinerarySession) -> None:
        """Store a copy of the document."""
        self._sessions[session.id] = session.model_copy(deep=True)

    def delete(self, session_id: str) -> bool:
        """Delete a stored document."""
        return self._sessions.pop(session_id, None) is not None

    def list_ids(self) -> list[str]:
        """List stored session ids."""
        return list(self._sessions)
