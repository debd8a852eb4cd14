"""Repository protocol interfaces for itinerary persistence."""

from typing import Protocol

from backend.tripplanner.models.itinerary import ItinerarySession


class ItineraryRepository(Protocol):
    """Durable storage of itinerary documents keyed by session id."""

    def load(self, session_id: str) -> ItinerarySession | None:
        """Load the document for a session.

        Args:
            session_id: Session id

        Returns:
            Itinerary document or None if not found

        Raises:
            StorageError: If the record cannot be read or is corrupt
        """
        ...

    def save(self, session: ItinerarySession) -> None:
        """Persist the complete document, replacing any previous version.

        Args:
            session: Itinerary document (keyed by session.id)

        Raises:
            StorageError: If the write fails; the previous version stays intact
        """
        ...

    def delete(self, session_id: str) -> bool:
        """Delete a session document.

        Args:
            session_id: Session id

        Returns:
            True if a document was deleted
        """
        ...

    def list_ids(self) -> list[str]:
        """List ids of all stored sessions."""
        ...
