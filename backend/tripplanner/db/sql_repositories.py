"""SQL implementation of the itinerary repository."""

from pydantic import ValidationError
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from backend.tripplanner.db.models import ItinerarySessionRow
from backend.tripplanner.itinerary.errors import StorageError
from backend.tripplanner.models.itinerary import ItinerarySession


class SqlItineraryRepository:
    """SQL implementation of ItineraryRepository.

    Each call runs in its own short-lived session and transaction, so a
    failed save rolls back and leaves the previous row untouched.
    """

    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self._session_factory = session_factory

    def load(self, session_id: str) -> ItinerarySession | None:
        """Load the session document row."""
        try:
            with self._session_factory() as db:
                row = db.get(ItinerarySessionRow, session_id)
                document = dict(row.document) if row is not None else None
        except SQLAlchemyError as e:
            raise StorageError(f"Failed to read itinerary {session_id}: {e}") from e

        if document is None:
            return None

        try:
            return ItinerarySession.model_validate(document)
        except ValidationError as e:
            raise StorageError(f"Corrupt itinerary record {session_id}") from e

    def save(self, session: ItinerarySession) -> None:
        """Insert or replace the session document row."""
        row = ItinerarySessionRow(
            session_id=session.id,
            document=session.to_document(),
            updated_at=session.updated_at,
        )
        with self._session_factory() as db:
            try:
                db.merge(row)
                db.commit()
            except SQLAlchemyError as e:
                db.rollback()
                raise StorageError(f"Failed to write itinerary {session.id}: {e}") from e

    def delete(self, session_id: str) -> bool:
        """Delete the session document row."""
        with self._session_factory() as db:
            try:
                row = db.get(ItinerarySessionRow, session_id)
                if row is None:
                    return False
                db.delete(row)
                db.commit()
            except SQLAlchemyError as e:
                db.rollback()
                raise StorageError(f"Failed to delete itinerary {session_id}: {e}") from e
        return True

    def list_ids(self) -> list[str]:
        """List stored session ids."""
        try:
            with self._session_factory() as db:
                result = db.execute(
                    select(ItinerarySessionRow.session_id).order_by(ItinerarySessionRow.session_id)
                )
                return list(result.scalars().all())
        except SQLAlchemyError as e:
            raise StorageError(f"Failed to list itineraries: {e}") from e
